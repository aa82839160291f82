# analyzer/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) анализатора оценок."""
import logging
import traceback
from typing import Callable

from . import io_utils, errors
from .config import LOG_LEVEL, LOG_FORMAT, MIN_SCORE, MAX_SCORE, STOP_SCORE, DONE_SENTINEL
from .models import StudentRecord, ClassSession
from .report import render_console_report
from .validation import ScoreAction, is_end_of_names, parse_score, classify_score

def configure_logging():
    """Настраивает логирование приложения один раз при запуске."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

def print_banner():
    """Выводит на экран заголовок программы."""
    print("=" * 49)
    print("    Student Grade Analyzer & Statistics Tool")
    print("=" * 49)

def collect_scores(student: StudentRecord, read: Callable[[str], str]):
    """Запрашивает оценки одного студента, пока не будет введён завершающий 0."""
    prompt = (f"Введите оценку ({MIN_SCORE}-{MAX_SCORE}) или '{STOP_SCORE}', "
              f"чтобы закончить ввод для этого студента: ")
    while True:
        try:
            raw = read(prompt)
        except EOFError:
            return

        try:
            value = parse_score(raw)
        except errors.InvalidScoreInputError:
            print("❌ Ошибка ввода: введите целое число.")
            continue

        action = classify_score(value, len(student.scores))
        if action is ScoreAction.FINISH:
            print(f"✅ Ввод оценок для {student.name} завершён.")
            return
        elif action is ScoreAction.NEED_SCORE:
            print(f"⚠️ Введите хотя бы одну корректную оценку для {student.name}.")
        elif action is ScoreAction.OUT_OF_RANGE:
            print(f"❌ Оценка {value} вне диапазона ({MIN_SCORE}-{MAX_SCORE}) "
                  f"для {student.name}. Пропущена.")
        else:
            student.add_score(value)

def collect_session(read: Callable[[str], str] = input) -> ClassSession:
    """Основной цикл ввода: студенты и их оценки до 'done' или пустой строки."""
    session = ClassSession()
    print(f"\nВведите данные студентов. Введите '{DONE_SENTINEL}' вместо имени для завершения.")

    while True:
        try:
            name = read(f"\nВведите имя студента (или '{DONE_SENTINEL}'): ")
        except EOFError:
            break
        if is_end_of_names(name):
            break

        student = StudentRecord(name)
        print(f"\n--- Ввод оценок для {student.name} ---")
        collect_scores(student, read)
        session.add_student(student)

    return session

def export_session(session: ClassSession):
    """Экспортирует отчёт; ошибка записи выводится в консоль и не прерывает программу."""
    try:
        path = io_utils.export_report(session)
        print(f"\n[SUCCESS] Отчёт сохранён в: {path}")
    except errors.FileProcessingError as e:
        print(f"\n[FATAL ERROR] Ошибка ввода/вывода при экспорте: {e}")

def main_cli(read: Callable[[str], str] = input) -> ClassSession:
    """Полный сценарий: ввод, отчёт на экран, экспорт в файл."""
    print_banner()
    session = collect_session(read)

    if not session:
        print("\nДанные студентов не введены. Завершение работы.")
        return session

    print(render_console_report(session))
    export_session(session)

    print("\n" + "=" * 49)
    try:
        read("Анализ завершён. Нажмите Enter, чтобы выйти...")
    except EOFError:
        pass
    return session

def main():
    configure_logging()
    try:
        main_cli()
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
    except Exception:
        print("\n!!! КРИТИЧЕСКАЯ ОШИБКА !!!")
        traceback.print_exc()
        raise SystemExit(1)

if __name__ == '__main__':
    main()
