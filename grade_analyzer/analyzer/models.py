# analyzer/models.py
"""Модуль, определяющий основные модели данных: StudentRecord и ClassSession."""
import logging
from typing import List, Dict, Any, Optional, Tuple

from .config import MIN_SCORE, MAX_SCORE
from .errors import DataValidationError, GradeAnalyzerError
from .stats import average, letter_grade
from . import processing

logger = logging.getLogger(__name__)

class StudentRecord:
    """Представляет студента: имя и оценки в порядке ввода."""
    def __init__(self, name: str, scores: Optional[List[int]] = None):
        if not name or not isinstance(name, str) or not name.strip():
            raise ValueError("Имя студента не может быть пустым.")

        self.name = name.strip()
        self._scores: List[int] = []
        self._closed = False
        for score in scores or []:
            self.add_score(score)

    def add_score(self, score: int):
        """Добавляет оценку. Оценка вне диапазона 0-100 не попадает в модель."""
        if self._closed:
            raise GradeAnalyzerError(f"Ввод оценок для {self.name} уже завершён.")
        if not isinstance(score, int) or isinstance(score, bool):
            raise DataValidationError(f"Оценка '{score}' должна быть целым числом.")
        if score < MIN_SCORE or score > MAX_SCORE:
            raise DataValidationError(
                f"Оценка {score} недопустима. Разрешен диапазон {MIN_SCORE}-{MAX_SCORE}."
            )
        self._scores.append(score)

    def close(self):
        """Запрещает дальнейшее добавление оценок."""
        self._closed = True

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def scores(self) -> Tuple[int, ...]:
        return tuple(self._scores)

    @property
    def average(self) -> float:
        """Рассчитывает средний балл студента. Возвращает 0.0, если оценок нет."""
        return average(self._scores)

    @property
    def minimum(self) -> int:
        # Для пустого списка min() бросает ValueError: такие записи в сессию не попадают
        return min(self._scores)

    @property
    def maximum(self) -> int:
        return max(self._scores)

    @property
    def letter_grade(self) -> str:
        return letter_grade(self.average)

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"StudentRecord(name='{self.name}', scores={self._scores}, average={self.average:.2f})"


class ClassSession:
    """Все сохранённые студенты одного запуска. Только добавление, без удаления."""
    def __init__(self):
        self._students: List[StudentRecord] = []

    def add_student(self, record: StudentRecord) -> bool:
        """Сохраняет студента, если у него есть хотя бы одна оценка.

        Студент без оценок молча отбрасывается. После сохранения запись закрывается.
        """
        if not record.scores:
            logger.info("Студент %s без оценок не добавлен в сессию.", record.name)
            return False
        record.close()
        self._students.append(record)
        return True

    @property
    def students(self) -> List[StudentRecord]:
        return list(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def __bool__(self) -> bool:
        return bool(self._students)

    def pooled_scores(self) -> List[int]:
        return processing.pooled_scores(self._students)

    def statistics(self) -> Optional[Dict[str, Any]]:
        return processing.get_class_statistics(self._students)

    def grade_distribution(self) -> Dict[str, int]:
        return processing.get_grade_distribution(self._students)
