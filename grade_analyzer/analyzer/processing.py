# analyzer/processing.py
"""Модуль для обработки данных: сводная статистика по группе и распределение букв."""
from typing import List, Dict, Any, Optional, Iterable

from .config import GRADE_LETTERS
from .stats import average

def pooled_scores(students: Iterable) -> List[int]:
    """Собирает оценки всех студентов в один плоский список в порядке ввода."""
    return [score for s in students for score in s.scores]

def get_class_statistics(students: List) -> Optional[Dict[str, Any]]:
    """Рассчитывает статистику по всей группе. Возвращает None, если оценок нет."""
    all_scores = pooled_scores(students)
    if not all_scores:
        return None

    # Пересчитывается при каждом вызове: данные за сессию не меняются
    return {
        "total_students": len(students),
        "total_scores": len(all_scores),
        "class_average": average(all_scores),
        "class_min": min(all_scores),
        "class_max": max(all_scores),
    }

def get_grade_distribution(students: Iterable) -> Dict[str, int]:
    """Считает студентов по буквам. Порядок всегда A, B, C, D, F, нулевые буквы тоже есть."""
    distribution = {letter: 0 for letter in GRADE_LETTERS}
    for s in students:
        distribution[s.letter_grade] += 1
    return distribution

def grade_share(count: int, total: int) -> float:
    """Доля студентов с данной буквой (0.0, если студентов нет)."""
    if total <= 0:
        return 0.0
    return count / total
