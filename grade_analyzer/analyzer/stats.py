# analyzer/stats.py
"""Базовые статистические функции над последовательностью оценок."""
from typing import Sequence

from .config import GRADE_THRESHOLDS, FAILING_GRADE

def average(scores: Sequence[int]) -> float:
    """Средний балл. Возвращает 0.0 для пустой последовательности.

    0.0 здесь не означает "нет данных": пустоту вызывающий код проверяет отдельно.
    """
    if not scores:
        return 0.0
    return sum(scores) / len(scores)

def letter_grade(avg: float) -> str:
    """Переводит средний балл в букву. Сравнивается сырое значение, без округления."""
    for lower_bound, letter in GRADE_THRESHOLDS:
        if avg >= lower_bound:
            return letter
    return FAILING_GRADE
