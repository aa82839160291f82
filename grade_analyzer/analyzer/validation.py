# analyzer/validation.py
"""Правила разбора и проверки консольного ввода, отделённые от самого чтения строк."""
import re
from enum import Enum

from .config import MIN_SCORE, MAX_SCORE, STOP_SCORE, DONE_SENTINEL
from .errors import InvalidScoreInputError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

class ScoreAction(Enum):
    """Что делать с введённой целой оценкой."""
    ACCEPT = "accept"
    FINISH = "finish"
    NEED_SCORE = "need_score"
    OUT_OF_RANGE = "out_of_range"

def is_end_of_names(raw: str) -> bool:
    """Пустая строка или 'done' (в любом регистре) завершает ввод студентов."""
    name = raw.strip()
    return not name or name.lower() == DONE_SENTINEL

def parse_score(raw: str) -> int:
    """Разбирает строку как целое число, иначе бросает InvalidScoreInputError."""
    text = raw.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise InvalidScoreInputError(f"'{raw}' не является целым числом.")
    try:
        return int(text)
    except ValueError as e:
        # Слишком длинная строка цифр
        raise InvalidScoreInputError(f"'{raw[:20]}...' не является допустимым числом.") from e

def classify_score(value: int, accepted_count: int) -> ScoreAction:
    """Определяет действие для оценки с учётом уже принятых оценок студента."""
    if value == STOP_SCORE:
        # Завершить ввод можно только после хотя бы одной принятой оценки
        return ScoreAction.FINISH if accepted_count > 0 else ScoreAction.NEED_SCORE
    if MIN_SCORE <= value <= MAX_SCORE:
        return ScoreAction.ACCEPT
    return ScoreAction.OUT_OF_RANGE
