# analyzer/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class GradeAnalyzerError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class DataValidationError(GradeAnalyzerError):
    """Исключение, связанное с некорректными данными (оценка вне диапазона)."""
    pass

class InvalidScoreInputError(GradeAnalyzerError):
    """Исключение, когда введённая строка не является целым числом."""
    pass

class FileProcessingError(GradeAnalyzerError):
    """Исключение, связанное с ошибками файловых операций."""
    pass

class EmptySessionError(GradeAnalyzerError):
    """Исключение при попытке экспорта отчёта без единого студента."""
    pass
