# analyzer/io_utils.py
"""Модуль для операций ввода/вывода: экспорт отчёта в текстовый файл."""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .config import REPORT_FILENAME, REPORT_ENCODING
from .errors import FileProcessingError, EmptySessionError
from .models import ClassSession
from .report import render_file_report, ReportLayout, DEFAULT_LAYOUT

logger = logging.getLogger(__name__)

def write_report_file(filepath: Union[str, Path], text: str) -> Path:
    """Записывает весь текст отчёта одной операцией, перезаписывая старый файл."""
    path = Path(filepath)
    try:
        with open(path, mode='w', encoding=REPORT_ENCODING, newline='') as file:
            file.write(text)
    except OSError as e:
        logger.error("Не удалось записать отчёт %s: %s", path, e)
        raise FileProcessingError(f"Ошибка записи в файл {path}: {e}") from e
    return path.resolve()

def export_report(session: ClassSession, filepath: Optional[Union[str, Path]] = None,
                  generated_at: Optional[datetime] = None,
                  layout: ReportLayout = DEFAULT_LAYOUT) -> Path:
    """Экспортирует отчёт по группе в файл (по умолчанию в текущем каталоге)."""
    if not session:
        raise EmptySessionError("Нет ни одного студента с оценками. Отчёт не создан.")

    if filepath is None:
        filepath = Path.cwd() / REPORT_FILENAME
    if generated_at is None:
        generated_at = datetime.now()

    text = render_file_report(session, generated_at, layout)
    path = write_report_file(filepath, text)
    logger.info("Отчёт по %d студентам записан в %s", len(session), path)
    return path
