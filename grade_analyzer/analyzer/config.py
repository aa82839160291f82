# analyzer/config.py
"""Константы приложения: границы оценок, пороги букв, имя файла отчёта, логирование."""
import logging

# --- КОНФИГУРАЦИЯ ---
REPORT_FILENAME = "Class_Summary_Report.txt"
REPORT_ENCODING = "utf-8"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

MIN_SCORE = 0
MAX_SCORE = 100
# 0 завершает ввод оценок, но только если у студента уже есть оценка
STOP_SCORE = 0
DONE_SENTINEL = "done"

# Нижние границы (включительно), проверяются сверху вниз
GRADE_THRESHOLDS = (
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)
FAILING_GRADE = "F"
GRADE_LETTERS = ("A", "B", "C", "D", "F")

LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
