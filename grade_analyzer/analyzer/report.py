# analyzer/report.py
"""Формирование текстовых отчётов: для консоли и для файла."""
from dataclasses import dataclass
from datetime import datetime
from typing import List

from .config import TIMESTAMP_FORMAT
from .models import StudentRecord, ClassSession
from .processing import grade_share

REPORT_TITLE = "STUDENT GRADE ANALYZER - CLASS SUMMARY REPORT"

@dataclass(frozen=True)
class ReportLayout:
    """Ширина колонок и точность чисел в отчёте."""
    name_width: int = 20
    average_width: int = 8
    score_width: int = 5
    letter_width: int = 8
    average_precision: int = 2
    percent_precision: int = 1
    rule_width: int = 83

DEFAULT_LAYOUT = ReportLayout()

def _fit(text: str, width: int) -> str:
    """Выравнивает по левому краю и обрезает до ширины колонки."""
    return f"{text[:width]:<{width}}"

def render_header_row(layout: ReportLayout = DEFAULT_LAYOUT) -> str:
    return " | ".join([
        _fit("Student Name", layout.name_width),
        _fit("Average", layout.average_width),
        _fit("Min", layout.score_width),
        _fit("Max", layout.score_width),
        _fit("Letter", layout.letter_width),
        "Grades",
    ])

def render_student_line(record: StudentRecord, layout: ReportLayout = DEFAULT_LAYOUT) -> str:
    """Одна строка таблицы: имя, средний, мин, макс, буква и все оценки по порядку."""
    scores_str = ", ".join(map(str, record.scores))
    return " | ".join([
        _fit(record.name, layout.name_width),
        f"{record.average:<{layout.average_width}.{layout.average_precision}f}",
        f"{record.minimum:<{layout.score_width}}",
        f"{record.maximum:<{layout.score_width}}",
        f"{record.letter_grade:<{layout.letter_width}}",
        f"[{scores_str}]",
    ])

def render_student_table(session: ClassSession, layout: ReportLayout = DEFAULT_LAYOUT) -> List[str]:
    rule = "-" * layout.rule_width
    lines = ["--- INDIVIDUAL STUDENT REPORT ---", rule, render_header_row(layout), rule]
    lines.extend(render_student_line(s, layout) for s in session.students)
    lines.append(rule)
    return lines

def render_class_summary(session: ClassSession, layout: ReportLayout = DEFAULT_LAYOUT,
                         include_distribution: bool = True) -> List[str]:
    """Блок статистики по группе; распределение букв добавляется по флагу."""
    stats = session.statistics()
    lines = ["--- CLASS STATISTICS SUMMARY ---"]
    if not stats:
        lines.append("No grades available to calculate class statistics.")
        return lines

    lines.append(f"Total Students Analyzed: {stats['total_students']}")
    lines.append(f"Total Grades Counted:    {stats['total_scores']}")
    lines.append(f"Class Average Grade:     {stats['class_average']:.{layout.average_precision}f}")
    lines.append(f"Highest Grade in Class:  {stats['class_max']}")
    lines.append(f"Lowest Grade in Class:   {stats['class_min']}")

    if include_distribution:
        lines.append("")
        lines.append("Letter Grade Distribution:")
        total = stats["total_students"]
        for letter, count in session.grade_distribution().items():
            share = grade_share(count, total)
            lines.append(f"  {letter}: {count} Students ({share:.{layout.percent_precision}%})")
    return lines

def render_console_report(session: ClassSession, layout: ReportLayout = DEFAULT_LAYOUT) -> str:
    lines = [""]
    lines.extend(render_student_table(session, layout))
    lines.append("")
    lines.extend(render_class_summary(session, layout, include_distribution=True))
    return "\n".join(lines)

def render_file_report(session: ClassSession, generated_at: datetime,
                       layout: ReportLayout = DEFAULT_LAYOUT) -> str:
    """Полный текст файла отчёта. Распределение букв в файл не выводится."""
    banner = "=" * layout.rule_width
    lines = [
        banner,
        REPORT_TITLE.center(layout.rule_width).rstrip(),
        f"Report Generated: {generated_at.strftime(TIMESTAMP_FORMAT)}",
        banner,
        "",
    ]
    lines.extend(render_student_table(session, layout))
    lines.append("")
    lines.extend(render_class_summary(session, layout, include_distribution=False))
    return "\n".join(lines) + "\n"
