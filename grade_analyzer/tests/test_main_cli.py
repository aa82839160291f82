# tests/test_main_cli.py
from analyzer.main import main_cli, collect_session

REPORT = "Class_Summary_Report.txt"

def test_premature_zero_is_ignored(scripted_input, capsys):
    """0 до первой оценки не сохраняется и не завершает ввод."""
    read = scripted_input(["Alice", "0", "100", "85", "0", "done"])
    session = collect_session(read)

    assert [s.scores for s in session.students] == [(100, 85)]
    assert "Введите хотя бы одну корректную оценку для Alice" in capsys.readouterr().out

def test_invalid_inputs_do_not_change_state(scripted_input, capsys):
    read = scripted_input(["Bob", "abc", "150", "-1", "70", "0", ""])
    session = collect_session(read)

    assert session.students[0].scores == (70,)
    output = capsys.readouterr().out
    assert "Ошибка ввода" in output
    assert "Оценка 150 вне диапазона" in output
    assert "Оценка -1 вне диапазона" in output

def test_student_without_scores_is_dropped(scripted_input):
    # Ввод обрывается до первой оценки у Bob
    read = scripted_input(["Alice", "90", "0", "Bob", "abc"])
    session = collect_session(read)
    assert [s.name for s in session.students] == ["Alice"]

def test_cli_full_run(scripted_input, capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    read = scripted_input(["Alice", "90", "80", "0", "Bob", "70", "60", "0", "DONE", ""])
    main_cli(read)

    output = capsys.readouterr().out
    assert "Class Average Grade:     75.00" in output
    assert "Letter Grade Distribution:" in output
    assert "  F: 0 Students (0.0%)" in output
    assert "[SUCCESS]" in output

    content = (tmp_path / REPORT).read_text(encoding="utf-8")
    assert "Lowest Grade in Class:   60" in content
    assert "Letter Grade Distribution" not in content
    assert read.prompts[-1].startswith("Анализ завершён")

def test_cli_no_students_exits_early(scripted_input, capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    main_cli(scripted_input(["done"]))

    assert "Данные студентов не введены" in capsys.readouterr().out
    assert not (tmp_path / REPORT).exists()

def test_cli_export_failure_is_reported(scripted_input, capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / REPORT).mkdir()
    read = scripted_input(["Alice", "95", "0", "", ""])
    main_cli(read)

    output = capsys.readouterr().out
    assert "[FATAL ERROR]" in output
    assert read.prompts[-1].startswith("Анализ завершён")

def test_huge_number_is_reported_and_entry_continues(scripted_input, capsys):
    read = scripted_input(["Alice", "9" * 5000, "70", "0", "done"])
    session = collect_session(read)

    assert session.students[0].scores == (70,)
    assert "Ошибка ввода" in capsys.readouterr().out

def test_cli_no_students_keeps_previous_report(scripted_input, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / REPORT).write_text("прошлый отчёт", encoding="utf-8")
    main_cli(scripted_input(["done"]))

    assert (tmp_path / REPORT).read_text(encoding="utf-8") == "прошлый отчёт"
