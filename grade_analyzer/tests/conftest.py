# tests/conftest.py
import pytest
from analyzer.models import StudentRecord, ClassSession

def make_session(*students) -> ClassSession:
    session = ClassSession()
    for name, scores in students:
        session.add_student(StudentRecord(name, scores))
    return session

@pytest.fixture
def sample_session() -> ClassSession:
    """Фикстура: два студента, общий средний балл 75.0."""
    return make_session(("Alice", [90, 80]), ("Bob", [70, 60]))

@pytest.fixture
def graded_session() -> ClassSession:
    """Фикстура: студенты со средними 95, 82 и 71."""
    return make_session(("Anna", [95]), ("Boris", [82]), ("Clara", [71]))

@pytest.fixture
def scripted_input():
    """Имитация пользовательского ввода. Когда строки кончаются, бросает EOFError."""
    def factory(lines):
        remaining = iter(lines)
        prompts = []

        def fake_input(prompt=""):
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        fake_input.prompts = prompts
        return fake_input
    return factory
