# tests/test_stats.py
import pytest
from analyzer.stats import average, letter_grade

def test_average_empty_is_zero():
    assert average([]) == 0.0

def test_average_matches_sum_over_len():
    scores = [70, 85, 91]
    assert average(scores) == sum(scores) / len(scores)
    assert isinstance(average([100]), float)

@pytest.mark.parametrize("avg, expected", [
    (100.0, 'A'),
    (90.0, 'A'),
    (89.99, 'B'),
    (89.999, 'B'),
    (80.0, 'B'),
    (79.99, 'C'),
    (70.0, 'C'),
    (69.99, 'D'),
    (60.0, 'D'),
    (59.99, 'F'),
    (0.0, 'F'),
])
def test_letter_grade_boundaries(avg, expected):
    assert letter_grade(avg) == expected
