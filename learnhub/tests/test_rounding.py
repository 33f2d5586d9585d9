import pytest

from learnhub.domain.shared.rounding import percent


@pytest.mark.parametrize(
    "part, whole, expected",
    [
        (1, 4, 25),
        (4, 4, 100),
        (0, 3, 0),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),
        (5, 8, 63),
        (1, 200, 1),
    ],
)
def test_percent_rounds_half_up(part, whole, expected):
    assert percent(part, whole) == expected


def test_percent_rejects_empty_whole():
    with pytest.raises(ValueError):
        percent(1, 0)
