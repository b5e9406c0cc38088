import pytest


@pytest.fixture
def draw_moves():
    """0-based columns that fill the board without either player connecting four.

    Final rows, bottom up: XOXOXOX, XOXOXOX, OXOXOXO, OXOXOXO, XOXOXOX, OXOXOXO
    """
    return (
        [0, 1, 2, 3, 4, 5, 6]
        + [1, 0, 3, 2, 5, 4, 0, 6]
        + [2, 1, 4, 3, 6, 5]
        + [0, 1, 2, 3, 4, 5, 6] * 3
    )
