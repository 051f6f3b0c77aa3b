import pytest

from qrstyle.regions import Region, classify, eye_origins

QR_SIZES = [21, 25, 33, 57, 101, 177]


@pytest.mark.parametrize("n", QR_SIZES)
def test_eye_blocks_cover_exactly_three_7x7_corners(n: int) -> None:
    counts = {region: 0 for region in Region}
    for row in range(n):
        for col in range(n):
            counts[classify(row, col, n)] += 1

    assert counts[Region.TOP_LEFT_EYE] == 49
    assert counts[Region.TOP_RIGHT_EYE] == 49
    assert counts[Region.BOTTOM_LEFT_EYE] == 49
    assert counts[Region.DATA] == n * n - 3 * 49


@pytest.mark.parametrize("n", QR_SIZES)
def test_eye_origins_match_classification(n: int) -> None:
    for region, (row, col) in eye_origins(n).items():
        assert classify(row, col, n) is region
        assert classify(row + 6, col + 6, n) is region


def test_boundaries_next_to_eyes_are_data() -> None:
    n = 25
    assert classify(7, 0, n) is Region.DATA
    assert classify(0, 7, n) is Region.DATA
    assert classify(0, n - 8, n) is Region.DATA
    assert classify(n - 8, 0, n) is Region.DATA
    assert classify(n - 1, n - 1, n) is Region.DATA
    assert classify(12, 12, n) is Region.DATA


def test_is_eye_flag() -> None:
    assert Region.TOP_LEFT_EYE.is_eye
    assert not Region.DATA.is_eye
