"""Finder-pattern ("eye") detection by fixed-block coordinate math."""

from enum import Enum

EYE_SIZE = 7


class Region(Enum):
    TOP_LEFT_EYE = "top_left_eye"
    TOP_RIGHT_EYE = "top_right_eye"
    BOTTOM_LEFT_EYE = "bottom_left_eye"
    DATA = "data"

    @property
    def is_eye(self) -> bool:
        return self is not Region.DATA


def eye_origins(n: int) -> dict[Region, tuple[int, int]]:
    """(row, col) of the top-left module of each eye in an n x n matrix."""
    return {
        Region.TOP_LEFT_EYE: (0, 0),
        Region.TOP_RIGHT_EYE: (0, n - EYE_SIZE),
        Region.BOTTOM_LEFT_EYE: (n - EYE_SIZE, 0),
    }


def classify(row: int, col: int, n: int) -> Region:
    """Classify a module coordinate as one of the three eyes or plain data.

    The three 7x7 corner blocks never overlap for n >= 21, so the first
    match is the only match.
    """
    far = n - EYE_SIZE
    if row < EYE_SIZE:
        if col < EYE_SIZE:
            return Region.TOP_LEFT_EYE
        if col >= far:
            return Region.TOP_RIGHT_EYE
    elif row >= far and col < EYE_SIZE:
        return Region.BOTTOM_LEFT_EYE
    return Region.DATA
