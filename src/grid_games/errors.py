from __future__ import annotations


class BoardShapeError(RuntimeError):
    """A board no longer has the dimensions it was created with."""

    def __init__(self, expected: tuple[int, int], actual: tuple[int, ...]) -> None:
        super().__init__(f"board shape drifted: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual
