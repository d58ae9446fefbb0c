"""Engine errors."""

from __future__ import annotations


class InvalidAspectRatio(ValueError):
    """An input aspect ratio is not a finite number (e.g. a zero-height image)."""

    def __init__(self, index: int, aspect_ratio: float) -> None:
        super().__init__(f"Item {index} has an invalid aspect ratio")
        self.index = index
        self.aspect_ratio = aspect_ratio
