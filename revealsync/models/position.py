"""Slide position model."""
from dataclasses import dataclass


@dataclass
class SlidePosition:
    """
    Currently visible slide coordinate.

    ``horizontal`` is the top-level slide index, ``vertical`` the index inside
    its vertical stack. Mutated in place by the owning document binding.
    """
    horizontal: int = 0
    vertical: int = 0

    def __post_init__(self) -> None:
        self._check(self.horizontal, self.vertical)

    @staticmethod
    def _check(horizontal: int, vertical: int) -> None:
        if horizontal < 0 or vertical < 0:
            raise ValueError(f"Slide indices must be >= 0, got ({horizontal}, {vertical})")

    def move_to(self, horizontal: int, vertical: int) -> None:
        """Set both indices at once."""
        self._check(horizontal, vertical)
        self.horizontal = horizontal
        self.vertical = vertical

    def as_fragment(self) -> str:
        """``<horizontal>/<vertical>`` as used in reveal.js hash routes."""
        return f"{self.horizontal}/{self.vertical}"
