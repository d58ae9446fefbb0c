"""LayoutItem / LayoutResult: the placed boxes flowing out of the engine."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class LayoutItem:
    """One placed (or pending) element. Geometry stays 0 until its row completes."""

    aspect_ratio: float = 1.0
    forced_aspect_ratio: bool = False
    top: float = 0.0
    left: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass
class LayoutResult:
    """Output of ``compute``: boxes are index-aligned with the input ratios."""

    container_height: float
    widow_count: int = 0
    boxes: list[LayoutItem] = field(default_factory=list)

    @property
    def num_boxes(self) -> int:
        return len(self.boxes)
