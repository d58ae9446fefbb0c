"""Layout configuration: parameters, read-only for the duration of one ``compute`` call."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class WidowLayoutStyle(str, enum.Enum):
    """How a force-completed trailing row is aligned."""

    JUSTIFY = "justify"
    CENTER = "center"
    LEFT = "left"


@dataclass(frozen=True)
class Padding:
    top: float = 10.0
    right: float = 10.0
    bottom: float = 10.0
    left: float = 10.0


@dataclass(frozen=True)
class Spacing:
    horizontal: float = 10.0
    vertical: float = 10.0


@dataclass
class LayoutConfig:
    """Controls container geometry, row targeting and the widow policy."""

    container_width: float = 1060.0
    container_padding: Padding = field(default_factory=Padding)
    box_spacing: Spacing = field(default_factory=Spacing)

    # Cycled round-robin across successive rows
    target_row_height: list[float] = field(default_factory=lambda: [320.0])
    target_row_height_tolerance: float = 0.25  # ±25% of the target aspect ratio

    # Absolute clamps are factor × target height of the row
    edge_case_min_row_height_factor: float = 0.5
    edge_case_max_row_height_factor: float = 2.0

    # None = unbounded
    max_num_rows: int | None = None
    force_aspect_ratio: float | None = None
    show_widows: bool = True

    # 0 = disabled, else every Nth row holds one full-width item
    full_width_breakout_row_cadence: int = 0
    widow_layout_style: WidowLayoutStyle = WidowLayoutStyle.LEFT

    def __post_init__(self) -> None:
        if isinstance(self.target_row_height, (int, float)):
            self.target_row_height = [float(self.target_row_height)]
        self.widow_layout_style = WidowLayoutStyle(self.widow_layout_style)

    @property
    def row_width(self) -> float:
        """Available width of every row (container minus left/right padding)."""
        return self.container_width - self.container_padding.left - self.container_padding.right

    def target_height_for_row(self, row_index: int) -> float:
        return self.target_row_height[row_index % len(self.target_row_height)]

    def is_breakout_row(self, row_index: int) -> bool:
        cadence = self.full_width_breakout_row_cadence
        return cadence != 0 and (row_index + 1) % cadence == 0
