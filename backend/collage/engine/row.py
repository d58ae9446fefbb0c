"""Row packer. Decides, for one row and one incoming item, accept / reject / close.

A row is Open until exactly one completion step moves it to Finalized with a
height. Completion clamps the height, lays items out left to right and then
applies a style correction (Justify for normally completed rows, the
configured widow style for rows force-completed after the input runs out).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from collage.engine.config import WidowLayoutStyle
from collage.engine.items import LayoutItem
from collage.utils.math_helpers import cumulative_rounded_errors, round_half_away

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RowOpen:
    """Row still accepting items."""


@dataclass(frozen=True)
class RowFinalized:
    height: float


RowState = Union[RowOpen, RowFinalized]


@dataclass(frozen=True)
class Accepted:
    """Item absorbed; the row may or may not have closed."""


@dataclass(frozen=True)
class Rejected:
    """Row closed without the item; the caller must place it on a fresh row."""

    item: LayoutItem


AddOutcome = Union[Accepted, Rejected]


@dataclass
class Row:
    top: float
    left: float
    width: float  # available width (container minus left/right padding)
    spacing: float
    target_row_height: float
    target_row_height_tolerance: float
    edge_case_min_row_height: float
    edge_case_max_row_height: float
    widow_layout_style: WidowLayoutStyle = WidowLayoutStyle.LEFT
    is_breakout_row: bool = False
    items: list[LayoutItem] = field(default_factory=list)
    state: RowState = field(default_factory=RowOpen)

    @property
    def min_aspect_ratio(self) -> float:
        return self.width / self.target_row_height * (1.0 - self.target_row_height_tolerance)

    @property
    def max_aspect_ratio(self) -> float:
        return self.width / self.target_row_height * (1.0 + self.target_row_height_tolerance)

    @property
    def is_complete(self) -> bool:
        return isinstance(self.state, RowFinalized)

    @property
    def height(self) -> float:
        """Final height, 0.0 while the row is open."""
        if isinstance(self.state, RowFinalized):
            return self.state.height
        return 0.0

    def _width_without_spacing(self, count: int) -> float:
        return self.width - self.spacing * (count - 1)

    def add_item(self, item: LayoutItem) -> AddOutcome:
        if self.is_complete:
            raise RuntimeError("Cannot add an item to a finalized row")

        # Snapshot pre-candidate metrics before the speculative add
        previous_count = len(self.items)
        previous_aspect_ratio = sum(i.aspect_ratio for i in self.items)

        new_count = previous_count + 1
        row_width_without_spacing = self._width_without_spacing(new_count)
        new_aspect_ratio = previous_aspect_ratio + item.aspect_ratio
        target_aspect_ratio = row_width_without_spacing / self.target_row_height

        if self.is_breakout_row and previous_count == 0 and item.aspect_ratio >= 1.0:
            self.items.append(item)
            self.complete_layout(
                row_width_without_spacing / item.aspect_ratio, WidowLayoutStyle.JUSTIFY
            )
            return Accepted()

        if new_aspect_ratio < self.min_aspect_ratio:
            self.items.append(item)
            return Accepted()

        if new_aspect_ratio > self.max_aspect_ratio:
            if previous_count == 0:
                self.items.append(item)
                self.complete_layout(
                    row_width_without_spacing / new_aspect_ratio, WidowLayoutStyle.JUSTIFY
                )
                return Accepted()

            previous_width_without_spacing = self._width_without_spacing(previous_count)
            previous_target_aspect_ratio = previous_width_without_spacing / self.target_row_height

            error_with = abs(new_aspect_ratio - target_aspect_ratio)
            error_without = abs(previous_aspect_ratio - previous_target_aspect_ratio)
            if error_with > error_without:
                self.complete_layout(
                    previous_width_without_spacing / previous_aspect_ratio,
                    WidowLayoutStyle.JUSTIFY,
                )
                return Rejected(item)

        self.items.append(item)
        self.complete_layout(row_width_without_spacing / new_aspect_ratio, WidowLayoutStyle.JUSTIFY)
        return Accepted()

    def complete_layout(self, new_height: float, style: WidowLayoutStyle) -> None:
        """Finalize the row at ``new_height`` (clamped) and place every item."""
        if self.is_complete:
            raise RuntimeError("Row is already finalized")
        if not self.items:
            raise RuntimeError("Cannot finalize an empty row")

        row_width_without_spacing = self._width_without_spacing(len(self.items))
        clamped_height = min(
            max(new_height, self.edge_case_min_row_height), self.edge_case_max_row_height
        )
        if clamped_height != new_height:
            clamped_to_native_ratio = (row_width_without_spacing / clamped_height) / (
                row_width_without_spacing / new_height
            )
        else:
            clamped_to_native_ratio = 1.0
        self.state = RowFinalized(clamped_height)

        cursor = self.left
        for item in self.items:
            item.top = self.top
            item.width = item.aspect_ratio * clamped_height * clamped_to_native_ratio
            item.height = clamped_height
            item.left = cursor
            cursor += item.width + self.spacing

        if style is WidowLayoutStyle.JUSTIFY:
            self._justify(cursor - self.spacing - self.left)
        elif style is WidowLayoutStyle.CENTER:
            self._center(cursor)

        logger.debug(
            "Row at top=%.1f finalized: %d items, height %.1f (requested %.1f, %s)",
            self.top,
            len(self.items),
            clamped_height,
            new_height,
            style.value,
        )

    def _justify(self, occupied_width: float) -> None:
        """Spread the over/undershoot so the last right edge lands on the row boundary."""
        count = len(self.items)
        error_width_per_item = (occupied_width - self.width) / count

        if count == 1:
            self.items[0].width -= float(round_half_away(error_width_per_item))
            return

        cumulative = cumulative_rounded_errors(error_width_per_item, count)
        self.items[0].width -= float(cumulative[0])
        for i in range(1, count):
            item = self.items[i]
            item.left -= float(cumulative[i - 1])
            item.width -= float(cumulative[i] - cumulative[i - 1])

    def _center(self, cursor: float) -> None:
        # cursor is the running left edge after the last item (padding and
        # trailing spacing included)
        center_offset = (self.width - cursor) / 2.0
        for item in self.items:
            item.left += center_offset + self.spacing

    def force_complete(self, row_height: float | None = None) -> None:
        """Close a trailing row with the configured widow style."""
        height = row_height if row_height is not None else self.target_row_height
        self.complete_layout(height, self.widow_layout_style)
