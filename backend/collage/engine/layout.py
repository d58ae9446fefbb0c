"""Layout driver: packs an aspect-ratio sequence into justified rows.

Usage:
    result = compute([1.5, 1.0, 2.0], LayoutConfig(container_width=1060))
    for box in result.boxes:
        ...  # box.left, box.top, box.width, box.height
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from collage.engine.config import LayoutConfig
from collage.engine.errors import InvalidAspectRatio
from collage.engine.items import LayoutItem, LayoutResult
from collage.engine.row import Rejected, Row

logger = logging.getLogger(__name__)


@dataclass
class LayoutState:
    """Running container height and the rows emitted so far."""

    config: LayoutConfig
    container_height: float
    rows: list[Row] = field(default_factory=list)
    boxes: list[LayoutItem] = field(default_factory=list)

    @property
    def row_cap_reached(self) -> bool:
        max_rows = self.config.max_num_rows
        return max_rows is not None and len(self.rows) >= max_rows

    def create_new_row(self) -> Row:
        config = self.config
        row_index = len(self.rows)
        target_row_height = config.target_height_for_row(row_index)
        return Row(
            top=self.container_height,
            left=config.container_padding.left,
            width=config.row_width,
            spacing=config.box_spacing.horizontal,
            target_row_height=target_row_height,
            target_row_height_tolerance=config.target_row_height_tolerance,
            edge_case_min_row_height=config.edge_case_min_row_height_factor * target_row_height,
            edge_case_max_row_height=config.edge_case_max_row_height_factor * target_row_height,
            widow_layout_style=config.widow_layout_style,
            is_breakout_row=config.is_breakout_row(row_index),
        )

    def add_row(self, row: Row) -> None:
        self.container_height += row.height + self.config.box_spacing.vertical
        self.rows.append(row)
        self.boxes.extend(row.items)


def prepare_items(aspect_ratios: Sequence[float], config: LayoutConfig) -> list[LayoutItem]:
    """Convert ratios to items, validating the whole input before any packing."""
    forced = config.force_aspect_ratio
    items: list[LayoutItem] = []
    for i, ratio in enumerate(aspect_ratios):
        value = forced if forced is not None else ratio
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise InvalidAspectRatio(i, value) from None
        if not math.isfinite(value):
            raise InvalidAspectRatio(i, value)
        items.append(LayoutItem(aspect_ratio=value, forced_aspect_ratio=forced is not None))
    return items


def compute(aspect_ratios: Sequence[float], config: LayoutConfig | None = None) -> LayoutResult:
    """Lay out items with the given aspect ratios (width / height)."""
    config = config or LayoutConfig()
    items = prepare_items(aspect_ratios, config)

    state = LayoutState(config=config, container_height=config.container_padding.top)
    current_row: Row | None = None

    pending = items if config.max_num_rows != 0 else []

    for item in pending:
        row = current_row if current_row is not None else state.create_new_row()
        outcome = row.add_item(item)

        if not row.is_complete:
            current_row = row
            continue

        state.add_row(row)
        current_row = None
        if state.row_cap_reached:
            break

        if isinstance(outcome, Rejected):
            # Retry the rejected item on a fresh row
            row = state.create_new_row()
            row.add_item(outcome.item)
            if row.is_complete:
                state.add_row(row)
                if state.row_cap_reached:
                    break
                continue
            current_row = row

    widow_count = 0
    if current_row is not None and current_row.items and config.show_widows:
        if state.rows:
            last_row = state.rows[-1]
            previous_height = (
                last_row.target_row_height if last_row.is_breakout_row else last_row.height
            )
            current_row.force_complete(previous_height)
        else:
            current_row.force_complete()
        widow_count = len(current_row.items)
        state.add_row(current_row)

    container_height = state.container_height
    if state.rows:
        container_height -= config.box_spacing.vertical
    container_height += config.container_padding.bottom

    if len(state.boxes) < len(items):
        logger.debug("Dropped %d items (row limit or hidden widows)", len(items) - len(state.boxes))
    logger.debug(
        "Layout: %d items -> %d rows (%d widows), container height %.1f",
        len(state.boxes),
        len(state.rows),
        widow_count,
        container_height,
    )

    return LayoutResult(
        container_height=container_height,
        widow_count=widow_count,
        boxes=state.boxes,
    )
