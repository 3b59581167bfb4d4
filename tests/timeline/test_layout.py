from __future__ import annotations

import pytest

from engine.timeline.intervals import Interval, RowAssignment, pack_rows
from engine.timeline.layout import FALLBACK_PALETTE, default_palette, layout_bars


def test_percentages_relative_to_total_duration() -> None:
    bars = layout_bars(pack_rows([Interval(0, 200), Interval(200, 800)]), palette=["#000"])
    assert [(b.left, b.width, b.row) for b in bars] == [(0.0, 25.0, 0), (25.0, 75.0, 0)]
    assert bars[1].css() == {"left": "25.0%", "width": "75.0%", "background-color": "#000"}


def test_palette_cycles_by_input_index() -> None:
    assignments = pack_rows([Interval(i, i + 1) for i in range(3)])
    bars = layout_bars(assignments, palette=["red", "blue"])
    assert [b.color for b in bars] == ["red", "blue", "red"]


def test_zero_total_duration_gives_zero_widths() -> None:
    bars = layout_bars([RowAssignment(Interval(0, 0), 0)], palette=["red"])
    assert (bars[0].left, bars[0].width) == (0.0, 0.0)


def test_empty_layout() -> None:
    assert layout_bars([]) == ()


@pytest.mark.integration
def test_default_palette_comes_from_config() -> None:
    palette = default_palette()
    assert len(palette) >= 1
    assert palette == FALLBACK_PALETTE  # configs/default.yaml と同じ並び
