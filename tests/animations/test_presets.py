from __future__ import annotations

import math

import pytest

from animations import pulse as pulse_mod
from animations import spec as spec_mod
from animations.pulse import pulse
from animations.shatter import DISTANCE_SPREAD, MIN_DISTANCE, shatter
from animations.spec import AnimationSpec, loop_for_repeat_count
from animations.spin import spin
from engine.core.matrix import compose, rotate, scale, to_transform_string, translate
from engine.core.origin import BoundingBox


@pytest.mark.parametrize("n, expected", [(-1, True), (1, False), (2, 3), (3, 5)])
def test_loop_for_repeat_count(n: int, expected: bool | int) -> None:
    got = loop_for_repeat_count(n)
    assert got == expected
    assert type(got) is type(expected)


def test_spin_defaults_from_config() -> None:
    s = spin()
    assert isinstance(s, AnimationSpec)
    assert s.duration == 1000.0
    assert s.delay == 0.0
    assert s.loop is False
    assert s.alternate is False
    assert s.ease == "out(1)"
    assert s.clip_overflow is True


def test_spin_composes_rotate_translate_scale() -> None:
    s = spin(rotate=90, x=10, y=0, scale=2)
    expected = compose(rotate(90), translate(10, 0), scale(2))
    assert s.transform == to_transform_string(expected)


def test_spin_repeat_alternates() -> None:
    forever = spin(repeat_count=-1)
    assert forever.loop is True and forever.alternate is True
    thrice = spin(repeat_count=3)
    assert thrice.loop == 5 and thrice.alternate is True


def test_pulse_scales_around_bottom_center(box: BoundingBox) -> None:
    # 100x50 の下端中央 (50, 50) が不動点
    p = pulse(box, sx=2, sy=2)
    assert p.transform == "matrix(2,0,0,2,-50,-50)"
    assert p.alternate is True
    assert p.loop == 5
    assert p.duration == 300.0
    assert p.ease == "out(2)"


def test_pulse_origin_override(box: BoundingBox) -> None:
    p = pulse(box, sx=2, sy=2, origin="0 0")
    assert p.transform == "matrix(2,0,0,2,0,0)"


def test_pulse_loop_has_no_special_cases(box: BoundingBox) -> None:
    assert pulse(box, repeat_count=1).loop == 1
    assert pulse(box, repeat_count=-1).loop == -3


def test_to_options_drops_clip_flag() -> None:
    opts = spin(repeat_count=2).to_options()
    assert set(opts) == {"transform", "duration", "delay", "loop", "alternate", "ease"}
    assert opts["loop"] == 3


def test_config_values_are_overridden_by_arguments(monkeypatch: pytest.MonkeyPatch, box) -> None:
    def fake_section(*keys, root=None):
        return {"duration": 2000, "ease": None} if keys == ("animations", "pulse") else {}

    monkeypatch.setattr(spec_mod, "config_section", fake_section)
    assert pulse_mod.pulse(box).duration == 2000.0
    assert pulse_mod.pulse(box).ease == "out(2)"  # None は既定値を潰さない
    assert pulse_mod.pulse(box, duration=50).duration == 50.0


def test_shatter_grid_and_clips() -> None:
    box = BoundingBox(10.0, 20.0, 100.0, 50.0)
    plan = shatter(box, rows=2, cols=4, seed=7)
    assert len(plan) == 8
    assert plan.duration == 1200.0
    assert (plan.easing, plan.fill) == ("ease-out", "forwards")

    last = plan.pieces[-1]
    assert (last.row, last.col) == (1, 3)
    assert last.clip == BoundingBox(85.0, 45.0, 25.0, 25.0)
    assert last.content_offset == (-75.0, -25.0)


def test_shatter_pieces_fly_within_distance_band() -> None:
    plan = shatter(BoundingBox(0, 0, 80, 80), rows=4, cols=4, seed=3)
    for piece in plan.pieces:
        dist = math.hypot(piece.dx, piece.dy)
        assert MIN_DISTANCE <= dist < MIN_DISTANCE + DISTANCE_SPREAD + 1e-9
        assert 0.0 <= piece.rotate_deg < 360.0
        heading = math.degrees(math.atan2(piece.dy, piece.dx)) % 360.0
        assert heading == pytest.approx(piece.rotate_deg % 360.0, abs=1e-6) or math.isclose(
            abs(heading - piece.rotate_deg), 360.0, abs_tol=1e-6
        )


def test_shatter_keyframes_fade_out() -> None:
    plan = shatter(BoundingBox(0, 0, 10, 10), rows=1, cols=1, seed=0)
    (piece,) = plan.pieces
    start, end = piece.keyframes()
    assert start == {"transform": "matrix(1,0,0,1,0,0)", "opacity": 1}
    assert end["opacity"] == 0
    assert end["transform"] == piece.end_transform
    assert end["transform"].startswith("matrix(")


def test_shatter_is_reproducible_with_seed() -> None:
    box = BoundingBox(0, 0, 40, 40)
    assert shatter(box, rows=3, cols=3, seed=42) == shatter(box, rows=3, cols=3, seed=42)
    assert shatter(box, rows=3, cols=3, seed=42) != shatter(box, rows=3, cols=3, seed=43)


@pytest.mark.parametrize("rows, cols", [(0, 2), (2, 0), (-1, -1)])
def test_shatter_rejects_empty_grid(rows: int, cols: int) -> None:
    with pytest.raises(ValueError):
        shatter(BoundingBox(0, 0, 10, 10), rows=rows, cols=cols)
