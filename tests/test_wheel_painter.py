from __future__ import annotations

import math
import unittest

from huewheel_ui.config import PickerConfig
from huewheel_ui.controls.wheel_painter import paint_wheel
from huewheel_ui.controls.wheel_renderer import (
    ArcStrokeCommand,
    CircleStrokeCommand,
    RoundedRectFillCommand,
    RoundedRectStrokeCommand,
)
from huewheel_ui.controls.wheel_state import WheelColorState
from huewheel_ui.style.theme import validate_theme_tokens


PAINT_RADIUS = 92.0
PAINT_HALF = (PAINT_RADIUS - 8.0) / math.sqrt(2.0)


class WheelPainterTests(unittest.TestCase):
    def setUp(self) -> None:
        self.state = WheelColorState.from_color((255, 0, 0, 255))

    def test_draw_order_without_border(self) -> None:
        batch = paint_wheel(self.state, 200, 200, PickerConfig())
        kinds = [type(c) for c in batch.commands]
        self.assertEqual(len(kinds), 360 + 2 + 4)
        self.assertTrue(all(k is ArcStrokeCommand for k in kinds[:360]))
        self.assertEqual(kinds[360:362], [RoundedRectFillCommand, RoundedRectFillCommand])
        self.assertTrue(all(k is CircleStrokeCommand for k in kinds[362:]))

    def test_draw_order_with_border(self) -> None:
        batch = paint_wheel(self.state, 200, 200, PickerConfig(draw_border=True, border_color="#112233"))
        kinds = [type(c) for c in batch.commands]
        self.assertEqual(len(kinds), 360 + 2 + 2 + 1 + 4)
        self.assertEqual(kinds[360:362], [CircleStrokeCommand, CircleStrokeCommand])
        self.assertEqual(kinds[362:364], [RoundedRectFillCommand, RoundedRectFillCommand])
        self.assertIs(kinds[364], RoundedRectStrokeCommand)
        inner, outer = batch.commands[360], batch.commands[361]
        self.assertEqual((inner.radius, outer.radius), (PAINT_RADIUS - 8.0, PAINT_RADIUS + 8.0))
        self.assertEqual(inner.color, (0x11, 0x22, 0x33, 255))
        self.assertEqual(batch.commands[364].color, (0x11, 0x22, 0x33, 255))

    def test_border_falls_back_to_theme_grey(self) -> None:
        batch = paint_wheel(self.state, 200, 200, PickerConfig(draw_border=True))
        self.assertEqual(batch.commands[360].color, (0x9E, 0x9E, 0x9E, 255))

    def test_ring_segments(self) -> None:
        batch = paint_wheel(self.state, 200, 200, PickerConfig(segments=360))
        step = 2.0 * math.pi / 360.0
        first = batch.commands[0]
        self.assertEqual(first.color, (255, 0, 0, 255))
        self.assertAlmostEqual(first.start_angle, -0.5 * step)
        self.assertAlmostEqual(first.sweep_angle, -1.5 * step)
        self.assertEqual(first.radius, PAINT_RADIUS)
        self.assertEqual(first.stroke_width, 16.0)
        self.assertEqual(batch.commands[120].color, (0, 255, 0, 255))
        self.assertEqual(batch.commands[240].color, (0, 0, 255, 255))

    def test_segment_count_follows_config(self) -> None:
        batch = paint_wheel(self.state, 200, 200, PickerConfig(segments=6))
        arcs = [c for c in batch.commands if isinstance(c, ArcStrokeCommand)]
        self.assertEqual(len(arcs), 6)
        self.assertEqual(arcs[2].color, (0, 255, 0, 255))

    def test_shade_square_gradients(self) -> None:
        self.state.apply_hue(120.0)
        batch = paint_wheel(self.state, 200, 200, PickerConfig())
        horizontal, vertical = batch.commands[360], batch.commands[361]
        self.assertAlmostEqual(horizontal.x, 100.0 - PAINT_HALF)
        self.assertAlmostEqual(horizontal.width, PAINT_HALF * 2.0)
        self.assertEqual(horizontal.corner_radius, 4.0)
        self.assertEqual(horizontal.gradient.axis, "horizontal")
        self.assertEqual(horizontal.gradient.start, (255, 255, 255, 255))
        self.assertEqual(horizontal.gradient.end, (0, 255, 0, 255))
        self.assertEqual(vertical.gradient.axis, "vertical")
        self.assertEqual(vertical.gradient.start, (0, 0, 0, 0))
        self.assertEqual(vertical.gradient.end, (0, 0, 0, 255))

    def test_thumbs_follow_state(self) -> None:
        self.state.apply_hue(90.0)
        self.state.apply_square(0.0, 0.0)
        batch = paint_wheel(self.state, 200, 200, PickerConfig())
        ring_outer, ring_inner, square_outer, square_inner = batch.commands[-4:]
        self.assertAlmostEqual(ring_outer.center_x, 100.0)
        self.assertAlmostEqual(ring_outer.center_y, 100.0 + PAINT_RADIUS)
        self.assertEqual(ring_outer.radius, 12.0)
        self.assertEqual((ring_outer.stroke_width, ring_outer.color), (5.0, (0, 0, 0, 255)))
        self.assertEqual((ring_inner.stroke_width, ring_inner.color), (3.0, (255, 255, 255, 255)))
        self.assertAlmostEqual(square_outer.center_x, 100.0 - PAINT_HALF)
        self.assertAlmostEqual(square_outer.center_y, 100.0 + PAINT_HALF)
        self.assertEqual(square_inner.radius, 12.0)

    def test_theme_tokens_shape_thumbs(self) -> None:
        tokens = validate_theme_tokens({"square_thumb_radius_px": 7, "thumb_inner_color": "#FF00FF"})
        batch = paint_wheel(self.state, 200, 200, PickerConfig(), tokens)
        self.assertEqual(batch.commands[-1].radius, 7.0)
        self.assertEqual(batch.commands[-1].color, (255, 0, 255, 255))

    def test_paint_is_repeatable(self) -> None:
        config = PickerConfig(draw_border=True)
        self.assertEqual(paint_wheel(self.state, 180, 240, config), paint_wheel(self.state, 180, 240, config))

    def test_degenerate_container_paints_nothing(self) -> None:
        self.assertTrue(paint_wheel(self.state, 10, 10, PickerConfig()).is_empty)


if __name__ == "__main__":
    unittest.main()
