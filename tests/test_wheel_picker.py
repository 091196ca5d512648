from __future__ import annotations

import math
import unittest

from huewheel_ui.color import HSVColor
from huewheel_ui.component_schema import CoordinatePoint
from huewheel_ui.config import PickerConfig
from huewheel_ui.controls.interaction import PointerEvent
from huewheel_ui.controls.wheel_picker import ColorWheelPicker
from huewheel_ui.controls.wheel_renderer import WheelRenderBatch


def _picker(**kwargs) -> tuple[ColorWheelPicker, list]:
    emitted: list = []
    params = {
        "component_id": "wheel",
        "color": HSVColor(200.0, 0.6, 0.3).to_rgba(),
        "on_changed": emitted.append,
        "width": 200.0,
        "height": 200.0,
        "config": PickerConfig(ring_thickness=16.0),
    }
    params.update(kwargs)
    return ColorWheelPicker(**params), emitted


HALF = (84.0 - 8.0) / math.sqrt(2.0)


class ColorWheelPickerScenarioTests(unittest.TestCase):
    def test_start_at_center_targets_square(self) -> None:
        picker, emitted = _picker()
        color = picker.on_start(100.0, 100.0)
        self.assertEqual(picker.active_region, "square")
        self.assertEqual(picker.state.saturation, 0.5)
        self.assertEqual(picker.state.value, 0.5)
        self.assertEqual(emitted, [color])

    def test_start_outside_square_targets_ring(self) -> None:
        picker, emitted = _picker()
        before = (picker.state.saturation, picker.state.value)
        picker.on_start(100.0 + HALF * 2.0, 100.0)
        self.assertEqual(picker.active_region, "ring")
        self.assertAlmostEqual(picker.state.hue, 0.0)
        self.assertEqual((picker.state.saturation, picker.state.value), before)
        self.assertEqual(len(emitted), 1)

    def test_square_edges_clamp(self) -> None:
        picker, _ = _picker()
        picker.on_start(100.0, 100.0)
        picker.on_update(100.0 - HALF, 100.0 - HALF)
        self.assertAlmostEqual(picker.state.saturation, 0.0, places=9)
        self.assertAlmostEqual(picker.state.value, 1.0, places=9)
        picker.on_update(100.0 - HALF * 3.0, 100.0 - HALF * 3.0)
        self.assertEqual(picker.state.saturation, 0.0)
        self.assertEqual(picker.state.value, 1.0)

    def test_external_value_change_reconciles_without_touching_hue(self) -> None:
        picker, _ = _picker(config=PickerConfig(reconcile_on_external_change=True))
        self.assertAlmostEqual(picker.state.value, 0.3, places=2)
        picker.on_start(100.0, 100.0 + HALF * 2.0)
        self.assertEqual(picker.active_region, "ring")
        self.assertAlmostEqual(picker.state.hue, 90.0)

        changed = picker.set_color(HSVColor(200.0, 0.6, 0.8).to_rgba())
        self.assertTrue(changed)
        self.assertAlmostEqual(picker.state.value, 0.8, places=6)
        self.assertAlmostEqual(picker.state.saturation, 0.6, places=2)
        self.assertAlmostEqual(picker.state.hue, 90.0)


class ColorWheelPickerBehaviourTests(unittest.TestCase):
    def test_region_is_fixed_for_the_whole_gesture(self) -> None:
        picker, emitted = _picker()
        hue_before = picker.state.hue
        picker.on_start(100.0, 100.0)
        picker.on_update(195.0, 100.0)
        picker.on_update(100.0, 5.0)
        self.assertEqual(picker.active_region, "square")
        self.assertEqual(picker.state.saturation, 0.5)
        self.assertEqual(picker.state.value, 1.0)
        self.assertEqual(picker.state.hue, hue_before)
        self.assertEqual(len(emitted), 3)

    def test_ring_gesture_keeps_ring_when_crossing_square(self) -> None:
        picker, _ = _picker()
        sat_before = picker.state.saturation
        picker.on_start(100.0, 190.0)
        picker.on_update(90.0, 100.0)
        self.assertEqual(picker.active_region, "ring")
        self.assertAlmostEqual(picker.state.hue, 180.0)
        self.assertEqual(picker.state.saturation, sat_before)

    def test_new_gesture_reclassifies(self) -> None:
        picker, _ = _picker()
        picker.on_start(100.0, 100.0)
        self.assertEqual(picker.active_region, "square")
        picker.on_end()
        picker.on_start(100.0, 190.0)
        self.assertEqual(picker.active_region, "ring")

    def test_container_origin_is_subtracted(self) -> None:
        picker, _ = _picker(origin=CoordinatePoint(300.0, 50.0))
        picker.on_start(400.0, 150.0)
        self.assertEqual(picker.active_region, "square")
        self.assertEqual((picker.state.saturation, picker.state.value), (0.5, 0.5))

    def test_emitted_alpha_follows_external_color(self) -> None:
        picker, emitted = _picker(color=(255, 0, 0, 64))
        picker.on_start(100.0, 100.0)
        self.assertEqual(emitted[-1][3], 64)
        picker.set_color((0, 0, 255, 200))
        picker.on_update(100.0, 100.0)
        self.assertEqual(emitted[-1][3], 200)

    def test_external_change_without_reconcile_keeps_square(self) -> None:
        picker, _ = _picker()
        before = (picker.state.hue, picker.state.saturation, picker.state.value)
        self.assertFalse(picker.set_color((10, 200, 30, 255)))
        self.assertEqual((picker.state.hue, picker.state.saturation, picker.state.value), before)

    def test_update_without_start_is_ignored(self) -> None:
        picker, emitted = _picker()
        self.assertIsNone(picker.on_update(100.0, 100.0))
        picker.on_start(100.0, 100.0)
        picker.on_end()
        self.assertIsNone(picker.on_update(120.0, 100.0))
        self.assertEqual(len(emitted), 1)

    def test_on_pointer_dispatches_phases(self) -> None:
        picker, emitted = _picker()
        picker.on_pointer(PointerEvent(phase="start", x=100.0, y=100.0))
        picker.on_pointer(PointerEvent(phase="update", x=110.0, y=100.0))
        self.assertTrue(picker.interacting)
        picker.on_pointer(PointerEvent(phase="cancel", x=0.0, y=0.0))
        self.assertFalse(picker.interacting)
        self.assertEqual(len(emitted), 2)

    def test_degenerate_container_is_not_interactive(self) -> None:
        picker, emitted = _picker(width=20.0, height=20.0)
        before = (picker.state.hue, picker.state.saturation, picker.state.value)
        self.assertIsNone(picker.on_start(10.0, 10.0))
        self.assertEqual(emitted, [])
        self.assertEqual((picker.state.hue, picker.state.saturation, picker.state.value), before)
        self.assertTrue(picker.layout().is_empty)

    def test_resize_changes_hit_geometry(self) -> None:
        picker, _ = _picker()
        picker.resize(400.0, 400.0)
        picker.on_start(200.0, 200.0)
        self.assertEqual(picker.active_region, "square")
        self.assertEqual(picker.interaction_geometry().ring_radius, 184.0)

    def test_disabled_picker_ignores_pointer(self) -> None:
        picker, emitted = _picker(disabled=True)
        self.assertIsNone(picker.on_start(100.0, 100.0))
        self.assertEqual(emitted, [])
        picker.set_disabled(False)
        self.assertIsNotNone(picker.on_start(100.0, 100.0))
        self.assertEqual(len(emitted), 1)

    def test_start_on_degenerate_geometry_ends_previous_gesture(self) -> None:
        picker, emitted = _picker()
        picker.on_start(100.0, 100.0)
        self.assertEqual(picker.active_region, "square")
        picker.resize(20.0, 20.0)
        self.assertIsNone(picker.on_start(15.0, 10.0))
        self.assertFalse(picker.interacting)
        picker.resize(200.0, 200.0)
        self.assertIsNone(picker.on_update(190.0, 100.0))
        self.assertEqual(len(emitted), 1)

    def test_start_while_disabled_ends_previous_gesture(self) -> None:
        picker, emitted = _picker()
        picker.on_start(100.0, 100.0)
        picker.set_disabled(True)
        self.assertIsNone(picker.on_start(100.0, 100.0))
        picker.set_disabled(False)
        self.assertIsNone(picker.on_update(190.0, 100.0))
        self.assertEqual(len(emitted), 1)

    def test_requires_color(self) -> None:
        with self.assertRaisesRegex(ValueError, "requires a color"):
            ColorWheelPicker(component_id="wheel")

    def test_rejects_negative_size(self) -> None:
        with self.assertRaises(ValueError):
            _picker(width=-1.0)

    def test_render_sends_batch_and_always_repaints(self) -> None:
        picker, _ = _picker()

        class _Capture:
            def __init__(self) -> None:
                self.batches: list[WheelRenderBatch] = []

            def draw_wheel_batch(self, batch: WheelRenderBatch) -> None:
                self.batches.append(batch)

        renderer = _Capture()
        batch = picker.render(renderer)
        self.assertEqual(renderer.batches, [batch])
        self.assertTrue(picker.should_repaint())
        self.assertTrue(picker.hit_test(CoordinatePoint(50.0, 50.0)))
        self.assertFalse(picker.hit_test(CoordinatePoint(250.0, 50.0)))


if __name__ == "__main__":
    unittest.main()
