from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from huewheel_core.core import MatrixWheelFrameRenderer, PickerHost
from huewheel_core.render import save_frame_png
from huewheel_ui.color import parse_hex_color, to_hex_color
from huewheel_ui.component_schema import parse_coordinate_notation
from huewheel_ui.config import PickerConfig, load_picker_config, validate_picker_config
from huewheel_ui.controls.wheel_picker import ColorWheelPicker


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="huewheel")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Paint the picker for a color and write it as PNG.")
    _add_picker_arguments(render)
    render.add_argument("--background", default="#FFFFFFFF", help="Clear color (#RRGGBB or #RRGGBBAA).")
    render.add_argument("--out", type=Path, required=True)

    pick = sub.add_parser("pick", help="Replay pointer samples and print each emitted color.")
    _add_picker_arguments(pick)
    pick.add_argument("--origin", default="0,0", help="Container origin as `x,y`.")
    pick.add_argument(
        "samples",
        nargs="+",
        help="Pointer samples as `x,y`; the first starts the gesture, the rest update it.",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    config = _resolve_config(args)
    color = parse_hex_color(args.color)

    if args.command == "render":
        picker = ColorWheelPicker(
            component_id="picker",
            color=color,
            width=float(args.width),
            height=float(args.height),
            config=config,
        )
        host = PickerHost(picker=picker, renderer=MatrixWheelFrameRenderer())
        frame = host.paint(clear_color=parse_hex_color(args.background))
        if frame.numel() == 0:
            print(f"nothing to render at {args.width}x{args.height}")
            return
        out = save_frame_png(frame, args.out)
        print(f"wrote {out} ({args.width}x{args.height})")
        return

    if args.command == "pick":
        picker = ColorWheelPicker(
            component_id="picker",
            color=color,
            origin=parse_coordinate_notation(args.origin),
            width=float(args.width),
            height=float(args.height),
            config=config,
        )
        host = PickerHost(picker=picker)
        for i, raw in enumerate(args.samples):
            point = parse_coordinate_notation(raw)
            phase = "start" if i == 0 else "update"
            emitted = host.dispatch("pointer", {"phase": phase, "x": point.x, "y": point.y})
            if emitted is None:
                print(json.dumps({"phase": phase, "x": point.x, "y": point.y, "color": None}))
                continue
            print(
                json.dumps(
                    {
                        "phase": phase,
                        "x": point.x,
                        "y": point.y,
                        "region": picker.active_region,
                        "color": to_hex_color(emitted),
                        "hue": round(picker.state.hue, 4),
                        "saturation": round(picker.state.saturation, 4),
                        "value": round(picker.state.value, 4),
                    },
                    sort_keys=True,
                )
            )
        host.dispatch("pointer", {"phase": "end"})
        return

    raise RuntimeError(f"unsupported command: {args.command}")


def _add_picker_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=int, default=200)
    parser.add_argument("--height", type=int, default=200)
    parser.add_argument("--color", default="#FF0000", help="Starting color (#RRGGBB or #RRGGBBAA).")
    parser.add_argument("--config", type=Path, default=None, help="TOML file with a [picker] table.")
    parser.add_argument("--ring-thickness", type=float, default=None)
    parser.add_argument("--border", action="store_true", default=None, help="Draw ring and square borders.")
    parser.add_argument("--border-color", default=None)
    parser.add_argument("--segments", type=int, default=None)


def _resolve_config(args: argparse.Namespace) -> PickerConfig:
    base = load_picker_config(args.config) if args.config is not None else PickerConfig()
    overrides: dict[str, Any] = {
        "ring_thickness": base.ring_thickness,
        "draw_border": base.draw_border,
        "border_color": base.border_color,
        "reconcile_on_external_change": base.reconcile_on_external_change,
        "segments": base.segments,
    }
    if args.ring_thickness is not None:
        overrides["ring_thickness"] = args.ring_thickness
    if args.border is not None:
        overrides["draw_border"] = True
    if args.border_color is not None:
        overrides["border_color"] = args.border_color
    if args.segments is not None:
        overrides["segments"] = args.segments
    return validate_picker_config(overrides)


if __name__ == "__main__":
    main()
