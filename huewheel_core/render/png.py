from __future__ import annotations

from pathlib import Path

import numpy as np
import torch
from PIL import Image


def frame_to_image(frame: torch.Tensor) -> Image.Image:
    """Wrap an (H, W, 4) uint8 frame as an RGBA PIL image."""

    if frame.ndim != 3 or frame.shape[2] != 4:
        raise ValueError(f"frame must have shape (H, W, 4), got {tuple(frame.shape)}")
    pixels = np.ascontiguousarray(frame.detach().to(torch.uint8).cpu().numpy())
    return Image.fromarray(pixels)


def save_frame_png(frame: torch.Tensor, path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    frame_to_image(frame).save(out, format="PNG")
    return out
