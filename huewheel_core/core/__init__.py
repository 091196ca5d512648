from .picker_host import PickerHost
from .ui_frame_renderer import MatrixWheelFrameRenderer

__all__ = [
    "MatrixWheelFrameRenderer",
    "PickerHost",
]
