from .png import frame_to_image, save_frame_png

__all__ = ["frame_to_image", "save_frame_png"]
