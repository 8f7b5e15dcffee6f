from .frame_source import FrameDatasetSource, load_frame_source

__all__ = ["FrameDatasetSource", "load_frame_source"]
