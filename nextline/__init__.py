"""Line-at-a-time reading of bytes from file descriptors, with per-descriptor buffering."""

__version__ = "0.1.0"
__all__ = ["buffer", "reader", "cli"]