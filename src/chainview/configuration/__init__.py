from ._viewer_config import ViewerConfig

__all__ = ["ViewerConfig"]
