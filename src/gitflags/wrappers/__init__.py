from .common import GitWrapper

__all__ = "GitWrapper",
