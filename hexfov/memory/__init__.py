"""
Memory module - pamięć pola widzenia (SEEN / REMEMBERED).
"""

from .fov_memory import FovMemory, FovStatus, DEFAULT_GLYPHS

__all__ = ["FovMemory", "FovStatus", "DEFAULT_GLYPHS"]
