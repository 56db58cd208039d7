"""
Configuration System

Configuration Priority (highest to lowest):
    1. Programmatic (passed to TreeFSConfig())
    2. Environment variables (TREEFS_* prefix)
    3. Built-in defaults
"""

from treefs.config.settings import TreeFSConfig

__all__ = ["TreeFSConfig"]
