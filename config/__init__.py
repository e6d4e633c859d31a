"""
Initializes the config package.

The config package is responsible for holding the codec-wide configuration,
making it accessible throughout the application.
"""

# This import is done to facilitate cleaner imports in the project
# `from config import CodecConfig` instead of `from config.codec import CodecConfig`
from .codec import CodecConfig

__all__ = ["CodecConfig"]
