"""
Config package for poke_browser.

Responsible for:
- config models (GlobalConfig, CanvasConfig, Margin)
- config I/O (load_global_config)
"""

from .model import GlobalConfig, CanvasConfig, Margin
from .loader import load_global_config

__all__ = ["GlobalConfig", "CanvasConfig", "Margin", "load_global_config"]
