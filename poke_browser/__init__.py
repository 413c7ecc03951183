"""
Top-level package for the Pokemon stat browser.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    poke_browser.core
    poke_browser.views
    poke_browser.ui
"""

__all__: list[str] = []
