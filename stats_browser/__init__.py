"""
Top-level package for the standard deviation calculator.

This package exposes the core architecture (statistics, views, UI adapters).
Most code should import from submodules such as:
    stats_browser.core
    stats_browser.views
    stats_browser.ui
"""

__all__: list[str] = []
