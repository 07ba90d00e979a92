"""
Dash UI layer: app factory, layout builders and callbacks
"""

from .dash_app import create_dash_app

__all__ = ["create_dash_app"]
