from __future__ import annotations

import logging
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from stats_browser.config import AppSettings, load_settings
from stats_browser.core.view_registry import ViewRegistry
from stats_browser.ui.layout.build_layout import build_layout
from stats_browser.ui.callbacks.callbacks_state import register_state_callbacks
from stats_browser.ui.callbacks.callbacks_io import register_io_callbacks
from stats_browser.ui.callbacks.callbacks_render import register_render_callbacks
from stats_browser.ui.callbacks.callbacks_sync import register_sync_callbacks

logger = logging.getLogger(__name__)


def build_view_registry() -> ViewRegistry:
    from stats_browser.views import (
        BarView,
        LineView,
        ScatterView,
        HistogramView,
    )

    registry = ViewRegistry()
    registry.register(BarView)
    registry.register(LineView)
    registry.register(ScatterView)
    registry.register(HistogramView)
    return registry


def create_dash_app(settings: Optional[AppSettings] = None) -> Dash:
    # 1) Load settings (file named by STATS_BROWSER_CONFIG, else defaults)
    if settings is None:
        settings = load_settings()

    # 2) App Context
    ctx = AppConfig(settings=settings, registry=build_view_registry())
    ctx.validate()

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = settings.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_state_callbacks(app, ctx)
    register_io_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_sync_callbacks(app, ctx)

    logger.info("Dash app created", extra={"views": [c.id for c in ctx.registry.all_classes()]})
    return app
