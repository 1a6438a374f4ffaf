# -*- coding: utf-8 -*-
"""HTTP layer: FastAPI app, routers and conditional delivery."""

from ._app import create_app, create_default_app

__all__ = ["create_app", "create_default_app"]
