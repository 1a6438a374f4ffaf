# -*- coding: utf-8 -*-
from .registry import router as registry_router
from .system import router as system_router

__all__ = ["registry_router", "system_router"]
