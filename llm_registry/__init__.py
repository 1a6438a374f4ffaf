# -*- coding: utf-8 -*-
"""Versioned, cacheable registry of LLM providers and models."""

__version__ = "0.1.0"
