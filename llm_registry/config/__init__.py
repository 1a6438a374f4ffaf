# -*- coding: utf-8 -*-
from .config import CachePolicyConfig, Config, ServerConfig, UpstreamConfig
from .utils import get_config_path, get_store_dir, load_config, save_config

__all__ = [
    "CachePolicyConfig",
    "Config",
    "ServerConfig",
    "UpstreamConfig",
    "get_config_path",
    "get_store_dir",
    "load_config",
    "save_config",
]
