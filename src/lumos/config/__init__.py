"""Configuration system for Lumos."""

from .factory import ComponentFactory, build_document_manager, config_from_settings
from .models import ComponentConfig, LumosConfig
from .settings import Settings, configure_logging, load_settings

__all__ = [
    "ComponentConfig",
    "LumosConfig",
    "ComponentFactory",
    "Settings",
    "load_settings",
    "configure_logging",
    "build_document_manager",
    "config_from_settings",
]
