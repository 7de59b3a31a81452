"""Services layer - Optional converters and viewer configuration."""

from .ansi import ansi_to_html
from .markdown import markdown_to_html
from .nbview_config import (
    NbviewConfig,
    DEFAULT_CONFIG,
    load_config,
    get_config,
    reset_config_cache,
    print_config_status,
)

__all__ = [
    # converters
    "ansi_to_html",
    "markdown_to_html",
    # nbview_config
    "NbviewConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "get_config",
    "reset_config_cache",
    "print_config_status",
]
