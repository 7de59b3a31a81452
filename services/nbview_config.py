"""
nbview Configuration Service - Manages viewer settings from nbview_config.json.

This module handles loading, creating, and accessing the nbview_config.json file
which controls where notebooks are read from and how they are rendered.

On startup, if nbview_config.json doesn't exist, it creates one with sensible defaults.
Users can modify this file to customize their setup.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Any

from ui.base import RenderConfig

logger = logging.getLogger(__name__)

# Default configuration - used when creating new config file
DEFAULT_CONFIG = {
    "notebooks_dir": "notebooks",
    "render": {
        "class_prefix": "nb-",
        "markdown": True,
        "ansi": True,
        "strict": False,
        "comment": "markdown/ansi toggle the optional converters; strict re-raises render errors"
    }
}


@dataclass
class NbviewConfig:
    """Parsed nbview configuration."""
    notebooks_dir: Path = Path("notebooks")
    class_prefix: str = "nb-"
    markdown: bool = True
    ansi: bool = True
    strict: bool = False

    def to_render_config(self) -> RenderConfig:
        """Build the RenderConfig the viewer renders with."""
        from .ansi import ansi_to_html
        from .markdown import markdown_to_html

        return RenderConfig(
            class_prefix=self.class_prefix,
            markdown_renderer=markdown_to_html if self.markdown else None,
            ansi_renderer=ansi_to_html if self.ansi else None,
            strict=self.strict,
        )


# Global config instance (loaded once)
_config: Optional[NbviewConfig] = None
_config_path: Optional[Path] = None


def _parse_config(raw: Dict[str, Any]) -> NbviewConfig:
    """Parse raw JSON dict into NbviewConfig."""
    config = NbviewConfig()
    config.notebooks_dir = Path(raw.get("notebooks_dir", "notebooks"))

    render = raw.get("render", {})
    config.class_prefix = render.get("class_prefix", "nb-")
    config.markdown = bool(render.get("markdown", True))
    config.ansi = bool(render.get("ansi", True))
    config.strict = bool(render.get("strict", False))

    return config


def _create_default_config(config_path: Path) -> Dict[str, Any]:
    """Create default config file and return the config dict."""
    logger.info(f"Creating default nbview_config.json at {config_path}")

    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(DEFAULT_CONFIG, f, indent=2)

    return DEFAULT_CONFIG


def load_config(config_path: Optional[Path] = None, force_reload: bool = False) -> NbviewConfig:
    """
    Load nbview configuration from JSON file.

    Creates default config if file doesn't exist.

    Args:
        config_path: Path to config file. Defaults to ./nbview_config.json
        force_reload: If True, reload from disk even if cached

    Returns:
        Parsed NbviewConfig
    """
    global _config, _config_path

    if config_path is None:
        config_path = Path.cwd() / "nbview_config.json"
    config_path = Path(config_path)

    # Return cached if available and path matches
    if _config is not None and not force_reload and _config_path == config_path:
        return _config

    _config_path = config_path

    if not config_path.exists():
        raw = _create_default_config(config_path)
    else:
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            logger.info(f"Loaded nbview_config.json from {config_path}")
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse nbview_config.json: {e}")
            raw = DEFAULT_CONFIG

    _config = _parse_config(raw)
    return _config


def get_config() -> NbviewConfig:
    """Get the current config, loading if necessary."""
    if _config is None:
        return load_config()
    return _config


def reset_config_cache() -> None:
    """Reset cached config (useful for testing)."""
    global _config, _config_path
    _config = None
    _config_path = None


def print_config_status(config: NbviewConfig) -> None:
    """Print config status for startup logging."""
    print(f"   Config: nbview_config.json")
    print(f"      Notebooks dir:  {config.notebooks_dir}")
    print(f"      Class prefix:   {config.class_prefix}")
    print(f"      Markdown:       {'on' if config.markdown else 'off'}")
    print(f"      ANSI colors:    {'on' if config.ansi else 'off'}")
    print(f"      Strict:         {'on' if config.strict else 'off'}")
