"""
nbview UI - Base Utilities

Render configuration, escaping and the element factory shared by all views.
"""

from fasthtml.common import *
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class RenderConfig:
    """Options read while rendering.

    Attributes:
        class_prefix: Prepended to every emitted class name
        markdown_renderer: Markdown to HTML converter, identity when None
        ansi_renderer: ANSI escapes to HTML converter, identity when None
        strict: Propagate render errors instead of isolating them
    """
    class_prefix: str = "nb-"
    markdown_renderer: Optional[Callable[[str], str]] = None
    ansi_renderer: Optional[Callable[[str], str]] = None
    strict: bool = False

    def classes(self, names: Iterable[str]) -> List[str]:
        return [self.class_prefix + name for name in names]

    def markdown(self, text: str) -> str:
        return self.markdown_renderer(text) if self.markdown_renderer else text

    def ansi(self, text: str) -> str:
        return self.ansi_renderer(text) if self.ansi_renderer else text


def resolve_config(config: Optional[RenderConfig], notebook=None) -> RenderConfig:
    """Explicit config first, then the notebook's default, then RenderConfig()."""
    if config is not None:
        return config
    if notebook is not None and notebook.config is not None:
        return notebook.config
    return RenderConfig()


def escape_html(raw: str) -> str:
    """Escape the characters that would open or close a tag."""
    return raw.replace("<", "&lt;").replace(">", "&gt;")


def join_source(lines) -> str:
    """Join a list-of-strings field (or return a string as-is)."""
    if lines is None:
        return ""
    if isinstance(lines, str):
        return lines
    return "".join(lines)


def make_element(tag: str, class_names: Iterable[str], config: RenderConfig, *children, **attrs):
    """Create an element whose class names carry the configured prefix.

    Args:
        tag: Element tag name
        class_names: Unprefixed semantic class names (may be empty)
        config: Active RenderConfig
        *children: Child elements or NotStr markup
        **attrs: Extra attributes (``data_x`` becomes ``data-x``)

    Returns:
        FT element
    """
    cls = " ".join(config.classes(class_names or [])) or None
    return ft_hx(tag, *children, cls=cls, **attrs)


def prompt_attrs(prompt_number) -> dict:
    """Data attribute for a cell's execution counter, if it has one."""
    return {"data_prompt_number": prompt_number} if prompt_number else {}


def ErrorView(error: Exception, config: RenderConfig):
    """Placeholder for an element that failed to render."""
    return make_element("div", ["render-error"], config,
                        NotStr(escape_html(str(error))),
                        data_error=type(error).__name__)


def render_isolated(render: Callable, path: Optional[str], config: RenderConfig):
    """Call ``render``; on failure log it and return an ErrorView instead.

    With ``config.strict`` the exception propagates.
    """
    try:
        return render()
    except Exception as e:
        if config.strict:
            raise
        logger.warning(f"Failed to render {path or 'element'}: {e}")
        return ErrorView(e, config)
