"""
nbview UI - Markdown Cell Component

Renders markdown cells through the configured markdown converter.
"""

from fasthtml.common import *
from ..base import make_element


def MarkdownCellView(cell, config):
    """Render a markdown cell; the converted source is injected as markup."""
    return make_element("div", ["cell", "markdown-cell"], config,
                        NotStr(config.markdown(cell.source)))
