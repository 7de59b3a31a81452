"""
nbview UI - Heading Cell Component
"""

from fasthtml.common import *
from ..base import make_element, escape_html


def HeadingCellView(cell, config):
    """Render a heading cell as h1-h6, with its source as escaped text."""
    return make_element(f"h{cell.level}", ["cell", "heading-cell"], config,
                        NotStr(escape_html(cell.source)))
