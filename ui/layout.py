"""
nbview UI - Layout Components

Worksheet and notebook containers, plus the viewer's page layouts.
"""

from fasthtml.common import *
from typing import List
from urllib.parse import quote
from .base import make_element, render_isolated


def WorksheetView(worksheet, config):
    """Render all cells of a worksheet in order.

    A cell that fails to render is replaced by an error placeholder.
    """
    cells = [
        render_isolated(lambda c=c: c.render(config), c.path, config)
        for c in worksheet.cells
    ]
    return make_element("div", ["worksheet"], config, *cells)


def NotebookView(nb, config):
    """Render every worksheet of a notebook in order."""
    return make_element("div", ["notebook"], config,
                        *[ws.render(config) for ws in nb.worksheets])


def NotebookPage(nb, title: str, config):
    """Render the complete viewer page for one notebook.

    Args:
        nb: Notebook instance
        title: Page title (notebook title or file name)
        config: Active RenderConfig

    Returns:
        Complete page with Titled wrapper
    """
    return Titled(
        title,
        A("← All notebooks", href="/", cls="back-link"),
        NotebookView(nb, config),
    )


def NotebookIndex(notebook_list: List[str]):
    """Render the list of available notebooks."""
    return Titled(
        "Notebooks",
        Ul(*[Li(A(name, href=f"/notebook/{quote(name)}", cls="file-item"))
             for name in notebook_list]) if notebook_list
        else P("No notebooks found.", cls="empty"),
    )
