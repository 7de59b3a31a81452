"""
nbview UI - Cell Dispatcher

Maps each cell type to its view.
"""

from fasthtml.common import *
from document.errors import UnknownCellTypeError


def _views():
    from .code_cell import CodeCellView
    from .heading_cell import HeadingCellView
    from .markdown_cell import MarkdownCellView

    return {
        "markdown": MarkdownCellView,
        "heading": HeadingCellView,
        "code": CodeCellView,
    }


def CellView(cell, config):
    """Dispatch to the view registered for the cell's type.

    Args:
        cell: Cell model instance
        config: Active RenderConfig

    Returns:
        Rendered cell element

    Raises:
        UnknownCellTypeError: The cell type has no view
    """
    view_func = _views().get(cell.type)
    if view_func is None:
        raise UnknownCellTypeError(cell.type, cell.path)
    return view_func(cell, config)
