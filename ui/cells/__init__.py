"""
nbview UI - Cell Components

Components for rendering the different cell types (markdown, heading, code).
"""

from .base import CellView
from .code_cell import CodeCellView, InputView
from .heading_cell import HeadingCellView
from .markdown_cell import MarkdownCellView

__all__ = [
    'CellView',
    'CodeCellView',
    'InputView',
    'HeadingCellView',
    'MarkdownCellView',
]
