"""
nbview UI Package

FastHTML components that render notebook models into markup elements.

Usage:
    from ui import RenderConfig, NotebookView

    # Or import specific components
    from ui.cells import CodeCellView, MarkdownCellView, HeadingCellView
    from ui.outputs import OutputView, DISPLAY_PRIORITY
    from ui.layout import WorksheetView, NotebookPage
"""

# Base utilities
from .base import RenderConfig, resolve_config, make_element, escape_html, join_source, ErrorView

# Outputs
from .outputs import DISPLAY, DISPLAY_PRIORITY, OUTPUT_RENDERERS, OutputView, select_format

# Cell components
from .cells import CellView, CodeCellView, InputView, HeadingCellView, MarkdownCellView

# Layout
from .layout import WorksheetView, NotebookView, NotebookPage, NotebookIndex

__all__ = [
    # Base
    'RenderConfig',
    'resolve_config',
    'make_element',
    'escape_html',
    'join_source',
    'ErrorView',
    # Outputs
    'DISPLAY',
    'DISPLAY_PRIORITY',
    'OUTPUT_RENDERERS',
    'OutputView',
    'select_format',
    # Cells
    'CellView',
    'CodeCellView',
    'InputView',
    'HeadingCellView',
    'MarkdownCellView',
    # Layout
    'WorksheetView',
    'NotebookView',
    'NotebookPage',
    'NotebookIndex',
]
