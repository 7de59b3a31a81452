"""Exceptions raised while building or rendering a notebook.

Construction problems are fatal and surface immediately as
MalformedNotebookError. Render problems derive from RenderError so callers
(and the worksheet/cell renderers) can isolate them per output or per cell.
"""
from typing import Optional


class NotebookError(Exception):
    """Base class for notebook errors.

    Attributes:
        message: Short human readable description
        path: Location of the offending record, e.g. ``worksheets[0].cells[3]``
    """

    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class MalformedNotebookError(NotebookError):
    """Required fields are missing, so the document tree cannot be built."""


class RenderError(NotebookError):
    """A single element of the tree could not be rendered."""


class UnknownOutputTypeError(RenderError):
    """No renderer is registered for an output's ``output_type``."""

    def __init__(self, output_type: str, path: Optional[str] = None):
        self.output_type = output_type
        super().__init__(f"no renderer for output type {output_type!r}", path)


class UnknownCellTypeError(RenderError):
    """No renderer is registered for a cell's ``cell_type``."""

    def __init__(self, cell_type: str, path: Optional[str] = None):
        self.cell_type = cell_type
        super().__init__(f"no renderer for cell type {cell_type!r}", path)
