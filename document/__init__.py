"""Document layer - Models for notebooks, worksheets, cells and outputs."""
from .errors import (
    NotebookError, MalformedNotebookError, RenderError,
    UnknownOutputTypeError, UnknownCellTypeError,
)
from .cell import Cell, CellType, Input, Output, OutputType
from .streams import coalesce_streams
from .notebook import Notebook, Worksheet, parse

__version__ = "0.1.0"

__all__ = [
    'Notebook', 'Worksheet', 'Cell', 'CellType', 'Input', 'Output', 'OutputType',
    'coalesce_streams', 'parse',
    'NotebookError', 'MalformedNotebookError', 'RenderError',
    'UnknownOutputTypeError', 'UnknownCellTypeError',
    '__version__',
]
