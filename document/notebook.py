"""Notebook and worksheet models."""
import logging
from dataclasses import dataclass, field
from typing import Optional, List, Any, Mapping, Iterator

from .cell import Cell, CellType
from .errors import MalformedNotebookError

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Worksheet:
    """An ordered sequence of cells belonging to one notebook."""
    raw: Mapping[str, Any]
    notebook: Optional["Notebook"] = field(default=None, repr=False)
    path: Optional[str] = field(default=None, repr=False)
    cells: List[Cell] = field(default_factory=list, init=False)
    el: Any = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.raw, Mapping):
            raise MalformedNotebookError("worksheet record must be a mapping", self.path)
        raw_cells = self.raw.get("cells")
        if not isinstance(raw_cells, list):
            raise MalformedNotebookError("worksheet has no cells list", self.path)
        base = self.path or "worksheet"
        self.cells = [Cell(c, self, f"{base}.cells[{i}]") for i, c in enumerate(raw_cells)]

    def code_cells(self) -> List[Cell]:
        """Get all code cells."""
        return [c for c in self.cells if c.type == CellType.CODE]

    def render(self, config=None):
        """Render every cell, in order, into one container."""
        from ui.base import resolve_config
        from ui.layout import WorksheetView
        self.el = WorksheetView(self, resolve_config(config, self.notebook))
        return self.el


@dataclass(eq=False)
class Notebook:
    """
    Root of the document tree.

    Built once from a parsed notebook record; ``config`` is the default
    RenderConfig used when ``render()`` is called without one.
    """
    raw: Mapping[str, Any]
    config: Any = field(default=None, repr=False)
    metadata: Mapping[str, Any] = field(default_factory=dict, init=False)
    title: Optional[str] = field(default=None, init=False)
    worksheets: List[Worksheet] = field(default_factory=list, init=False)
    el: Any = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.raw, Mapping):
            raise MalformedNotebookError("notebook record must be a mapping")
        metadata = self.raw.get("metadata")
        if metadata is None:
            metadata = {}
        elif not isinstance(metadata, Mapping):
            raise MalformedNotebookError("metadata must be a mapping", "metadata")
        self.metadata = metadata
        self.title = self.metadata.get("title") or self.metadata.get("name")

        raw_worksheets = self.raw.get("worksheets")
        if not isinstance(raw_worksheets, list):
            raise MalformedNotebookError("notebook has no worksheets list", "worksheets")
        self.worksheets = [
            Worksheet(ws, self, f"worksheets[{i}]")
            for i, ws in enumerate(raw_worksheets)
        ]
        logger.debug(f"Built notebook {self.title!r}: "
                     f"{len(self.worksheets)} worksheets, {sum(1 for _ in self.cells())} cells")

    @property
    def sheet(self) -> Optional[Worksheet]:
        """The first worksheet, if any."""
        return self.worksheets[0] if self.worksheets else None

    @property
    def language(self) -> Optional[str]:
        return self.metadata.get("language")

    def cells(self) -> Iterator[Cell]:
        """Iterate cells across all worksheets."""
        for worksheet in self.worksheets:
            yield from worksheet.cells

    def render(self, config=None):
        """Render the whole notebook into one container element."""
        from ui.base import resolve_config
        from ui.layout import NotebookView
        self.el = NotebookView(self, resolve_config(config, self))
        return self.el


def parse(raw: Mapping[str, Any], config=None) -> Notebook:
    """Build a Notebook from an already decoded notebook record."""
    return Notebook(raw, config)
