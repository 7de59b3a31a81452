"""Cell, input and output models for the worksheet notebook schema."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Any, List, Mapping, TYPE_CHECKING

from .errors import MalformedNotebookError
from .streams import coalesce_streams

if TYPE_CHECKING:
    from .notebook import Notebook, Worksheet


class CellType(str, Enum):
    """Type of cell content."""
    MARKDOWN = "markdown"
    HEADING = "heading"
    CODE = "code"


class OutputType(str, Enum):
    """Output kinds that have a renderer."""
    DISPLAY_DATA = "display_data"
    PYOUT = "pyout"
    PYERR = "pyerr"
    STREAM = "stream"


def _fragments(value) -> List[str]:
    """Normalize a text field that may be a string or a list of strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


@dataclass(eq=False)
class Input:
    """Source fragments of one code cell."""
    raw: List[str]
    cell: Optional["Cell"] = field(default=None, repr=False)
    el: Any = field(default=None, init=False, repr=False)

    def __post_init__(self):
        self.raw = _fragments(self.raw)

    @property
    def source(self) -> str:
        return "".join(self.raw)

    @property
    def language(self) -> Optional[str]:
        return self.cell.language if self.cell is not None else None

    @property
    def prompt_number(self):
        return self.cell.prompt_number if self.cell is not None else None

    def render(self, config=None):
        """Render to a code block element."""
        from ui.base import resolve_config
        from ui.cells.code_cell import InputView
        notebook = self.cell.notebook if self.cell is not None else None
        self.el = InputView(self, resolve_config(config, notebook))
        return self.el


@dataclass(eq=False)
class Output:
    """
    One execution result attached to a code cell.

    ``raw`` is kept as given; ``type`` is its ``output_type``. Kinds outside
    OutputType are accepted here and rejected when rendered.
    """
    raw: Mapping[str, Any]
    cell: Optional["Cell"] = field(default=None, repr=False)
    path: Optional[str] = field(default=None, repr=False)
    type: str = field(init=False)
    el: Any = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.raw, Mapping):
            raise MalformedNotebookError("output record must be a mapping", self.path)
        if "output_type" not in self.raw:
            raise MalformedNotebookError("output record has no output_type", self.path)
        self.type = self.raw["output_type"]

    @property
    def is_stream(self) -> bool:
        return self.type == OutputType.STREAM

    @property
    def stream(self) -> Optional[str]:
        """Stream identifier ('stdout', 'stderr') for stream outputs."""
        return self.raw.get("stream")

    @property
    def text(self) -> List[str]:
        return _fragments(self.raw.get("text"))

    @property
    def prompt_number(self):
        return self.cell.prompt_number if self.cell is not None else None

    def render(self, config=None):
        """Render through the output renderer registered for ``type``."""
        from ui.base import resolve_config
        from ui.outputs import OutputView
        notebook = self.cell.notebook if self.cell is not None else None
        self.el = OutputView(self, resolve_config(config, notebook))
        return self.el


@dataclass(eq=False)
class Cell:
    """
    A single notebook cell.

    Code cells own one Input and their Outputs, with adjacent same-stream
    outputs already merged. Other cell types have neither (both are None).
    """
    raw: Mapping[str, Any]
    worksheet: Optional["Worksheet"] = field(default=None, repr=False)
    path: Optional[str] = field(default=None, repr=False)
    type: str = field(init=False)
    input: Optional[Input] = field(default=None, init=False, repr=False)
    outputs: Optional[List[Output]] = field(default=None, init=False, repr=False)
    el: Any = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.raw, Mapping):
            raise MalformedNotebookError("cell record must be a mapping", self.path)
        if "cell_type" not in self.raw:
            raise MalformedNotebookError("cell record has no cell_type", self.path)
        self.type = self.raw["cell_type"]

        if self.type == CellType.CODE:
            self.input = Input(self.raw.get("input") or [], self)
            raw_outputs = self.raw.get("outputs") or []
            if not isinstance(raw_outputs, list):
                raise MalformedNotebookError("outputs must be a list", self.path)
            base = self.path or "cell"
            self.outputs = coalesce_streams([
                Output(o, self, f"{base}.outputs[{i}]")
                for i, o in enumerate(raw_outputs)
            ])

    @property
    def notebook(self) -> Optional["Notebook"]:
        return self.worksheet.notebook if self.worksheet is not None else None

    @property
    def source(self) -> str:
        return "".join(_fragments(self.raw.get("source")))

    @property
    def level(self) -> int:
        """Heading level, clamped to 1-6."""
        level = int(self.raw.get("level") or 1)
        return min(max(level, 1), 6)

    @property
    def prompt_number(self):
        return self.raw.get("prompt_number")

    @property
    def language(self) -> Optional[str]:
        """Notebook language if declared, else the cell's own."""
        notebook = self.notebook
        if notebook is not None and notebook.metadata.get("language"):
            return notebook.metadata["language"]
        return self.raw.get("language")

    def render(self, config=None):
        """Render via the cell-type dispatch table."""
        from ui.base import resolve_config
        from ui.cells import CellView
        self.el = CellView(self, resolve_config(config, self.notebook))
        return self.el
