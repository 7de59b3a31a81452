"""
nbview - Read-only notebook viewer with FastHTML

Features:
- Lists the .ipynb files of the configured notebooks directory
- Renders each notebook (worksheet schema) to HTML with the nbview renderer
- Markdown cells through markdown-it-py, ANSI colors in streams and tracebacks
- Broken cells or outputs render as inline error placeholders
"""

from fasthtml.common import *
import json
from pathlib import Path
from typing import List

from document import parse, MalformedNotebookError
from services.nbview_config import NbviewConfig, load_config, print_config_status
from ui.layout import NotebookPage, NotebookIndex

# ============================================================================
# Styles
# ============================================================================

css = """
.nb-notebook { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif; }
.nb-cell { margin: 12px 0; }
.nb-input pre, .nb-output pre { padding: 8px 12px; border-radius: 4px; overflow-x: auto; }
.nb-input pre { background: #f5f5f5; }
.nb-stderr, .nb-pyerr { background: #fdecea; }
.nb-image-output { max-width: 100%; }
.nb-render-error { border-left: 3px solid #c00; padding: 4px 8px; color: #c00; }
"""


def list_notebooks(notebooks_dir: Path) -> List[str]:
    return sorted(p.stem for p in Path(notebooks_dir).glob("*.ipynb"))


def read_notebook(notebooks_dir: Path, name: str):
    """Read and decode ``<name>.ipynb``; None if there is no such file."""
    path = Path(notebooks_dir) / f"{name}.ipynb"
    if path.parent.resolve() != Path(notebooks_dir).resolve() or not path.is_file():
        return None
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def create_app(config: NbviewConfig):
    """Build the viewer app for a configuration.

    Args:
        config: Parsed NbviewConfig (notebooks directory and render options)

    Returns:
        (app, rt) as returned by fast_app
    """
    render_config = config.to_render_config()
    app, rt = fast_app(pico=False, hdrs=(Style(css),))

    @rt("/")
    def get():
        return NotebookIndex(list_notebooks(config.notebooks_dir))

    @rt("/notebook/{name}")
    def get(name: str):
        try:
            raw = read_notebook(config.notebooks_dir, name)
        except ValueError as e:
            # JSONDecodeError or UnicodeDecodeError
            return HTMLResponse(to_xml(Titled("Invalid notebook", P(str(e)))), status_code=422)
        if raw is None:
            return HTMLResponse(to_xml(Titled("Not found", P(f"No notebook named {name}"))), status_code=404)

        try:
            nb = parse(raw, render_config)
        except MalformedNotebookError as e:
            return HTMLResponse(to_xml(Titled("Malformed notebook", P(str(e)))), status_code=422)
        return NotebookPage(nb, nb.title or name, render_config)

    return app, rt


NBVIEW_CONFIG = load_config()
app, rt = create_app(NBVIEW_CONFIG)


if __name__ == '__main__':
    print("")
    print("   nbview - notebook viewer")
    print(f"   Serving notebooks from: {NBVIEW_CONFIG.notebooks_dir}/")
    print("")
    print_config_status(NBVIEW_CONFIG)
    print("")
    serve(port=8000)
