"""
nbview UI - Output Components

Renders execution outputs. Multi-format outputs (display_data, pyout) pick
one format by DISPLAY_PRIORITY; errors and streams go through the ANSI
converter.
"""

from fasthtml.common import *
from typing import Optional
from document.errors import UnknownOutputTypeError
from .base import make_element, escape_html, join_source, prompt_attrs


def _image(media: str):
    def render(data, config):
        payload = join_source(data).replace("\n", "")
        return make_element("img", ["image-output"], config,
                            src=f"data:image/{media};base64,{payload}")
    return render


def _markup(name: str):
    def render(data, config):
        return make_element("div", [f"{name}-output"], config, NotStr(join_source(data)))
    return render


def render_text(data, config):
    return make_element("pre", ["text-output"], config, NotStr(escape_html(join_source(data))))


def render_javascript(data, config):
    return make_element("script", [], config, NotStr(join_source(data)))


# Per-format renderers: (payload, config) -> element
DISPLAY = {
    "png": _image("png"),
    "jpeg": _image("jpeg"),
    "svg": _markup("svg"),
    "html": _markup("html"),
    "latex": _markup("latex"),
    "javascript": render_javascript,
    "text": render_text,
}

# Richer visual formats first
DISPLAY_PRIORITY = ("png", "jpeg", "svg", "html", "latex", "javascript", "text")


def select_format(raw) -> Optional[str]:
    """Highest-priority format present in an output record, or None."""
    return next((f for f in DISPLAY_PRIORITY if raw.get(f)), None)


def render_display_data(output, config):
    fmt = select_format(output.raw)
    if fmt is None:
        return make_element("div", ["empty-output"], config)
    return DISPLAY[fmt](output.raw[fmt], config)


def render_pyerr(output, config):
    traceback = join_source(output.raw.get("traceback"))
    return make_element("pre", ["pyerr"], config, NotStr(config.ansi(traceback)))


def render_stream(output, config):
    text = join_source(output.text)
    return make_element("pre", [output.stream] if output.stream else [], config, NotStr(config.ansi(text)))


# Output kind -> (output, config) -> element
OUTPUT_RENDERERS = {
    "display_data": render_display_data,
    "pyout": render_display_data,
    "pyerr": render_pyerr,
    "stream": render_stream,
}


def OutputView(output, config):
    """Render one output inside its ``output`` wrapper.

    Args:
        output: Output model instance
        config: Active RenderConfig

    Returns:
        Div wrapping the rendered output

    Raises:
        UnknownOutputTypeError: No renderer for ``output.type``
    """
    renderer = OUTPUT_RENDERERS.get(output.type)
    if renderer is None:
        raise UnknownOutputTypeError(output.type, output.path)
    return make_element("div", ["output"], config,
                        renderer(output, config),
                        **prompt_attrs(output.prompt_number))
