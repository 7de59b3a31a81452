#!/usr/bin/env python3
"""
Tests for output rendering: display priority, per-format renderers,
tracebacks and streams.

Run with: uv run pytest test_outputs.py
"""
import sys
sys.path.insert(0, '.')

import pytest
from fasthtml.common import to_xml

from document import Cell, Output, UnknownOutputTypeError
from ui import RenderConfig, OutputView, DISPLAY_PRIORITY, select_format


def classes(el):
    return el.attrs.get("class", "").split()


def inner(output, config=None):
    """Render an output and return the element inside its wrapper."""
    el = OutputView(output, config or RenderConfig())
    assert classes(el) == ["nb-output"]
    return el.children[0]


def test_priority_order():
    assert DISPLAY_PRIORITY == ("png", "jpeg", "svg", "html", "latex", "javascript", "text")


@pytest.mark.parametrize("formats, expected", [
    (["text", "png"], "png"),
    (["text", "html"], "html"),
    (["latex", "svg", "jpeg"], "jpeg"),
    (["javascript", "text"], "javascript"),
    (["text"], "text"),
    ([], None),
])
def test_select_format(formats, expected):
    raw = {"output_type": "display_data", **{f: ["x"] for f in formats}}
    assert select_format(raw) == expected


def test_png_wins_over_text():
    el = inner(Output({"output_type": "display_data", "png": "iVBOR\nw0K", "text": ["<Figure>"]}))
    assert el.tag == "img"
    assert classes(el) == ["nb-image-output"]
    assert el.attrs["src"] == "data:image/png;base64,iVBORw0K"


def test_jpeg_image():
    el = inner(Output({"output_type": "pyout", "jpeg": "/9j/\n4AAQ\n"}))
    assert el.attrs["src"] == "data:image/jpeg;base64,/9j/4AAQ"


def test_text_is_escaped():
    el = inner(Output({"output_type": "pyout", "text": ["<b>", "1 > 0</b>"]}))
    assert el.tag == "pre"
    assert classes(el) == ["nb-text-output"]
    assert str(el.children[0]) == "&lt;b&gt;1 &gt; 0&lt;/b&gt;"
    assert "<b>" not in to_xml(el)


@pytest.mark.parametrize("format", ["html", "svg", "latex"])
def test_markup_formats_pass_through(format):
    payload = ["<div class='x'>", "$a < b$ & c", "</div>"]
    el = inner(Output({"output_type": "display_data", format: payload}))
    assert el.tag == "div"
    assert classes(el) == [f"nb-{format}-output"]
    assert str(el.children[0]) == "".join(payload)
    assert "".join(payload) in to_xml(el, indent=False)


def test_javascript_renders_script():
    el = inner(Output({"output_type": "display_data", "javascript": ["var a = 1 < 2;"]}))
    assert el.tag == "script"
    assert "class" not in el.attrs
    assert to_xml(el, indent=False) == "<script>var a = 1 < 2;</script>"


def test_no_known_format_renders_placeholder():
    el = inner(Output({"output_type": "display_data", "application/x-widget": {}}))
    assert el.tag == "div"
    assert classes(el) == ["nb-empty-output"]
    assert el.children == ()


def test_pyerr_without_converter_is_verbatim():
    el = inner(Output({"output_type": "pyerr", "traceback": ["<b>boom</b>"]}))
    assert el.tag == "pre"
    assert classes(el) == ["nb-pyerr"]
    assert to_xml(el, indent=False) == '<pre class="nb-pyerr"><b>boom</b></pre>'


def test_pyerr_uses_ansi_converter():
    config = RenderConfig(ansi_renderer=lambda s: s.upper())
    el = inner(Output({"output_type": "pyerr", "traceback": ["value", "error"]}), config)
    assert str(el.children[0]) == "VALUEERROR"


def test_stream_class_is_stream_name():
    el = inner(Output({"output_type": "stream", "stream": "stderr", "text": ["warn\n"]}))
    assert el.tag == "pre"
    assert classes(el) == ["nb-stderr"]
    assert str(el.children[0]) == "warn\n"


def test_stream_uses_ansi_converter():
    config = RenderConfig(ansi_renderer=lambda s: f"<span>{s}</span>")
    el = inner(Output({"output_type": "stream", "stream": "stdout", "text": ["a", "b"]}), config)
    assert str(el.children[0]) == "<span>ab</span>"


def test_prompt_number_attribute():
    cell = Cell({"cell_type": "code", "input": [], "prompt_number": 7, "outputs": [
        {"output_type": "pyout", "text": ["1"]},
    ]})
    el = OutputView(cell.outputs[0], RenderConfig())
    assert el.attrs["data-prompt-number"] == 7


@pytest.mark.parametrize("prompt_number", [None, 0])
def test_no_prompt_number_attribute(prompt_number):
    cell = Cell({"cell_type": "code", "input": [], "prompt_number": prompt_number, "outputs": [
        {"output_type": "pyout", "text": ["1"]},
    ]})
    el = OutputView(cell.outputs[0], RenderConfig())
    assert "data-prompt-number" not in el.attrs


def test_unknown_output_type_raises():
    with pytest.raises(UnknownOutputTypeError) as exc:
        OutputView(Output({"output_type": "clear_output"}, path="cell.outputs[0]"), RenderConfig())
    assert exc.value.output_type == "clear_output"
    assert exc.value.path == "cell.outputs[0]"


def test_output_render_caches_element():
    output = Output({"output_type": "pyout", "text": ["1"]})
    el = output.render()
    assert output.el is el
    assert output.render() == el


def test_class_prefix_is_applied():
    el = OutputView(Output({"output_type": "pyout", "text": ["1"]}), RenderConfig(class_prefix="x-"))
    assert classes(el) == ["x-output"]
    assert classes(el.children[0]) == ["x-text-output"]
