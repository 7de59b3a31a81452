"""
nbview UI - Code Cell Component

Renders a code cell's input block followed by its outputs.
"""

from fasthtml.common import *
from ..base import make_element, escape_html, prompt_attrs, render_isolated


def InputView(cell_input, config):
    """Render a code cell's source as an escaped code block.

    Args:
        cell_input: Input model instance
        config: Active RenderConfig

    Returns:
        Div holding pre > code, or an empty Div when there is no source
    """
    if not cell_input.raw:
        return make_element("div", [], config)

    lang = cell_input.language
    code_attrs = {"cls": f"lang-{lang}", "data_language": lang} if lang else {}
    code = ft_hx("code", NotStr(escape_html(cell_input.source)), **code_attrs)
    return make_element("div", ["input"], config,
                        make_element("pre", [], config, code),
                        **prompt_attrs(cell_input.prompt_number))


def CodeCellView(cell, config):
    """Render a code cell: input first, then each output in order.

    A failing output is replaced by an error placeholder so its siblings
    still render.
    """
    outputs = [
        render_isolated(lambda o=o: o.render(config), o.path, config)
        for o in cell.outputs
    ]
    return make_element("div", ["cell", "code-cell"], config,
                        cell.input.render(config), *outputs)
