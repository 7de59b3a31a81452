"""Markdown to HTML for markdown cells, using markdown-it-py."""
from markdown_it import MarkdownIt

# Raw HTML in notebook markdown is kept, as notebook front-ends do
_md = MarkdownIt("commonmark", {"html": True}).enable("table")


def markdown_to_html(text: str) -> str:
    """Render markdown source to an HTML fragment."""
    return _md.render(text)
