"""Render lesson markdown to HTML with highlighted fenced code blocks."""

from __future__ import annotations

import html
import re
from collections.abc import Callable

import markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

HighlightFn = Callable[[str, str], str]

MARKDOWN_EXTENSIONS = ["tables", "sane_lists"]
FENCE_PRIORITY = 25

FENCED_BLOCK_RE = re.compile(
    r"^(?P<fence>`{3,}|~{3,})[ \t]*(?P<lang>[\w#.+-]*)[^\n]*\n(?P<code>.*?)(?<=\n)(?P=fence)[ \t]*$",
    re.MULTILINE | re.DOTALL,
)


def highlight_code(code: str, lang: str) -> str:
    """Highlight with Pygments; unknown languages return the code unchanged."""
    try:
        lexer = get_lexer_by_name(lang)
    except ClassNotFound:
        return code
    return pygments_highlight(code, lexer, HtmlFormatter(nowrap=True))


class FencedHighlightPreprocessor(Preprocessor):
    """Replace fenced code blocks with stashed, highlighted HTML."""

    def __init__(self, md: markdown.Markdown, highlight: HighlightFn) -> None:
        super().__init__(md)
        self.highlight = highlight

    def run(self, lines: list[str]) -> list[str]:
        text = "\n".join(lines)
        while True:
            match = FENCED_BLOCK_RE.search(text)
            if match is None:
                break
            placeholder = self.md.htmlStash.store(self._code_html(match.group("code"), match.group("lang")))
            text = f"{text[: match.start()]}\n{placeholder}\n{text[match.end() :]}"
        return text.split("\n")

    def _code_html(self, code: str, lang: str) -> str:
        highlighted = self.highlight(code, lang)
        if highlighted == code:
            # Unhighlighted code is still plain text and must be escaped.
            highlighted = html.escape(code)
        class_attr = f' class="language-{lang}"' if lang else ""
        return f"<pre><code{class_attr}>{highlighted}</code></pre>"


class FencedHighlightExtension(Extension):
    """Python-Markdown extension wiring an injected highlight function into fenced blocks."""

    def __init__(self, highlight: HighlightFn = highlight_code, **kwargs: object) -> None:
        self.highlight = highlight
        super().__init__(**kwargs)

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        md.preprocessors.register(FencedHighlightPreprocessor(md, self.highlight), "fenced_highlight", FENCE_PRIORITY)


def render_markdown(text: str, highlight: HighlightFn = highlight_code) -> str:
    """Convert lesson markdown to HTML.

    A fresh ``markdown.Markdown`` is built per call so different highlight
    functions never share renderer state.
    """
    renderer = markdown.Markdown(extensions=[FencedHighlightExtension(highlight=highlight), *MARKDOWN_EXTENSIONS])
    return renderer.convert(text)
