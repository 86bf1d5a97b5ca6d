# mdedit/services/markdown_renderer.py
from __future__ import annotations

import html as html_lib
import logging
from typing import Literal

import markdown

from mdedit.domain.interfaces import IMarkdownRenderer
from mdedit.utils.constants import CSS_PREVIEW, HTML_TEMPLATE

logger = logging.getLogger(__name__)

MathEngine = Literal["mathjax", "katex"]

_EXTENSIONS = [
    "extra",
    "fenced_code",
    "codehilite",
    "toc",
    "sane_lists",
    "smarty",
    "pymdownx.tasklist",
    "pymdownx.tilde",
    "pymdownx.arithmatex",
]

_EXTENSION_CONFIG = {
    # noclasses keeps highlighting inline so the document needs no extra stylesheet
    "codehilite": {"guess_lang": False, "noclasses": True},
    "pymdownx.tasklist": {"custom_checkbox": False},
    # 'generic=True' wraps math in <span class="arithmatex"> / <div class="arithmatex">
    "pymdownx.arithmatex": {
        "generic": True,
        "inline_syntax": ["dollar"],
        "block_syntax": ["dollar"],
    },
}


def parse_math_engine(value: str | None) -> MathEngine | None:
    """Map a config value to a math engine; anything unrecognised means none."""
    v = (value or "").strip().lower()
    if v in ("mathjax", "katex"):
        return v  # type: ignore[return-value]
    if v not in ("", "none", "off"):
        logger.warning("Unknown math engine %r; math scripts disabled", value)
    return None


class MarkdownRenderer(IMarkdownRenderer):
    """
    Converts Markdown to a standalone HTML document with embedded CSS.

    Stateless: every call builds a fresh converter, so it is safe to call on
    every keystroke. Empty input renders to an empty string. With a math engine
    selected, MathJax or KaTeX scripts are appended so a JS-capable preview can
    typeset the arithmatex wrappers.
    """

    def __init__(self, math_engine: MathEngine | None = None) -> None:
        self.math_engine: MathEngine | None = math_engine

    def to_html(self, markdown_text: str | None) -> str:
        if not markdown_text:
            return ""

        try:
            body = markdown.markdown(
                markdown_text,
                extensions=_EXTENSIONS,
                extension_configs=_EXTENSION_CONFIG,
                output_format="html",
            )
        except Exception:
            logger.exception("Markdown conversion failed; showing source as text")
            body = f"<pre>{html_lib.escape(markdown_text)}</pre>"

        # Scripts go at the end of the body so the template stays fixed.
        return HTML_TEMPLATE.format(css=CSS_PREVIEW, body=body + self._math_scripts(self.math_engine))

    # -------------------- helpers --------------------

    def _math_scripts(self, engine: MathEngine | None) -> str:
        if engine == "katex":
            katex_js = """
<link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/katex@0.16.10/dist/katex.min.css">
<script defer src="https://cdn.jsdelivr.net/npm/katex@0.16.10/dist/katex.min.js"></script>
<script defer src="https://cdn.jsdelivr.net/npm/katex@0.16.10/dist/contrib/auto-render.min.js"></script>
<script>
document.addEventListener("DOMContentLoaded", function() {
  if (typeof renderMathInElement === "function") {
    renderMathInElement(document.body, {
      delimiters: [
        {left: "\\\\[", right: "\\\\]", display: true},
        {left: "\\\\(", right: "\\\\)", display: false}
      ],
      ignoredTags: ["script", "noscript", "style", "textarea", "pre", "code"]
    });
  }
});
</script>
"""
            return katex_js

        if engine == "mathjax":
            mathjax_cfg = """
<script>
window.MathJax = {
  tex: {
    inlineMath: [['\\\\(', '\\\\)']],
    displayMath: [['\\\\[', '\\\\]']],
    processEscapes: true
  },
  options: {
    skipHtmlTags: ['script', 'noscript', 'style', 'textarea', 'pre', 'code']
  }
};
</script>
"""
            mathjax_js = (
                '<script id="MathJax-script" async '
                'src="https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-chtml.js"></script>'
            )
            return mathjax_cfg + mathjax_js

        return ""
