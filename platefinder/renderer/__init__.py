"""
Recipe markdown is rendered for display in two stages. First the markdown is
converted into a flat sequence of styled text spans
(:py:mod:`platefinder.renderer.spans`), independent of any particular display
technology. Secondly these spans may be converted into HTML
(:py:mod:`platefinder.renderer.html`).

:py:mod:`platefinder.renderer.spans`: Markdown to styled spans
==============================================================

.. automodule:: platefinder.renderer.spans

:py:mod:`platefinder.renderer.html`: Styled spans to HTML
=========================================================

.. automodule:: platefinder.renderer.html

"""

from platefinder.renderer.spans import SpanStyle, StyledSpan, LINE_BREAK, render
from platefinder.renderer.html import render_spans_html
