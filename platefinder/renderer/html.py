"""
Conversion of styled spans (see :py:mod:`platefinder.renderer.spans`) into
HTML:

.. autofunction:: render_spans_html

Headings become ``<h1>`` and ``<h2>`` elements, bold text is wrapped in
``<strong>`` and line breaks become ``<br />``. Line breaks immediately
following a heading are omitted since headings are already block-level
elements.
"""

from typing import Iterable, Optional

import html

from textwrap import indent

from xml.sax.saxutils import quoteattr

from platefinder.renderer.spans import StyledSpan, LINE_BREAK


__all__ = [
    "t",
    "render_span",
    "render_spans_html",
]


def t(tag: str, body: Optional[str] = None, **attrs: str) -> str:
    """
    A simple utility function for generating HTML tags.

    Examples::

        >>> t("br")
        '<br />'
        >>> t("a", "Click here", href="elsewhere.html")
        '<a href="elsewhere.html">Click here</a>'
        >>> t("span", "Hiya", class_="fancy")
        '<span class="fancy">Hiya</span>'
        >>> t("span", "Bye", data__foo="bar")
        '<span data-foo="bar">Bye</span>'

    Note that trailing underscores (``_``) are trimmed from attribute names and
    double underscores (``__``) are replaced with hyphens.
    """

    attrs_str = " ".join(
        name.rstrip("_").replace("__", "-") + "=" + quoteattr(value)
        for name, value in attrs.items()
    )

    if body is None:
        return f"<{tag} {attrs_str}/>"
    else:
        if "\n" in body:
            body = "\n" + indent(body, "  ").rstrip() + "\n"
        return f"<{tag}{(' ' + attrs_str).rstrip()}>{body}</{tag}>"


def render_span(span: StyledSpan) -> str:
    """Render a single (non line break) span."""
    text = html.escape(span.text)
    if span.style.heading_level:
        return t(f"h{span.style.heading_level}", text) + "\n"
    elif span.style.bold:
        return t("strong", text)
    else:
        return text


def render_spans_html(spans: Iterable[StyledSpan]) -> str:
    """Render a sequence of styled spans as an HTML fragment."""
    out = []
    after_heading = False
    for span in spans:
        if span == LINE_BREAK:
            if not after_heading:
                out.append(t("br") + "\n")
            after_heading = False
        else:
            out.append(render_span(span))
            after_heading = span.style.heading_level != 0
    return "".join(out)
