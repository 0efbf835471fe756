"""Serialization of resolved trees to HTML documents."""

from wren.render.document import DOCUMENT_TEMPLATE, render_document, render_page_document
from wren.render.html import SCOPE_ATTR, VOID_ELEMENTS, render_attrs, render_html

__all__ = [
    "DOCUMENT_TEMPLATE",
    "SCOPE_ATTR",
    "VOID_ELEMENTS",
    "render_attrs",
    "render_document",
    "render_html",
    "render_page_document",
]
