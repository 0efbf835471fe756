"""Document shell rendering.

Wraps serialized page markup in a full HTML document with the page's
aggregated stylesheet in ``<head>`` and any hydration bootstrap at the
end of ``<body>``. The shell is a kida template; the pre-rendered parts
are passed in as ``Markup`` so they are not escaped a second time.
"""

from functools import cache
from typing import Any

from kida import DictLoader, Environment
from kida.template import Markup

from wren.pages.types import RenderedPage
from wren.render.html import render_html

DOCUMENT_TEMPLATE = """\
<!DOCTYPE html>
<html{% if lang %} lang="{{ lang }}"{% end %}>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
{% if title %}<title>{{ title }}</title>
{% end %}{% if styles %}<style>{{ styles }}</style>
{% end %}{{ head_extra }}
</head>
<body>
{{ body }}
{{ body_extra }}
</body>
</html>
"""


@cache
def _document_template() -> Any:
    # Compiled once per process; rendering does not mutate it
    env = Environment(
        loader=DictLoader({"document.html": DOCUMENT_TEMPLATE}),
        autoescape=True,
    )
    return env.get_template("document.html")


def render_document(
    body: str,
    *,
    styles: str = "",
    title: str = "",
    lang: str = "",
    head_extra: str = "",
    body_extra: str = "",
) -> str:
    """Render a complete HTML document around pre-rendered *body* markup.

    *body*, *styles*, *head_extra*, and *body_extra* are trusted markup;
    *title* and *lang* are escaped.
    """
    return _document_template().render({
        "body": Markup(body),
        "styles": Markup(styles),
        "title": title,
        "lang": lang,
        "head_extra": Markup(head_extra),
        "body_extra": Markup(body_extra),
    })


def render_page_document(
    page: RenderedPage,
    *,
    title: str = "",
    lang: str = "",
    body_extra: str = "",
) -> str:
    """Serialize a rendered page's tree and wrap it in the document shell."""
    return render_document(
        render_html(page.tree),
        styles=page.styles,
        title=title,
        lang=lang,
        body_extra=body_extra,
    )
