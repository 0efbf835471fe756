"""Shared components for the example blog."""

from wren import component, h


def _nav_style(active=""):
    return "nav a { margin-right: 1rem; }\nnav a.active { font-weight: bold; }"


@component(style=_nav_style)
def Nav(active=""):
    links = [("/", "Home"), ("/about", "About"), ("/posts/hello", "Posts")]
    return h(
        "nav",
        None,
        [h("a", {"href": href, "class": "active" if href == active else None}, label) for href, label in links],
    )


@component(style="main { max-width: 40rem; margin: 0 auto; }")
def Layout(path="", children=None):
    return h("main", None, h(Nav, {"active": path}), children)


def _highlight():
    from js import document  # type: ignore[import-not-found]

    for block in document.querySelectorAll("pre"):
        block.classList.add("hydrated")


@component(style="pre { background: #f4f4f4; padding: 0.5rem; }", script=_highlight)
def Code(children=None):
    return h("pre", None, h("code", None, children))
