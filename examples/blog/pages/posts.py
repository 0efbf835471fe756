"""One route per post, generated from POSTS."""

from _blog_components import Code, Layout

from wren import Fragment, h

POSTS = {
    "hello": ("Hello, world", "print('hello')"),
    "scopes": ("Scoped styles", "@component(style='.x { color: red; }')"),
}


def Post(path, generator):
    title, snippet = POSTS[generator.strip("/")]
    return h(
        Layout,
        {"path": path},
        h(Fragment, None, h("h1", None, title), h(Code, None, snippet)),
    )


pages = {f"/{slug}": Post for slug in POSTS}
