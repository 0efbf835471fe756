from _blog_components import Layout

from wren import h

styles = "body { font-family: system-ui, sans-serif; }"


def page(path):
    return h(
        Layout,
        {"path": path},
        h("h1", None, "Example blog"),
        h("p", None, "Built with wren."),
    )
