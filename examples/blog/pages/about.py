from _blog_components import Layout

from wren import h


def page(path):
    return h(Layout, {"path": path}, h("p", None, "This site is generated from Python modules."))
