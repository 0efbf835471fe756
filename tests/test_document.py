"""Tests for wren.render.document — the kida document shell."""

from wren.hydration.scripts import ScriptEntry
from wren.pages.types import RenderedPage
from wren.render.document import render_document, render_page_document
from wren.tree import h, resolve


class TestRenderDocument:
    def test_shell(self) -> None:
        doc = render_document("<p>hi</p>")
        assert doc.startswith("<!DOCTYPE html>")
        assert "<p>hi</p>" in doc
        assert '<meta charset="utf-8">' in doc
        assert doc.rstrip().endswith("</html>")

    def test_body_is_not_escaped_twice(self) -> None:
        doc = render_document("<p>a &amp; b</p>")
        assert "<p>a &amp; b</p>" in doc
        assert "&amp;amp;" not in doc

    def test_title_is_escaped(self) -> None:
        doc = render_document("", title="Tom & <Jerry>")
        assert "<title>Tom &amp; &lt;Jerry&gt;</title>" in doc

    def test_no_title_tag_without_title(self) -> None:
        assert "<title>" not in render_document("")

    def test_styles_in_head(self) -> None:
        doc = render_document("", styles='@scope ([data-scope="w1"]) {\n.a > b{}\n}')
        assert '<style>@scope ([data-scope="w1"]) {\n.a > b{}\n}</style>' in doc
        assert doc.index("<style>") < doc.index("</head>")

    def test_no_style_tag_without_styles(self) -> None:
        assert "<style>" not in render_document("")

    def test_lang(self) -> None:
        assert '<html lang="fr">' in render_document("", lang="fr")

    def test_body_extra_after_body(self) -> None:
        doc = render_document("<main></main>", body_extra="<script>x()</script>")
        assert doc.index("<main></main>") < doc.index("<script>x()</script>") < doc.index("</body>")


class TestRenderPageDocument:
    def test_serializes_tree_and_styles(self) -> None:
        page = RenderedPage(
            route="/",
            tree=resolve(h("main", None, "hello")),
            styles=".x{}",
        )
        doc = render_page_document(page, title="Home", lang="en")
        assert "<main>hello</main>" in doc
        assert "<style>.x{}</style>" in doc
        assert "<title>Home</title>" in doc

    def test_needs_hydration(self) -> None:
        page = RenderedPage(route="/", tree=None)
        assert page.needs_hydration is False
        scripted = RenderedPage(
            route="/", tree=None, scripts=(ScriptEntry(name="x", scope="", script=lambda: None),)
        )
        assert scripted.needs_hydration is True
