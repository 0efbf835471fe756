"""Tests for wren.site — discovering, rendering, and writing a whole site."""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from wren.config import SiteConfig
from wren.errors import ConfigurationError, PageLoadError, StyleResolutionError
from wren.site import Site, output_path

_LAYOUT = '''\
from wren import h


def Layout(children=None):
    return h("div", {"class": "layout"}, children)
'''

_INDEX = '''\
from wren import component, h


def greet():
    pass


@component(style=".hero{color:red}", script=greet)
def Hero(children=None):
    return h("h1", {"class": "hero"}, children)


def page(path, generator):
    return h("main", None, h(Hero, None, "Welcome"))
'''

_ABOUT = '''\
from _wren_site_layout import Layout
from wren import h

styles = "body{margin:0}"


def page(path):
    return h(Layout, None, h("p", None, "About us"))
'''

_BLOG = '''\
from wren import h


def Post(path, generator):
    return h("article", {"data-slug": generator.strip("/")}, path)


pages = {"/a": Post, "/b": Post}
'''


def _write(root: Path, relative: str, content: str) -> None:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def site_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    monkeypatch.setattr(sys, "path", [*sys.path])
    pages = tmp_path / "pages"
    _write(pages, "_wren_site_layout.py", _LAYOUT)
    _write(pages, "index.py", _INDEX)
    _write(pages, "about.py", _ABOUT)
    _write(pages, "blog.py", _BLOG)
    _write(pages, "assets/site.css", "h1{}")
    yield tmp_path
    sys.modules.pop("_wren_site_layout", None)


def _site(root: Path, **overrides: object) -> Site:
    return Site(SiteConfig(pages_dir=root / "pages", out_dir=root / "dist", **overrides))  # type: ignore[arg-type]


class TestOutputPath:
    def test_root(self, tmp_path: Path) -> None:
        assert output_path(tmp_path, "/") == tmp_path / "index.html"

    def test_nested(self, tmp_path: Path) -> None:
        assert output_path(tmp_path, "/blog/a") == tmp_path / "blog" / "a" / "index.html"


class TestSiteConfigValidation:
    def test_bad_scope_policy(self) -> None:
        with pytest.raises(ConfigurationError):
            Site(SiteConfig(scope_policy="nope"))


class TestRender:
    @pytest.mark.anyio
    async def test_routes_in_discovery_order(self, site_dir: Path) -> None:
        pages = await _site(site_dir).render()
        assert list(pages) == ["/about", "/blog/a", "/blog/b", "/"]

    @pytest.mark.anyio
    async def test_generated_pages_carry_generator(self, site_dir: Path) -> None:
        pages = await _site(site_dir).render()
        assert pages["/blog/a"].generator == "/a"
        assert pages["/blog/b"].generator == "/b"
        assert pages["/about"].generator == ""

    @pytest.mark.anyio
    async def test_scripts_and_styles_collected(self, site_dir: Path) -> None:
        pages = await _site(site_dir).render()
        index = pages["/"]
        assert [entry.name for entry in index.scripts] == ["Hero"]
        assert ".hero{color:red}" in index.styles
        assert index.styles.startswith("@scope")
        assert pages["/about"].styles == "body{margin:0}"
        assert pages["/about"].needs_hydration is False

    def test_render_source(self, site_dir: Path) -> None:
        site = _site(site_dir)
        source = next(s for s in site.discover() if s.route == "/blog")
        rendered = site.render_source(source)
        assert [page.route for page in rendered] == ["/blog/a", "/blog/b"]


class TestBuild:
    def test_writes_every_route(self, site_dir: Path) -> None:
        _site(site_dir).build()
        out = site_dir / "dist"
        for relative in ("index.html", "about/index.html", "blog/a/index.html", "blog/b/index.html"):
            assert (out / relative).is_file(), relative

    def test_page_markup(self, site_dir: Path) -> None:
        _site(site_dir, title="Test").build()
        out = site_dir / "dist"
        blog_a = (out / "blog" / "a" / "index.html").read_text(encoding="utf-8")
        assert '<article data-slug="a" data-scope="' in blog_a
        assert "/blog/a</article>" in blog_a
        assert "<title>Test</title>" in blog_a

        about = (out / "about" / "index.html").read_text(encoding="utf-8")
        assert "About us</p>" in about
        assert 'class="layout"' in about
        assert "<style>body{margin:0}</style>" in about

    def test_scoped_markup_matches_stylesheet(self, site_dir: Path) -> None:
        pages = _site(site_dir).build()
        scope = pages["/"].scripts[0].scope
        index = (site_dir / "dist" / "index.html").read_text(encoding="utf-8")
        assert f'<h1 class="hero" data-scope="{scope}">Welcome</h1>' in index
        assert f'@scope ([data-scope="{scope}"])' in index

    def test_bootstrap_only_where_needed(self, site_dir: Path) -> None:
        _site(site_dir).build()
        out = site_dir / "dist"
        index = (out / "index.html").read_text(encoding="utf-8")
        about = (out / "about" / "index.html").read_text(encoding="utf-8")
        assert 'data-wren="hydrate"' in index
        assert "import wren_page_index" in index
        assert 'data-wren="hydrate"' not in about

    def test_hydration_sources_written(self, site_dir: Path) -> None:
        _site(site_dir).build()
        sources = site_dir / "dist" / "_wren"
        assert (sources / "wren_page_index.py").is_file()
        assert (sources / "_wren_site_layout.py").is_file()
        assert not (sources / "wren_page_about.py").exists()
        assert (sources / "wren" / "hydration" / "walker.py").is_file()
        assert (sources / "wren" / "tree" / "resolver.py").is_file()
        assert not (sources / "wren" / "site.py").exists()
        assert not (sources / "wren" / "render").exists()

    def test_bootstrap_lists_engine_files(self, site_dir: Path) -> None:
        _site(site_dir).build()
        index = (site_dir / "dist" / "index.html").read_text(encoding="utf-8")
        assert "/_wren/wren/tree/resolver.py" in index
        assert "./wren/hydration/walker.py" in index
        assert "packages" not in index

    def test_no_hydrate(self, site_dir: Path) -> None:
        _site(site_dir, hydrate=False).build()
        out = site_dir / "dist"
        assert 'data-wren="hydrate"' not in (out / "index.html").read_text(encoding="utf-8")
        assert not (out / "_wren").exists()

    def test_assets_copied(self, site_dir: Path) -> None:
        _site(site_dir).build()
        assert (site_dir / "dist" / "assets" / "site.css").read_text(encoding="utf-8") == "h1{}"

    def test_rebuild_is_byte_identical(self, site_dir: Path) -> None:
        _site(site_dir).build()
        first = (site_dir / "dist" / "index.html").read_text(encoding="utf-8")
        _site(site_dir).build()
        assert (site_dir / "dist" / "index.html").read_text(encoding="utf-8") == first


class TestBuildErrors:
    def test_duplicate_route(self, site_dir: Path) -> None:
        _write(site_dir / "pages", "blog/index.py", "from wren import h\npages = {'/a': lambda: h('p')}\n")
        with pytest.raises(ConfigurationError, match="'/blog/a' produced by both"):
            _site(site_dir).build()

    def test_broken_module(self, site_dir: Path) -> None:
        _write(site_dir / "pages", "oops.py", "raise RuntimeError('broken page')\n")
        with pytest.raises(PageLoadError, match="broken page"):
            _site(site_dir).build()

    def test_failing_style(self, site_dir: Path) -> None:
        _write(
            site_dir / "pages",
            "styled.py",
            "from wren import component, h\n"
            "def bad():\n"
            "    raise ValueError('no style')\n"
            "page = component(lambda: h('p'), style=bad, name='Styled')\n",
        )
        with pytest.raises(StyleResolutionError, match="Styled"):
            _site(site_dir).build()
        assert not (site_dir / "dist" / "index.html").exists()

    def test_missing_pages_dir(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Pages directory not found"):
            Site(SiteConfig(pages_dir=tmp_path / "missing", out_dir=tmp_path / "dist")).build()


class TestImportIsolation:
    def test_pages_dir_leaves_sys_path(self, site_dir: Path) -> None:
        _site(site_dir).build()
        assert str((site_dir / "pages").resolve()) not in sys.path

    def test_partials_are_unloaded(self, site_dir: Path) -> None:
        _site(site_dir).build()
        assert "_wren_site_layout" not in sys.modules

    def test_rebuild_sees_edited_partial(self, site_dir: Path) -> None:
        _site(site_dir).build()
        _write(site_dir / "pages", "_wren_site_layout.py", _LAYOUT.replace('"layout"', '"layout2"'))
        _site(site_dir).build()
        about = (site_dir / "dist" / "about" / "index.html").read_text(encoding="utf-8")
        assert 'class="layout2"' in about

    def test_cleanup_after_failed_build(self, site_dir: Path) -> None:
        _write(site_dir / "pages", "oops.py", "raise RuntimeError('broken page')\n")
        with pytest.raises(PageLoadError):
            _site(site_dir).build()
        assert str((site_dir / "pages").resolve()) not in sys.path
        assert "_wren_site_layout" not in sys.modules
