"""Test configuration and fixtures."""
import pytest
from markupsafe import Markup

from assetpack import create_app
from assetpack.core.bundles import Packager, VariantKind
from assetpack.core.errors import PackageNotFound
from assetpack.core.mode import ResolutionMode
from assetpack.core.resolver import AssetReferenceResolver
from assetpack.core.tags import TagRenderer


class FakePackager(Packager):
    """Packager with predictable URLs: ``/src/<pkg>/<n>.<ext>`` and ``/pkg/<pkg>[-variant].<ext>``."""

    def __init__(self, sizes=None):
        self.sizes = sizes or {'app': 2, 'admin': 1}

    def individual_urls(self, package, kind):
        if package not in self.sizes:
            raise PackageNotFound(package, kind.extension)
        return [f"/src/{package}/{n}.{kind.extension}" for n in range(self.sizes[package])]

    def packaged_url(self, package, kind, variant=VariantKind.PLAIN):
        suffix = f"-{variant.suffix}" if variant.suffix else ''
        return f"/pkg/{package}{suffix}.{kind.extension}"


class RecordingRenderer(TagRenderer):
    """Renders ``[css url attrs]`` lines and remembers every call."""

    def __init__(self):
        self.calls = []

    def render_stylesheet_links(self, urls, attributes=None):
        urls = list(urls)
        attributes = dict(attributes or {})
        self.calls.append(('css', urls, attributes))
        attrs = ''.join(f" {k}={v}" for k, v in sorted(attributes.items()))
        return Markup('\n'.join(f"[css {url}{attrs}]" for url in urls))

    def render_script_links(self, urls):
        urls = list(urls)
        self.calls.append(('js', urls, {}))
        return Markup('\n'.join(f"[js {url}]" for url in urls))


@pytest.fixture
def packager():
    return FakePackager()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def make_resolver(packager, renderer):
    """Build a resolver for the given mode switches."""
    def _make(package_assets=True, embed_assets=True, mhtml_enabled=True):
        mode = ResolutionMode(
            package_assets=package_assets,
            embed_assets=embed_assets,
            mhtml_enabled=mhtml_enabled,
        )
        return AssetReferenceResolver(packager, renderer, mode)
    return _make


@pytest.fixture
def app():
    """Flask app with the testing config (packaging always on, embedding on)."""
    app = create_app('testing')
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()
