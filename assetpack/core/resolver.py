"""Decide which asset URLs a page references and how they are wrapped.

In development the helpers emit the ordered list of source files; once
packaging is on they link to the built packages. Stylesheets with embedded
images come in two variants, a Data-URI one for modern browsers and an MHTML
one for IE 7 and below, selected with conditional comments.
"""
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence
import logging

from markupsafe import Markup

from assetpack.core.bundles import AssetKind, Packager, VariantKind
from assetpack.core.errors import DeprecatedFeatureError
from assetpack.core.mode import ResolutionMode
from assetpack.core.options import CallOptions
from assetpack.core.tags import TagRenderer

logger = logging.getLogger(__name__)

DATA_URI_START = "<!--[if (!IE)|(gte IE 8)]><!-->"
DATA_URI_END = "<!--<![endif]-->"
MHTML_START = "<!--[if lte IE 7]>"
MHTML_END = "<![endif]-->"

TEMPLATES_DEPRECATED = (
    "Packaged templates are no longer supported. Join your templates into "
    "a javascript package and use include_javascripts instead."
)


@dataclass(frozen=True)
class TagBundle:
    """Stylesheet markup: a flat tag list, or the Data-URI/MHTML pair."""

    tags: Markup = Markup('')
    data_uri_tags: Optional[Markup] = None
    ie_tags: Optional[Markup] = None

    @property
    def embedded(self) -> bool:
        return self.data_uri_tags is not None

    def render(self) -> Markup:
        if not self.embedded:
            return Markup(self.tags)
        return Markup('\n').join([
            Markup(DATA_URI_START), Markup(self.data_uri_tags), Markup(DATA_URI_END),
            Markup(MHTML_START), Markup(self.ie_tags or ''), Markup(MHTML_END),
        ])

    def __str__(self) -> str:
        return str(self.render())

    def __html__(self) -> str:
        return str(self.render())


class AssetReferenceResolver:
    """Maps package names to tags or URLs for one resolution mode."""

    def __init__(self, packager: Packager, renderer: TagRenderer, mode: ResolutionMode):
        self.packager = packager
        self.renderer = renderer
        self.mode = mode

    # Stylesheets

    def resolve_stylesheets(self, packages: Sequence[str],
                            options: Optional[CallOptions] = None) -> TagBundle:
        """Tags for a batch of stylesheet packages."""
        options = options or CallOptions()
        if not self.mode.package_assets:
            logger.debug(f"Individual stylesheets for {list(packages)}")
            return TagBundle(tags=self._individual_stylesheets(packages, options))
        if options.embedding_disabled or not self.mode.embed_assets:
            logger.debug(f"Packaged stylesheets for {list(packages)}")
            return TagBundle(tags=self._packaged_stylesheets(packages, options))
        logger.debug(f"Embedded-image stylesheets for {list(packages)} (mhtml={self.mode.mhtml_enabled})")
        return self._embedded_image_stylesheets(packages, options)

    def stylesheet_paths(self, packages: Sequence[str],
                         options: Optional[CallOptions] = None) -> List[str]:
        """URLs for a batch of stylesheet packages, following the same branches."""
        options = options or CallOptions()
        if not self.mode.package_assets:
            return self._collect(packages, self._individual_css)
        if options.embedding_disabled or not self.mode.embed_assets:
            return self._collect(packages, self._packaged_css)
        return self._collect(packages, self._datauri_css) + self._collect(packages, self._ie_css)

    # Javascripts

    def javascript_paths(self, packages: Sequence[str]) -> List[str]:
        """Packaged URL per package, or each package's source URLs."""
        if self.mode.package_assets:
            return [self.packager.packaged_url(p, AssetKind.JS) for p in packages]
        return self._collect(packages, lambda p: self.packager.individual_urls(p, AssetKind.JS))

    def resolve_javascripts(self, packages: Sequence[str]) -> Markup:
        return self.renderer.render_script_links(self.javascript_paths(packages))

    # Templates

    def template_paths(self, packages: Sequence[str]) -> List[str]:
        """Templates are always compiled, so there is no individual mode."""
        return [self.packager.packaged_url(p, AssetKind.TEMPLATE) for p in packages]

    def resolve_templates(self, packages: Sequence[str]) -> List[str]:
        return self.template_paths(packages)

    def include_templates(self, *packages, **options):
        raise DeprecatedFeatureError(TEMPLATES_DEPRECATED)

    # Helpers

    def _individual_css(self, package: str) -> List[str]:
        return self.packager.individual_urls(package, AssetKind.CSS)

    def _packaged_css(self, package: str) -> List[str]:
        return [self.packager.packaged_url(package, AssetKind.CSS)]

    def _datauri_css(self, package: str) -> List[str]:
        return [self.packager.packaged_url(package, AssetKind.CSS, VariantKind.DATA_URI)]

    def _mhtml_css(self, package: str) -> List[str]:
        return [self.packager.packaged_url(package, AssetKind.CSS, VariantKind.MHTML)]

    def _ie_css(self, package: str) -> List[str]:
        if self.mode.mhtml_enabled:
            return self._mhtml_css(package)
        return self._packaged_css(package)

    def _individual_stylesheets(self, packages, options):
        return self._tags_with_options(packages, options, self._individual_css)

    def _packaged_stylesheets(self, packages, options):
        return self._tags_with_options(packages, options, self._packaged_css)

    def _embedded_image_stylesheets(self, packages, options):
        data_uri_tags = self._tags_with_options(packages, options, self._datauri_css)
        if self.mode.mhtml_enabled:
            ie_tags = self._tags_with_options(packages, options, self._mhtml_css)
        else:
            ie_tags = self._packaged_stylesheets(packages, options)
        return TagBundle(data_uri_tags=data_uri_tags, ie_tags=ie_tags)

    def _tags_with_options(self, packages, options: CallOptions,
                           urls_for: Callable[[str], List[str]]) -> Markup:
        """Stylesheet tags for a batch of packages, with the call's attributes."""
        return self.renderer.render_stylesheet_links(self._collect(packages, urls_for),
                                                     dict(options.attributes))

    @staticmethod
    def _collect(packages, urls_for: Callable[[str], List[str]]) -> List[str]:
        """Resolve each package in order and flatten one level."""
        urls: List[str] = []
        for package in packages:
            urls.extend(urls_for(package))
        return urls
