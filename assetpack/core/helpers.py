"""Template helpers for writing out asset package tags."""
from typing import List

from flask import current_app
from markupsafe import Markup

from assetpack.core.bundles import BundlePackager, Packager
from assetpack.core.errors import DeprecatedFeatureError
from assetpack.core.mode import current_mode
from assetpack.core.options import CallOptions
from assetpack.core.resolver import TEMPLATES_DEPRECATED, AssetReferenceResolver
from assetpack.core.tags import HtmlTagRenderer, TagRenderer

EXTENSION_KEY = 'assetpack'


def get_packager() -> Packager:
    """Packager registered on the current app, or one built from its config."""
    state = current_app.extensions.get(EXTENSION_KEY, {})
    packager = state.get('packager')
    if packager is None:
        packager = BundlePackager.from_config(current_app.config)
    return packager


def get_renderer() -> TagRenderer:
    state = current_app.extensions.get(EXTENSION_KEY, {})
    return state.get('renderer') or HtmlTagRenderer()


def get_resolver() -> AssetReferenceResolver:
    """A resolver for the current app and request.

    The mode is read from the config on every call, so changing it at runtime
    takes effect on the next helper call.
    """
    return AssetReferenceResolver(get_packager(), get_renderer(), current_mode())


def include_stylesheets(*packages, **options) -> Markup:
    """Stylesheet tags for the packages; extra keyword arguments become attributes."""
    return get_resolver().resolve_stylesheets(packages, CallOptions.from_kwargs(**options)).render()


def include_javascripts(*packages) -> Markup:
    """Script tags for the packages."""
    return get_resolver().resolve_javascripts(packages)


def include_templates(*packages, **options):
    """Removed: templates are served from javascript packages now."""
    raise DeprecatedFeatureError(TEMPLATES_DEPRECATED)


def stylesheet_paths(*packages, **options) -> List[str]:
    return get_resolver().stylesheet_paths(packages, CallOptions.from_kwargs(**options))


def javascript_paths(*packages) -> List[str]:
    return get_resolver().javascript_paths(packages)


def template_paths(*packages) -> List[str]:
    return get_resolver().template_paths(packages)


HELPERS = {
    'include_stylesheets': include_stylesheets,
    'include_javascripts': include_javascripts,
    'include_templates': include_templates,
    'stylesheet_paths': stylesheet_paths,
    'javascript_paths': javascript_paths,
    'template_paths': template_paths,
}


# Template globals
def init_asset_helpers(app, packager=None, renderer=None):
    """Initialize asset helpers for templates."""
    app.extensions[EXTENSION_KEY] = {
        'packager': packager,
        'renderer': renderer,
    }
    app.jinja_env.globals.update(HELPERS)
