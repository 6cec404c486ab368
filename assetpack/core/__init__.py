"""Asset package helpers."""
from assetpack.core.bundles import AssetKind, BundlePackager, Packager, VariantKind
from assetpack.core.errors import AssetError, DeprecatedFeatureError, PackageNotFound
from assetpack.core.mode import ResolutionMode
from assetpack.core.options import CallOptions
from assetpack.core.resolver import (
    DATA_URI_END,
    DATA_URI_START,
    MHTML_END,
    MHTML_START,
    AssetReferenceResolver,
    TagBundle,
)
from assetpack.core.tags import HtmlTagRenderer, TagRenderer
