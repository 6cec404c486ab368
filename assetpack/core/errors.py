"""Asset helper errors and their handlers."""
from flask import current_app
import logging

logger = logging.getLogger(__name__)


class AssetError(Exception):
    """Base class for asset helper errors."""


class DeprecatedFeatureError(AssetError):
    """Raised by helpers that are kept only to point callers elsewhere."""


class PackageNotFound(AssetError, KeyError):
    """Raised when a package (or one of its asset kinds) is not configured."""

    def __init__(self, package, kind):
        self.package = package
        self.kind = kind
        super().__init__(f"ASSET_PACKAGES does not contain a '{package}' {kind} package")

    def __str__(self):
        return self.args[0]


def register_error_handlers(app):
    """Register error handlers for the application."""

    @app.errorhandler(DeprecatedFeatureError)
    def deprecated_feature_error(error):
        logger.error(f'Deprecated asset helper called: {error}')
        return 'Deprecated asset helper', 500, {'Content-Type': 'text/plain; charset=utf-8'}

    @app.errorhandler(PackageNotFound)
    def package_not_found_error(error):
        logger.error(f'Asset package error: {error}')
        if current_app.debug:
            return str(error), 500, {'Content-Type': 'text/plain; charset=utf-8'}
        return 'Internal server error', 500, {'Content-Type': 'text/plain; charset=utf-8'}
