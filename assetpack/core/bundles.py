"""Asset package definitions and URL lookup."""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence

from flask import url_for

from assetpack.core.errors import PackageNotFound


class AssetKind(Enum):
    """Kinds of asset a package can hold, valued by file extension."""
    CSS = 'css'
    JS = 'js'
    TEMPLATE = 'jst'

    @property
    def extension(self) -> str:
        return self.value


class VariantKind(Enum):
    """Stylesheet variants produced by the packaging build."""
    PLAIN = None
    DATA_URI = 'datauri'
    MHTML = 'mhtml'

    @property
    def suffix(self) -> Optional[str]:
        return self.value


class Packager(ABC):
    """Resolves package names to the URLs of their assets."""

    @abstractmethod
    def individual_urls(self, package: str, kind: AssetKind) -> List[str]:
        """URLs of the source files that make up a package, in order."""
        pass

    @abstractmethod
    def packaged_url(self, package: str, kind: AssetKind,
                     variant: VariantKind = VariantKind.PLAIN) -> str:
        """URL of the built package."""
        pass


class BundlePackager(Packager):
    """Packager backed by a ``{name: {'css': [...], 'js': [...]}}`` mapping.

    Source paths are relative to the static folder. Packaged files live under
    ``/<package_path>/`` and are written by the asset build, so their URLs are
    not checked against the mapping.
    """

    def __init__(self, packages: Mapping[str, Mapping[str, Sequence[str]]],
                 package_path: str = 'assets', static_url: Optional[str] = None):
        self.packages: Dict[str, Mapping[str, Sequence[str]]] = dict(packages)
        self.package_path = package_path.strip('/')
        self.static_url = static_url.rstrip('/') if static_url else None

    @classmethod
    def from_config(cls, config) -> 'BundlePackager':
        """Build a packager from a Flask config mapping."""
        return cls(
            config.get('ASSET_PACKAGES', {}),
            package_path=config.get('PACKAGE_PATH', 'assets'),
            static_url=config.get('STATIC_URL'),
        )

    def sources(self, package: str, kind: AssetKind) -> List[str]:
        """Source paths configured for a package."""
        try:
            return list(self.packages[str(package)][kind.extension])
        except KeyError:
            raise PackageNotFound(package, kind.extension) from None

    def individual_urls(self, package: str, kind: AssetKind) -> List[str]:
        return [self.static_path(path) for path in self.sources(package, kind)]

    def packaged_url(self, package: str, kind: AssetKind,
                     variant: VariantKind = VariantKind.PLAIN) -> str:
        return f"/{self.package_path}/{self.filename(package, kind, variant)}"

    @staticmethod
    def filename(package: str, kind: AssetKind, variant: VariantKind = VariantKind.PLAIN) -> str:
        """Name of a built package file, e.g. ``app-datauri.css``."""
        suffix = f"-{variant.suffix}" if variant.suffix else ''
        return f"{package}{suffix}.{kind.extension}"

    def static_path(self, filename: str) -> str:
        """URL of a single static file."""
        if self.static_url:
            return f"{self.static_url}/{filename}"
        try:
            return url_for('static', filename=filename)
        except RuntimeError:
            # Fallback when outside application context
            return f"/static/{filename}"
