"""Resolution mode: which kind of asset URLs the helpers emit."""
from dataclasses import dataclass
from typing import Any, Mapping

from flask import current_app, has_request_context, request

_ON = {'on', 'true', 'yes', '1'}
_OFF = {'off', 'false', 'no', '0', ''}


def _normalize(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


def packaging_enabled(setting: Any, debug: bool = False) -> bool:
    """Interpret PACKAGE_ASSETS.

    ``"always"`` packages regardless of debug mode, ``"on"`` (or ``True``/unset)
    packages everywhere except debug mode, anything off-like disables it.
    """
    setting = _normalize(setting)
    if setting == 'always':
        return True
    if setting is None or setting is True or setting in _ON:
        return not debug
    return False


def embedding_enabled(setting: Any) -> bool:
    """Interpret EMBED_ASSETS; ``"datauri"`` counts as enabled."""
    setting = _normalize(setting)
    if isinstance(setting, str):
        return setting not in _OFF
    return bool(setting)


def mhtml_allowed(setting: Any) -> bool:
    """MHTML is on whenever embedding is, unless limited to ``"datauri"``."""
    return embedding_enabled(setting) and _normalize(setting) != 'datauri'


@dataclass(frozen=True)
class ResolutionMode:
    """Read-only switches the resolver branches on."""

    package_assets: bool = True
    embed_assets: bool = False
    mhtml_enabled: bool = False

    @classmethod
    def from_config(cls, config: Mapping[str, Any], debug_request: bool = False) -> 'ResolutionMode':
        """Build a mode from a Flask-style config mapping."""
        embed = config.get('EMBED_ASSETS')
        if embed is None:
            embed = config.get('EMBED_IMAGES')
        package_assets = packaging_enabled(config.get('PACKAGE_ASSETS'), bool(config.get('DEBUG')))
        if debug_request and config.get('ALLOW_DEBUGGING', True):
            package_assets = False
        return cls(
            package_assets=package_assets,
            embed_assets=embedding_enabled(embed),
            mhtml_enabled=mhtml_allowed(embed),
        )


def is_debug_request() -> bool:
    """Check whether the current request asked for unpackaged assets."""
    if not has_request_context():
        return False
    return request.args.get('debug_assets', '').lower() in _ON


def current_mode() -> ResolutionMode:
    """Mode for the current app and request, read fresh on every call."""
    return ResolutionMode.from_config(current_app.config, debug_request=is_debug_request())
