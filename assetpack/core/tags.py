"""HTML tag rendering for asset URLs."""
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Mapping, Optional

from markupsafe import Markup, escape

STYLESHEET_DEFAULTS = {
    'media': 'screen',
    'rel': 'stylesheet',
    'type': 'text/css',
}

SCRIPT_DEFAULTS = {
    'type': 'text/javascript',
}


def attribute_name(key: str) -> str:
    """``class_`` -> ``class``, so Python keywords can be passed as kwargs."""
    return key[:-1] if key.endswith('_') else key


def format_attributes(attributes: Mapping[str, Any]) -> Markup:
    """Render attributes in sorted order, skipping ``None``/``False`` values."""
    parts = []
    for key in sorted(attributes):
        value = attributes[key]
        if value is None or value is False:
            continue
        if value is True:
            parts.append(escape(key))
        else:
            parts.append(Markup('%s="%s"') % (key, value))
    return Markup(' ').join(parts)


class TagRenderer(ABC):
    """Turns asset URLs into markup."""

    @abstractmethod
    def render_stylesheet_links(self, urls: Iterable[str],
                                attributes: Optional[Mapping[str, Any]] = None) -> Markup:
        pass

    @abstractmethod
    def render_script_links(self, urls: Iterable[str]) -> Markup:
        pass


class HtmlTagRenderer(TagRenderer):
    """Plain HTML ``<link>`` and ``<script>`` tags, one per line."""

    def render_stylesheet_links(self, urls, attributes=None):
        extra: Dict[str, Any] = {attribute_name(k): v for k, v in (attributes or {}).items()}
        tags = []
        for url in urls:
            attrs = {**STYLESHEET_DEFAULTS, **extra, 'href': url}
            tags.append(Markup('<link %s />') % format_attributes(attrs))
        return Markup('\n').join(tags)

    def render_script_links(self, urls):
        tags = []
        for url in urls:
            attrs = {**SCRIPT_DEFAULTS, 'src': url}
            tags.append(Markup('<script %s></script>') % format_attributes(attrs))
        return Markup('\n').join(tags)
