"""Per-call options for the stylesheet helpers."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

EMBED_KEYS = ('embed_assets', 'embed_images')


@dataclass(frozen=True)
class CallOptions:
    """Options for a single helper call.

    ``embed_assets`` and ``embed_images`` (an alias) can only switch embedding
    off for the call; everything else is passed to the tag renderer as HTML
    attributes.
    """

    embed_assets: Optional[bool] = None
    embed_images: Optional[bool] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_kwargs(cls, **kwargs) -> 'CallOptions':
        """Split keyword arguments into embed switches and attributes."""
        attributes = dict(kwargs)
        embed_assets = attributes.pop('embed_assets', None)
        embed_images = attributes.pop('embed_images', None)
        return cls(embed_assets=embed_assets, embed_images=embed_images, attributes=attributes)

    @property
    def embedding_disabled(self) -> bool:
        """True only for an explicit ``False``; other values never disable."""
        return self.embed_assets is False or self.embed_images is False
