"""Managed image rendering for media library assets."""

from __future__ import annotations

from collections.abc import Mapping

from django.forms.utils import flatatt
from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from .models import MediaAsset

# Named size presets: (width, height) in CSS pixels
IMAGE_SIZES: dict[str, tuple[int, int]] = {
    "thumbnail": (150, 150),
    "medium": (300, 300),
    "blogroll-icon": (16, 16),
}
DEFAULT_IMAGE_SIZE = "thumbnail"


def render_attachment_image(
    attachment_id: int,
    size: str = DEFAULT_IMAGE_SIZE,
    attrs: Mapping[str, str] | None = None,
) -> SafeString:
    """Render an ``<img>`` element for a library asset.

    The element always carries ``attachment-<size> size-<size>`` classes; a
    ``class`` in ``attrs`` is appended to them. Other ``attrs`` override the
    defaults (``alt`` falls back to the asset's alt text). Every value is
    escaped, so the result is safe to insert without further processing.

    Returns an empty string when the asset does not exist or has no file.
    """
    asset = MediaAsset.objects.filter(pk=attachment_id).first()
    if asset is None or not asset.file:
        return mark_safe("")

    if size not in IMAGE_SIZES:
        size = DEFAULT_IMAGE_SIZE
    width, height = IMAGE_SIZES[size]

    extra = dict(attrs or {})
    classes = [f"attachment-{size}", f"size-{size}"]
    classes.extend(c for c in str(extra.pop("class", "")).split() if c not in classes)

    attributes = {
        "src": asset.file.url,
        "width": width,
        "height": height,
        "class": " ".join(classes),
        "alt": asset.alt_text,
        "loading": "lazy",
        "decoding": "async",
    }
    attributes.update(extra)
    return format_html("<img{}>", flatatt(attributes))
