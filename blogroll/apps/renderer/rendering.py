"""Blogroll link rendering pipeline.

Marker attributes -> RenderRequest -> bookmark query -> per-record image
resolution -> HTML assembly. Rendering never raises for attribute input:
bad values fall back to defaults and an empty result renders a short
"No links found." paragraph.

Image markup comes in two flavours. ``TrustedImage`` holds HTML produced by
the media library's own renderer and is inserted verbatim.
``UntrustedImage`` holds raw ``src``/``alt`` values from the bookmark and is
escaped when the ``<img>`` element is built in :func:`image_html`. The
assembled list then goes through nh3, which drops unsafe URL schemes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union

import nh3
from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString, mark_safe
from django.utils.translation import gettext as _

from blogroll.apps.core.booleans import parse_loose_boolean
from blogroll.apps.core.text import sanitize_text_field

from . import conf
from .ports import BookmarkRecord, BookmarkStore, MediaLibrary, SettingsStore

logger = logging.getLogger(__name__)

CONTAINER_CLASS = "blogroll-links"
IMAGE_CLASS = "blogroll-link-image"
ICON_SIZE = "blogroll-icon"
ICON_PIXELS = 16

# Everything render_links emits; nh3 drops any other tag, attribute or URL scheme
ALLOWED_TAGS = {"div", "a", "img", "span"}
ALLOWED_ATTRIBUTES = {
    "div": {"class"},
    "span": {"class"},
    "a": {"href", "target", "title"},
    "img": {"src", "alt", "class", "width", "height", "loading", "decoding"},
}
ALLOWED_URL_SCHEMES = {"http", "https", "ftp", "ftps", "mailto", "news", "irc", "feed", "tel"}
LINK_REL = "noopener noreferrer"


@dataclass(frozen=True)
class RenderRequest:
    """Display options for one marker."""

    category: str = ""
    show_images: bool = True
    show_titles: bool = False

    @classmethod
    def from_attributes(cls, attrs: Mapping[str, str] | None) -> RenderRequest:
        """Build a request from marker attributes; unknown keys are ignored."""
        attrs = attrs or {}
        return cls(
            category=sanitize_text_field(attrs.get("category", "")),
            show_images=parse_loose_boolean(attrs.get("show_images"), cls.show_images),
            show_titles=parse_loose_boolean(attrs.get("show_titles"), cls.show_titles),
        )


@dataclass(frozen=True)
class TrustedImage:
    html: str


@dataclass(frozen=True)
class UntrustedImage:
    src: str
    alt: str


ImageMarkup = Union[TrustedImage, UntrustedImage]


def build_query(request: RenderRequest) -> dict[str, str]:
    """Query parameters for the bookmark store."""
    params = {"order_by": "name", "order": "ASC"}
    if request.category:
        params["category_name"] = request.category
    return params


def resolve_image(record: BookmarkRecord, media: MediaLibrary) -> ImageMarkup | None:
    """Pick the managed or external rendering path for a bookmark's image.

    Returns None when the bookmark has no image. A URL that maps to a
    library item renders through the library at icon size; anything else is
    treated as an external image.
    """
    if not record.image_ref:
        return None

    attachment_id = media.resolve_attachment_id(record.image_ref)
    if isinstance(attachment_id, int) and not isinstance(attachment_id, bool) and attachment_id > 0:
        html = media.render_attachment_image(
            attachment_id,
            ICON_SIZE,
            {"class": IMAGE_CLASS, "alt": record.name},
        )
        return TrustedImage(html=html)

    return UntrustedImage(src=record.image_ref, alt=record.name)


def image_html(image: ImageMarkup | None) -> SafeString:
    """Turn resolved image markup into an HTML fragment."""
    if image is None:
        return mark_safe("")
    if isinstance(image, TrustedImage):
        return mark_safe(image.html)  # noqa: S308 - produced by the media library renderer
    return format_html(
        '<img src="{}" alt="{}" class="{}" width="{}" height="{}" loading="lazy" decoding="async">',
        image.src,
        image.alt,
        IMAGE_CLASS,
        ICON_PIXELS,
        ICON_PIXELS,
    )


def container_class(custom_class: object) -> str:
    """``blogroll-links`` plus the configured custom class, trimmed."""
    custom = sanitize_text_field(custom_class) if custom_class else ""
    return f"{CONTAINER_CLASS} {custom}".strip()


def sanitize_links_html(html: str) -> str:
    """Strip anything outside the blogroll markup from ``html``.

    Hrefs and srcs with a scheme outside :data:`ALLOWED_URL_SCHEMES` (e.g.
    ``javascript:``) are removed; relative URLs are kept. Every link gets
    ``rel="noopener noreferrer"``.
    """
    return nh3.clean(
        html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        url_schemes=ALLOWED_URL_SCHEMES,
        link_rel=LINK_REL,
    )


def render_link(record: BookmarkRecord, request: RenderRequest, media: MediaLibrary) -> SafeString:
    """Render one bookmark block."""
    image = resolve_image(record, media) if request.show_images else None
    title = (
        format_html(' title="{}"', record.description)
        if request.show_titles and record.description
        else ""
    )
    image_fragment = image_html(image)
    return format_html(
        '<div class="blogroll-link">'
        '<a href="{}" target="_blank" rel="{}"{}>'
        '{}<span class="blogroll-link-name">{}</span>'
        "</a></div>",
        record.url,
        LINK_REL,
        title,
        format_html("{} ", image_fragment) if image_fragment else "",
        record.name,
    )


def render_links(
    request: RenderRequest,
    *,
    bookmarks: BookmarkStore,
    media: MediaLibrary,
    settings: SettingsStore,
) -> SafeString:
    """Render the blogroll for an already-parsed request."""
    records = list(bookmarks.query(**build_query(request)))

    if not records:
        logger.debug("blogroll_links_empty", extra={"category": request.category})
        return format_html("<p>{}</p>", _("No links found."))

    blocks = format_html_join(
        "\n", "{}", ((render_link(record, request, media),) for record in records)
    )
    logger.debug(
        "blogroll_links_rendered",
        extra={
            "category": request.category,
            "link_count": len(records),
            "show_images": request.show_images,
            "show_titles": request.show_titles,
        },
    )
    html = format_html(
        '<div class="{}">\n{}\n</div>',
        container_class(settings.get(conf.CUSTOM_CLASS, "")),
        blocks,
    )
    return mark_safe(sanitize_links_html(html))  # noqa: S308 - sanitized by nh3


def render_blogroll_links(
    attrs: Mapping[str, str] | None,
    *,
    bookmarks: BookmarkStore,
    media: MediaLibrary,
    settings: SettingsStore,
) -> SafeString:
    """Render the ``[blogroll-links]`` marker from its raw attributes."""
    return render_links(
        RenderRequest.from_attributes(attrs),
        bookmarks=bookmarks,
        media=media,
        settings=settings,
    )


BLOGROLL_STYLES = (
    "<style>\n"
    f".{IMAGE_CLASS} {{\n"
    f"    width: {ICON_PIXELS}px !important;\n"
    f"    height: {ICON_PIXELS}px !important;\n"
    "}\n"
    "</style>"
)


def blogroll_styles() -> SafeString:
    """Inline CSS pinning blogroll icons to a consistent size."""
    return mark_safe(BLOGROLL_STYLES)  # noqa: S308 - static markup
