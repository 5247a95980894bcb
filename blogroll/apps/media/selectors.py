"""Media selectors: reverse lookup from public URL to library asset."""

from __future__ import annotations

from urllib.parse import unquote, urlsplit

from django.conf import settings

from .models import MediaAsset


def _local_hostnames() -> set[str]:
    """Hostnames whose URLs may point into the media library."""
    hosts = {urlsplit(settings.SITE_URL).hostname, urlsplit(settings.MEDIA_URL).hostname}
    hosts.update(h.lstrip(".") for h in settings.ALLOWED_HOSTS if h != "*")
    return {h.lower() for h in hosts if h}


def attachment_url_to_id(url: str) -> int | None:
    """Return the pk of the MediaAsset served at ``url``, or None.

    Relative URLs and absolute URLs on a local host are matched by the file
    path below ``MEDIA_URL``. URLs on other hosts never match.
    """
    if not url:
        return None
    try:
        parts = urlsplit(url.strip())
    except ValueError:
        return None

    if parts.netloc and (parts.hostname or "").lower() not in _local_hostnames():
        return None

    media_prefix = urlsplit(settings.MEDIA_URL).path or "/"
    path = unquote(parts.path)
    if not path.startswith(media_prefix):
        return None
    name = path[len(media_prefix) :]
    if not name:
        return None

    return MediaAsset.objects.filter(file=name).values_list("pk", flat=True).first()
