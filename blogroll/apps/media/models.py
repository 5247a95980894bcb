"""Media library models."""

from __future__ import annotations

from django.db import models

from blogroll.apps.core.models import TimeStampedMixin


class MediaAsset(TimeStampedMixin):
    """An uploaded image in the media library."""

    file = models.ImageField(upload_to="library/%Y/%m/")
    title = models.CharField(max_length=255, blank=True)
    alt_text = models.CharField(max_length=255, blank=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.title or self.file.name
