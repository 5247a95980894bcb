"""Links Manager domain models: bookmarks and their categories."""

from __future__ import annotations

from django.db import models
from django.utils.text import slugify

from blogroll.apps.core.models import TimeStampedMixin


class LinkCategory(models.Model):
    """A named group of bookmarks (e.g. "News", "Friends")."""

    name = models.CharField(max_length=200, unique=True)
    slug = models.SlugField(max_length=200, unique=True, blank=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "link categories"

    def __str__(self) -> str:
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)


class BookmarkQuerySet(models.QuerySet):
    """Custom queryset for Bookmark."""

    def visible(self):
        return self.filter(visible=True)

    def in_category(self, category_name: str = ""):
        """Bookmarks in the named category (matched by name or slug).

        Returns all bookmarks if ``category_name`` is empty/whitespace.
        """
        category_name = (category_name or "").strip()
        if not category_name:
            return self
        return self.filter(
            models.Q(categories__name__iexact=category_name)
            | models.Q(categories__slug__iexact=category_name)
        ).distinct()


class Bookmark(TimeStampedMixin):
    """A link shown in the blogroll."""

    class Target(models.TextChoices):
        NONE = "", "None"
        BLANK = "_blank", "New window"
        TOP = "_top", "Top frame"

    url = models.CharField(max_length=500)
    name = models.CharField(max_length=255)
    description = models.CharField(max_length=500, blank=True)
    image = models.CharField(
        max_length=500,
        blank=True,
        help_text="URL of an image or icon; media library URLs are rendered as managed images.",
    )
    target = models.CharField(max_length=25, choices=Target.choices, blank=True)
    rel = models.CharField(max_length=255, blank=True)
    visible = models.BooleanField(default=True)
    notes = models.TextField(blank=True)
    categories = models.ManyToManyField(LinkCategory, related_name="bookmarks", blank=True)

    objects = BookmarkQuerySet.as_manager()

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["name"], name="links_bookmark_name_idx"),
        ]

    def __str__(self) -> str:
        return self.name
