"""Links selectors: read-only bookmark queries."""

from __future__ import annotations

from django.db.models import F
from django.db.models.functions import Lower

from .models import Bookmark

# Sortable columns accepted by get_bookmarks(); anything else sorts by name
ORDERABLE_FIELDS = {
    "name": Lower("name"),
    "url": F("url"),
    "id": F("id"),
    "description": Lower("description"),
    "updated": F("updated_at"),
}


def get_bookmarks(
    order_by: str = "name",
    order: str = "ASC",
    category_name: str | None = None,
    hide_invisible: bool = True,
) -> list[Bookmark]:
    """Fetch bookmarks, optionally limited to one category.

    Args:
        order_by: One of :data:`ORDERABLE_FIELDS`; unknown values sort by name.
        order: ``"ASC"`` or ``"DESC"`` (case-insensitive); anything else is ASC.
        category_name: Category name or slug; ``None``/empty means all.
        hide_invisible: Exclude bookmarks marked not visible.

    Returns:
        Bookmarks with their categories prefetched.
    """
    qs = Bookmark.objects.all()
    if hide_invisible:
        qs = qs.visible()
    if category_name:
        qs = qs.in_category(category_name)

    expression = ORDERABLE_FIELDS.get((order_by or "").lower(), ORDERABLE_FIELDS["name"])
    if (order or "").upper() == "DESC":
        qs = qs.order_by(expression.desc(), "-pk")
    else:
        qs = qs.order_by(expression.asc(), "pk")

    return list(qs.prefetch_related("categories"))
