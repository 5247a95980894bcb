"""Page content filters: render_shortcodes."""

from django import template

register = template.Library()


@register.filter
def render_shortcodes(text):
    """Expand registered placeholder markers in page content.

    Usage in templates::

        {{ page.content|render_shortcodes }}
    """
    from blogroll.apps.core.shortcodes import render_shortcodes as _render

    return _render(text)
