"""Blogroll template tags: blogroll_links, blogroll_styles."""

from django import template

register = template.Library()


@register.simple_tag
def blogroll_links(**attrs):
    """Render the blogroll, same as the ``[blogroll-links]`` marker.

    Usage in templates::

        {% load blogroll_tags %}
        {% blogroll_links category="News" show_titles="1" %}
    """
    from blogroll.apps.renderer.services import render_blogroll_marker

    return render_blogroll_marker({key: str(value) for key, value in attrs.items()})


@register.simple_tag
def blogroll_styles():
    """Inline CSS for blogroll icons; place in the page ``<head>``."""
    from blogroll.apps.renderer.rendering import blogroll_styles as _styles

    return _styles()
