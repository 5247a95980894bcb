"""Tests for the blogroll link rendering pipeline (in-memory collaborators)."""

import re

from django.test import SimpleTestCase, tag
from django.test.html import Element, parse_html

from blogroll.apps.core.test_utils import (
    FakeBookmarkStore,
    FakeMediaLibrary,
    InMemorySettingsStore,
)
from blogroll.apps.renderer.ports import BookmarkRecord
from blogroll.apps.renderer.rendering import (
    RenderRequest,
    TrustedImage,
    UntrustedImage,
    blogroll_styles,
    build_query,
    container_class,
    render_blogroll_links,
    resolve_image,
    sanitize_links_html,
)

LOCAL_ICON = "/media/library/icon.png"
EXTERNAL_ICON = "https://icons.example.net/favicon.ico"


def _record(name="Example", **kwargs):
    kwargs.setdefault("url", f"https://{name.lower()}.example/")
    return BookmarkRecord(name=name, **kwargs)


def _element_names(html):
    """Names of every element in an HTML fragment, depth first."""
    names = []
    stack = [parse_html(html)]
    while stack:
        node = stack.pop()
        if isinstance(node, Element):
            if node.name:
                names.append(node.name)
            stack.extend(node.children)
    return names


@tag("unit")
class RenderRequestTests(SimpleTestCase):
    def test_defaults_when_attributes_missing(self):
        request = RenderRequest.from_attributes({})
        self.assertEqual(request, RenderRequest(category="", show_images=True, show_titles=False))

    def test_none_attributes(self):
        self.assertEqual(RenderRequest.from_attributes(None), RenderRequest())

    def test_show_images_zero_disables(self):
        self.assertFalse(RenderRequest.from_attributes({"show_images": "0"}).show_images)

    def test_show_images_junk_is_false(self):
        self.assertFalse(RenderRequest.from_attributes({"show_images": "nah"}).show_images)

    def test_show_titles_truthy_strings(self):
        for value in ("1", "true", "Yes", "ON"):
            with self.subTest(value=value):
                self.assertTrue(RenderRequest.from_attributes({"show_titles": value}).show_titles)

    def test_category_sanitized(self):
        request = RenderRequest.from_attributes({"category": "  <b>News</b>\n "})
        self.assertEqual(request.category, "News")

    def test_unknown_keys_ignored(self):
        request = RenderRequest.from_attributes({"limit": "5", "category": "News"})
        self.assertEqual(request, RenderRequest(category="News"))


@tag("unit")
class BuildQueryTests(SimpleTestCase):
    def test_category_filter_included(self):
        self.assertEqual(
            build_query(RenderRequest(category="News")),
            {"order_by": "name", "order": "ASC", "category_name": "News"},
        )

    def test_no_category_key_without_category(self):
        params = build_query(RenderRequest(category=""))
        self.assertNotIn("category_name", params)
        self.assertEqual(params, {"order_by": "name", "order": "ASC"})


@tag("unit")
class ResolveImageTests(SimpleTestCase):
    def setUp(self):
        self.media = FakeMediaLibrary({LOCAL_ICON: 42})

    def test_no_image_ref(self):
        self.assertIsNone(resolve_image(_record(), self.media))
        self.assertEqual(self.media.lookups, [])

    def test_library_url_is_trusted(self):
        image = resolve_image(_record(name="Alpha", image_ref=LOCAL_ICON), self.media)
        self.assertIsInstance(image, TrustedImage)
        self.assertEqual(
            self.media.rendered,
            [(42, "blogroll-icon", {"class": "blogroll-link-image", "alt": "Alpha"})],
        )

    def test_external_url_is_untrusted(self):
        image = resolve_image(_record(name="Beta", image_ref=EXTERNAL_ICON), self.media)
        self.assertEqual(image, UntrustedImage(src=EXTERNAL_ICON, alt="Beta"))

    def test_non_positive_or_non_int_id_is_external(self):
        for bad_id in (0, -3, "12", True):
            with self.subTest(bad_id=bad_id):
                media = FakeMediaLibrary({LOCAL_ICON: bad_id})
                image = resolve_image(_record(image_ref=LOCAL_ICON), media)
                self.assertIsInstance(image, UntrustedImage)


@tag("unit")
class RenderBlogrollLinksTests(SimpleTestCase):
    def setUp(self):
        self.media = FakeMediaLibrary({LOCAL_ICON: 7})
        self.settings = InMemorySettingsStore()

    def render(self, records, attrs=None):
        self.bookmarks = FakeBookmarkStore(records)
        return render_blogroll_links(
            attrs or {}, bookmarks=self.bookmarks, media=self.media, settings=self.settings
        )

    def test_empty_result_is_single_paragraph(self):
        html = self.render([])
        self.assertEqual(html, "<p>No links found.</p>")
        self.assertNotIn("<div", html)

    def test_block_structure(self):
        html = self.render([_record(name="Alpha", url="https://alpha.example/")])
        self.assertTrue(html.startswith('<div class="blogroll-links">'))
        self.assertInHTML(
            '<div class="blogroll-link"><a href="https://alpha.example/" target="_blank" '
            'rel="noopener noreferrer"><span class="blogroll-link-name">Alpha</span></a></div>',
            html,
        )

    def test_ascending_name_order_regardless_of_storage_order(self):
        html = self.render([_record(name="Beta"), _record(name="Alpha")])
        self.assertLess(html.index("Alpha"), html.index("Beta"))
        self.assertEqual(self.bookmarks.queries, [{"order_by": "name", "order": "ASC"}])

    def test_category_passed_to_store(self):
        self.render([_record(name="Alpha", categories=("News",))], {"category": "News"})
        self.assertEqual(self.bookmarks.queries[0]["category_name"], "News")

    def test_no_category_filter_key_when_empty(self):
        self.render([_record()], {"category": ""})
        self.assertNotIn("category_name", self.bookmarks.queries[0])

    def test_name_escaped_in_span_and_alt(self):
        name = 'Tom & "Jerry" <script>'
        record = _record(name=name, url="https://tom.example/", image_ref=EXTERNAL_ICON)
        html = self.render([record])
        self.assertInHTML(
            '<span class="blogroll-link-name">Tom &amp; &quot;Jerry&quot; &lt;script&gt;</span>',
            html,
        )
        self.assertInHTML(
            f'<img src="{EXTERNAL_ICON}" alt="Tom &amp; &quot;Jerry&quot; &lt;script&gt;" '
            'class="blogroll-link-image" width="16" height="16" loading="lazy" decoding="async">',
            html,
        )
        self.assertNotIn("script", _element_names(html))

    def test_title_only_when_enabled_and_present(self):
        records = [
            _record(name="Alpha", description="First & best"),
            _record(name="Beta", description=""),
        ]
        without = self.render(records)
        self.assertNotIn("title=", without)

        with_titles = self.render(records, {"show_titles": "1"})
        self.assertIn('title="First &amp; best"', with_titles)
        self.assertEqual(with_titles.count("title="), 1)

    def test_managed_image_for_library_url(self):
        html = self.render([_record(name="Alpha", image_ref=LOCAL_ICON)])
        self.assertIn('src="/media/managed-7.png"', html)
        self.assertIn("attachment-blogroll-icon blogroll-link-image", html)
        self.assertNotIn(f'src="{LOCAL_ICON}"', html)
        self.assertNotIn('loading="lazy"', html)

    def test_external_image_rendered_lazily(self):
        html = self.render([_record(name="Beta", image_ref=EXTERNAL_ICON)])
        self.assertInHTML(
            f'<img src="{EXTERNAL_ICON}" alt="Beta" class="blogroll-link-image" '
            'width="16" height="16" loading="lazy" decoding="async">',
            html,
        )

    def test_no_image_when_disabled(self):
        html = self.render([_record(image_ref=EXTERNAL_ICON)], {"show_images": "0"})
        self.assertNotIn("<img", html)
        self.assertEqual(self.media.lookups, [])

    def test_no_image_without_image_ref(self):
        self.assertNotIn("<img", self.render([_record()]))

    def test_javascript_urls_dropped(self):
        html = self.render([_record(url="javascript:alert(1)", image_ref="javascript:alert(2)")])
        self.assertNotIn("javascript:", html)
        self.assertNotIn("href=", html)
        self.assertIn('<span class="blogroll-link-name">Example</span>', html)

    def test_obfuscated_script_urls_dropped(self):
        for url in ("JavaScript:alert(1)", " javascript:alert(1)", "java\nscript:alert(1)"):
            with self.subTest(url=url):
                html = self.render([_record(url=url)])
                self.assertNotIn("script:", html)

    def test_data_urls_dropped(self):
        html = self.render([_record(image_ref="data:text/html;base64,PHNjcmlwdD4=")])
        self.assertNotIn("data:", html)

    def test_custom_class_appended_and_escaped(self):
        self.settings.set("BLOGROLL_CUSTOM_CLASS", ' my-links "x" ')
        html = self.render([_record()])
        self.assertIn('<div class="blogroll-links my-links &quot;x&quot;">', html)

    def test_links_open_in_new_context_with_noopener(self):
        html = self.render([_record(name="A"), _record(name="B")])
        anchors = re.findall(r"<a [^>]*>", html)
        self.assertEqual(len(anchors), 2)
        for anchor in anchors:
            self.assertIn('target="_blank"', anchor)
            self.assertIn('rel="noopener noreferrer"', anchor)


@tag("unit")
class SanitizeLinksHtmlTests(SimpleTestCase):
    def test_relative_urls_kept(self):
        html = sanitize_links_html('<a href="/blog/">Blog</a>')
        self.assertIn('href="/blog/"', html)

    def test_links_get_noopener(self):
        html = sanitize_links_html('<a href="https://example.com/" rel="opener">x</a>')
        self.assertIn('rel="noopener noreferrer"', html)
        self.assertEqual(html.count("rel="), 1)

    def test_foreign_markup_stripped(self):
        html = sanitize_links_html(
            '<div class="blogroll-links"><img src="/i.png" onerror="alert(1)">'
            "<script>alert(2)</script><iframe></iframe></div>"
        )
        self.assertNotIn("onerror", html)
        self.assertNotIn("alert", html)
        self.assertEqual(_element_names(html), ["div", "img"])

    def test_library_markup_is_sanitized_too(self):
        class HostileMediaLibrary(FakeMediaLibrary):
            def render_attachment_image(self, attachment_id, size, attrs):
                return '<img src="/media/x.png" onload="alert(1)" class="attachment">'

        html = render_blogroll_links(
            {},
            bookmarks=FakeBookmarkStore([_record(image_ref=LOCAL_ICON)]),
            media=HostileMediaLibrary({LOCAL_ICON: 3}),
            settings=InMemorySettingsStore(),
        )
        self.assertIn('src="/media/x.png"', html)
        self.assertNotIn("onload", html)


@tag("unit")
class ContainerClassTests(SimpleTestCase):
    def test_empty_custom_class(self):
        self.assertEqual(container_class(""), "blogroll-links")
        self.assertEqual(container_class(None), "blogroll-links")

    def test_custom_class_trimmed(self):
        self.assertEqual(container_class("  wide  "), "blogroll-links wide")


@tag("unit")
class BlogrollStylesTests(SimpleTestCase):
    def test_styles_pin_icon_size(self):
        css = blogroll_styles()
        self.assertIn(".blogroll-link-image", css)
        self.assertIn("width: 16px !important;", css)
