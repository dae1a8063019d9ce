"""Tests tags — badges, liste, filtre, bascule."""
from blog_renderer.cms.models import Tag
from blog_renderer.renderer.tags import render_tag_badges, render_tag_filter, render_tag_list, toggle_tag

TAGS = [
    Tag(id=1, name="Python", slug="python"),
    Tag.model_validate({"id": 2, "attributes": {"name": "Strapi & CMS", "slug": "strapi"}}),
]


def test_badges_prefixed_with_hash():
    html = render_tag_badges(TAGS)
    assert "#Python" in html
    assert "#Strapi &amp; CMS" in html
    assert 'data-tag-slug="strapi"' in html


def test_empty_tags_render_nothing():
    assert render_tag_badges([]) == ""
    assert render_tag_badges(None) == ""
    assert render_tag_list([]) == ""


def test_tag_list_extra_class():
    html = render_tag_list(TAGS, css_class="mt-4")
    assert 'class="tag-list flex flex-wrap gap-2 mt-4"' in html
    assert "#Python" not in html
    assert ">Python</button>" in html


def test_tag_filter_highlights_selection():
    html = render_tag_filter(TAGS, ["strapi"])
    assert "Filter by Tags" in html
    assert html.count('aria-pressed="true"') == 1
    assert html.count('aria-pressed="false"') == 1
    assert "bg-blue-500 text-white" in html


def test_toggle_tag():
    assert toggle_tag([], "python") == ["python"]
    assert toggle_tag(["python", "strapi"], "python") == ["strapi"]
    selected = ["a"]
    toggle_tag(selected, "b")
    assert selected == ["a"]
