"""Tests SEO — ordre de repli, balises, mots-clés, validation."""
from blog_renderer.cms.models import Seo
from blog_renderer.renderer.seo import (
    extract_keywords,
    first_present,
    render_seo_head,
    resolve_seo_fields,
    validate_seo,
)


def test_first_present_skips_empty():
    assert first_present(None, "", "b", "c") == "b"
    assert first_present(None, "", default="d") == "d"


# ── Ordre de repli ──────────────────────────────────────────────────────────

def test_title_fallback_order():
    assert resolve_seo_fields(Seo(meta_title="Meta"), "Article").title == "Meta"
    assert resolve_seo_fields(Seo(meta_title=""), "Article").title == "Article"
    assert resolve_seo_fields(None).title == "Blog Post"


def test_description_fallback_order():
    assert resolve_seo_fields(Seo(), fallback_description="From article").description == "From article"
    assert resolve_seo_fields(None).description == ""


def test_open_graph_falls_back_to_resolved_values():
    f = resolve_seo_fields(Seo(meta_title="T", meta_description="D"))
    assert (f.og_title, f.og_description) == ("T", "D")
    f = resolve_seo_fields(Seo(meta_title="T", open_graph_title="OG T", open_graph_description="OG D"))
    assert f.title == "T"
    assert (f.og_title, f.og_description) == ("OG T", "OG D")


def test_canonical_url_casing_alias():
    assert Seo.model_validate({"canonicalURL": "https://blog.test/a"}).canonical_url == "https://blog.test/a"
    assert Seo.model_validate({"canonicalUrl": "https://blog.test/b"}).canonical_url == "https://blog.test/b"


# ── Balises ─────────────────────────────────────────────────────────────────

def test_render_head_basic_tags():
    seo = Seo.model_validate({
        "metaTitle": "Hello & welcome",
        "metaDescription": "Desc",
        "primaryKeywords": "python, strapi",
        "canonicalUrl": "https://blog.test/hello",
    })
    head = render_seo_head(seo)
    assert "<title>Hello &amp; welcome</title>" in head
    assert '<meta name="keywords" content="python, strapi">' in head
    assert '<link rel="canonical" href="https://blog.test/hello">' in head
    assert '<meta property="og:url" content="https://blog.test/hello">' in head
    assert '<meta name="twitter:card" content="summary_large_image">' in head
    assert '<meta name="robots" content="index, follow">' in head


def test_render_head_without_optional_tags():
    head = render_seo_head(None, fallback_title="Post")
    assert "<title>Post</title>" in head
    assert "canonical" not in head
    assert "og:image" not in head
    assert "keywords" not in head


def test_render_head_share_image():
    seo = Seo.model_validate({
        "metaTitle": "T",
        "shareImage": {"data": {"id": 1, "attributes": {
            "name": "share.png", "url": "/uploads/share.png", "width": 1200, "height": 630,
        }}},
    })
    head = render_seo_head(seo)
    assert '<meta property="og:image" content="http://cms.test/uploads/share.png">' in head
    assert '<meta property="og:image:width" content="1200">' in head
    assert '<meta property="og:image:alt" content="T">' in head
    assert '<meta name="twitter:image" content="http://cms.test/uploads/share.png">' in head


def test_render_head_structured_data_and_overrides():
    seo = Seo(
        meta_title="T",
        meta_robots="noindex",
        structured_data={"@type": "Article", "headline": "</script>"},
    )
    head = render_seo_head(seo)
    assert '<meta name="robots" content="noindex">' in head
    assert '<script type="application/ld+json">' in head
    assert "</script>\"" not in head
    assert head.count("</script>") == 1


# ── Mots-clés / validation ──────────────────────────────────────────────────

def test_extract_keywords():
    kw = extract_keywords(Seo(primary_keywords="a, b ,", secondary_keywords=" c"))
    assert kw == {"primary": ["a", "b"], "secondary": ["c"], "all": ["a", "b", "c"]}
    assert extract_keywords(Seo())["all"] == []


def test_validate_seo_limits():
    assert validate_seo(Seo(meta_title="x" * 60, meta_description="y" * 155)).is_valid
    result = validate_seo(Seo(meta_title="x" * 61, meta_description="y" * 156, canonical_url="not a url"))
    assert not result.is_valid
    assert len(result.errors) == 3


def test_share_image_without_large_or_url_is_omitted():
    seo = Seo.model_validate({"shareImage": {"name": "s.jpg", "formats": {"small": {"url": "/s.jpg"}}}})
    f = resolve_seo_fields(seo, "T")
    assert f.image_url is None
    assert f.image_alt is None
