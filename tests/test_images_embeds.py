"""Tests helpers — résolution d'URL d'image et d'embed."""
import pytest
from pydantic import ValidationError

from blog_renderer.core.embeds import resolve_embed_url
from blog_renderer.core.errors import InvalidEnumValue, MalformedAsset
from blog_renderer.core.images import ImageReference, resolve_image_url


# ── resolve_image_url ───────────────────────────────────────────────────────

def test_large_missing_falls_back_to_canonical(image_v4):
    image = ImageReference.model_validate(image_v4)
    assert resolve_image_url(image, "large") == "http://cms.test/uploads/photo.jpg"


def test_large_present_is_used():
    image = ImageReference(name="a.jpg", url="/uploads/a.jpg",
                           formats={"large": {"url": "/uploads/large_a.jpg", "width": 1000, "height": 500}})
    assert resolve_image_url(image, "large", base_url="https://cms.example") == "https://cms.example/uploads/large_a.jpg"


def test_default_format_is_medium(image_v4):
    image = ImageReference.model_validate(image_v4)
    assert resolve_image_url(image).endswith("/uploads/medium_photo.jpg")


def test_absolute_urls_untouched():
    image = ImageReference(name="a.jpg", url="https://res.cloudinary.test/a.jpg")
    assert resolve_image_url(image, "small", base_url="https://ignored") == "https://res.cloudinary.test/a.jpg"


def test_unknown_format_rejected():
    image = ImageReference(name="a.jpg", url="/a.jpg")
    with pytest.raises(InvalidEnumValue) as exc:
        resolve_image_url(image, "xlarge")
    assert exc.value.field == "format"


def test_no_canonical_url_and_format_miss():
    image = ImageReference(name="t.jpg", formats={"thumbnail": {"url": "/t.jpg"}})
    assert resolve_image_url(image, "thumbnail", base_url="") == "/t.jpg"
    with pytest.raises(MalformedAsset):
        resolve_image_url(image, "medium")


def test_image_needs_a_source():
    with pytest.raises(ValidationError):
        ImageReference(name="nothing.jpg")


def test_flat_v5_image():
    image = ImageReference.model_validate({
        "id": 7, "documentId": "abc", "name": "b.png", "url": "/uploads/b.png", "formats": None,
    })
    assert image.formats == {}
    assert image.alt == "b.png"


# ── resolve_embed_url ───────────────────────────────────────────────────────

@pytest.mark.parametrize("url,autoplay,expected", [
    ("https://www.youtube.com/watch?v=abc123", True, "https://www.youtube.com/embed/abc123?autoplay=1"),
    ("https://www.youtube.com/watch?v=abc123", False, "https://www.youtube.com/embed/abc123?autoplay=0"),
    ("https://youtube.com/watch?feature=share&v=xyz", False, "https://www.youtube.com/embed/xyz?autoplay=0"),
    ("https://vimeo.com/76979871", True, "https://player.vimeo.com/video/76979871?autoplay=1"),
    ("https://maps.example.com/embed?x=1", True, "https://maps.example.com/embed?x=1"),
])
def test_resolve_embed_url(url, autoplay, expected):
    assert resolve_embed_url(url, autoplay) == expected


def test_youtube_watch_without_video_id_unchanged():
    assert resolve_embed_url("https://www.youtube.com/watch") == "https://www.youtube.com/watch"


def test_already_embeddable_vimeo_unchanged():
    url = "https://player.vimeo.com/video/1?autoplay=0"
    assert resolve_embed_url(url, True) == url
