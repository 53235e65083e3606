import pytest

from core.brand import (
    DEFAULT_GRADIENT,
    NO_URL_GRADIENT,
    brand_gradient,
    brand_hover_color,
    brand_text_color,
)


@pytest.mark.parametrize("url", [None, ""])
def test_missing_url_gets_neutral_colours(url):
    assert brand_gradient(url) == NO_URL_GRADIENT
    assert brand_text_color(url) == "#F3F4F6"
    assert brand_hover_color(url) == "#E5E7EB"


def test_known_brand_is_case_insensitive():
    assert brand_gradient("https://WWW.Amazon.COM/ap/signin") == ("#F97316", "#EAB308")
    assert brand_hover_color("https://www.AMAZON.com") == "#FED7AA"


def test_unknown_domain_gets_default_gradient():
    assert brand_gradient("https://example.org") == DEFAULT_GRADIENT
    assert brand_text_color("https://example.org") == "#FFFFFF"
    assert brand_hover_color("https://example.org") == "#BFDBFE"


def test_apple_uses_grey_text():
    assert brand_text_color("https://appleid.apple.com") == "#F3F4F6"
    assert brand_hover_color("https://appleid.apple.com") == "#D1D5DB"


def test_first_match_wins():
    # a URL mentioning two brands resolves to the earlier table entry
    assert brand_gradient("https://github.com/?ref=google.com") == brand_gradient(
        "https://google.com"
    )
