import pytest

from ui.theme import strength_style


@pytest.mark.parametrize(
    "category,color,glyph",
    [
        ("weak", "#DC2626", "✖"),
        ("moderate", "#CA8A04", "⚠"),
        ("strong", "#16A34A", "✔"),
    ],
)
def test_strength_style_per_category(category, color, glyph):
    assert strength_style(category) == (color, glyph)


def test_unknown_category_falls_back_to_weak():
    assert strength_style("excellent") == strength_style("weak")
    assert strength_style("") == ("#DC2626", "✖")
