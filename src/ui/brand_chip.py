# src/ui/brand_chip.py
"""Brand chip images for entry cards (Pillow only, no Tk needed)."""

from PIL import Image, ImageDraw, ImageFont

from core.brand import brand_gradient, brand_text_color


def hex_to_rgb(value: str):
    value = value.lstrip("#")
    return tuple(int(value[i : i + 2], 16) for i in (0, 2, 4))


def render_brand_chip(url, title: str, size=(44, 44)) -> Image.Image:
    """Rounded square with the brand gradient and the title's initial.

    Stands in for a site favicon; works offline.
    """
    W, H = size
    start, end = (hex_to_rgb(c) for c in brand_gradient(url))

    grad = Image.new("RGBA", (W, H))
    px = grad.load()
    span = max(1, W + H - 2)
    for y in range(H):
        for x in range(W):
            t = (x + y) / span   # diagonal, top-left -> bottom-right
            px[x, y] = tuple(int(a + (b - a) * t) for a, b in zip(start, end)) + (255,)

    mask = Image.new("L", (W, H), 0)
    ImageDraw.Draw(mask).rounded_rectangle([(0, 0), (W - 1, H - 1)], radius=W // 4, fill=255)
    chip = Image.new("RGBA", (W, H), (0, 0, 0, 0))
    chip.paste(grad, (0, 0), mask)

    initial = ((title or "").strip()[:1] or "?").upper()
    draw = ImageDraw.Draw(chip)
    font = ImageFont.load_default()
    left, top, right, bottom = draw.textbbox((0, 0), initial, font=font)
    draw.text(
        ((W - (right - left)) / 2 - left, (H - (bottom - top)) / 2 - top),
        initial,
        fill=hex_to_rgb(brand_text_color(url)),
        font=font,
    )
    return chip
