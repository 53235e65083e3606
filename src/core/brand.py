# core/brand.py
"""Brand colours for vault entries, keyed off the entry URL."""

from typing import Optional, Tuple

Gradient = Tuple[str, str]

NO_URL_GRADIENT: Gradient = ("#4B5563", "#374151")     # gray-600 -> gray-700
DEFAULT_GRADIENT: Gradient = ("#6366F1", "#A855F7")    # indigo-500 -> purple-500

# First match wins, so order matters.
_GRADIENTS = [
    ("amazon.com", ("#F97316", "#EAB308")),
    ("google.com", ("#3B82F6", "#22C55E")),
    ("microsoft.com", ("#2563EB", "#06B6D4")),
    ("apple.com", ("#1F2937", "#111827")),
    ("facebook.com", ("#2563EB", "#1D4ED8")),
    ("twitter.com", ("#60A5FA", "#3B82F6")),
    ("instagram.com", ("#A855F7", "#F97316")),
    ("netflix.com", ("#DC2626", "#B91C1C")),
    ("spotify.com", ("#16A34A", "#15803D")),
    ("github.com", ("#374151", "#1F2937")),
]

_GRAY_100 = "#F3F4F6"
_WHITE = "#FFFFFF"


def brand_gradient(url: Optional[str]) -> Gradient:
    if not url:
        return NO_URL_GRADIENT
    domain = url.lower()
    for needle, gradient in _GRADIENTS:
        if needle in domain:
            return gradient
    return DEFAULT_GRADIENT


def brand_text_color(url: Optional[str]) -> str:
    if not url:
        return _GRAY_100
    if "apple.com" in url.lower():
        return _GRAY_100
    return _WHITE


def brand_hover_color(url: Optional[str]) -> str:
    if not url:
        return "#E5E7EB"    # gray-200
    domain = url.lower()
    if "amazon.com" in domain:
        return "#FED7AA"    # orange-200
    if "apple.com" in domain:
        return "#D1D5DB"    # gray-300
    return "#BFDBFE"        # blue-200
