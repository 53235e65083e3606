# src/ui/theme.py
"""
CloudLock Theme
---------------
- (light, dark) colour pairs so customtkinter follows the appearance mode
- Indigo accent, red/amber/green for strength and connectivity states
- Appearance mode follows the saved preference: light, dark or system
"""

import customtkinter as ctk

# === Core Surfaces ===
BG         = ("#F3F4F6", "#0D1117")   # Main window background
CARD_BG    = ("#FFFFFF", "#1E2631")   # Cards and dialogs
BORDER     = ("#D1D5DB", "#2C3540")

# === Typography Colors ===
TEXT       = ("#111827", "#DDE2E8")
MUTED      = ("#4B5563", "#A2A9B3")

# === Accent ===
PRIMARY    = ("#4F46E5", "#6366F1")   # Primary action color
PRIMARY_H  = ("#4338CA", "#4F46E5")
ON_PRIMARY = "#FFFFFF"

DANGER     = "#DC2626"
DANGER_H   = "#B91C1C"

# === Outlines / Neutral Buttons ===
OUTLINE_BR = ("#D1D5DB", "#30363D")
OUTLINE_H  = ("#E5E7EB", "#2D333B")

# === Status ===
OFFLINE_BG = ("#FEF3C7", "#422006")
OFFLINE_FG = ("#92400E", "#FCD34D")

# === Fonts ===
TITLE_FONT   = ("Segoe UI", 28, "bold")
SUB_FONT     = ("Segoe UI", 13)
HEADING_FONT = ("Segoe UI", 18, "bold")
BODY_FONT    = ("Segoe UI", 13)

# Strength category -> (bar/label colour, icon glyph). Kept out of
# core.strength so the analyzer stays presentation-free.
_STRENGTH_STYLES = {
    "weak": ("#DC2626", "✖"),       # heavy x
    "moderate": ("#CA8A04", "⚠"),   # warning sign
    "strong": ("#16A34A", "✔"),     # heavy check
}

_APPEARANCE = {"light": "Light", "dark": "Dark", "system": "System"}


def strength_style(category: str):
    return _STRENGTH_STYLES.get(category, _STRENGTH_STYLES["weak"])


def apply_theme(theme: str):
    """Switch customtkinter's appearance mode for a saved theme name."""
    ctk.set_appearance_mode(_APPEARANCE.get(theme, "System"))
