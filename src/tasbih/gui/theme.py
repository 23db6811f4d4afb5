# -*- coding: utf-8 -*-
"""Light and dark stylesheets."""

from __future__ import annotations

LIGHT_PALETTE = {
    "background": "#f7f5f0",
    "surface": "#ffffff",
    "text": "#1f2937",
    "muted": "#9ca3af",
    "accent": "#0f766e",
    "border": "#e5e7eb",
    "pressed": "#e6f4f1",
}

DARK_PALETTE = {
    "background": "#111315",
    "surface": "#1b1e22",
    "text": "#e5e7eb",
    "muted": "#6b7280",
    "accent": "#5eead4",
    "border": "#2a2f36",
    "pressed": "#16302c",
}

_TEMPLATE = """
QMainWindow, QWidget {{
    background: {background};
    color: {text};
    font-family: "Segoe UI", "Noto Sans", sans-serif;
    font-size: 13px;
}}
QFrame#counterSurface {{
    background: {background};
    border: none;
}}
QLabel#counterText {{
    font-size: 96px;
    font-weight: 300;
    color: {text};
}}
QLabel#subtleLabel {{
    color: {muted};
    font-size: 12px;
    letter-spacing: 1px;
}}
QPushButton#iconButton {{
    background: {surface};
    color: {accent};
    border: 1px solid {border};
    border-radius: 20px;
    min-width: 40px;
    min-height: 40px;
    font-size: 18px;
}}
QPushButton#iconButton:pressed {{
    background: {pressed};
}}
QStatusBar {{
    color: {muted};
}}
"""


def palette_for(dark_mode: bool) -> dict[str, str]:
    return DARK_PALETTE if dark_mode else LIGHT_PALETTE


def build_stylesheet(dark_mode: bool) -> str:
    """Return the application stylesheet for the given mode."""
    return _TEMPLATE.format(**palette_for(dark_mode))


def theme_toggle_label(dark_mode: bool) -> str:
    # The button shows the mode it switches to.
    return "☀" if dark_mode else "☾"
