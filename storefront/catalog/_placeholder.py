"""
Placeholders — the one category → glyph table.

Used at ingestion (synthesized product image) and by presentation code
(category badges). Unknown categories get the generic box.
"""

from __future__ import annotations

from urllib.parse import quote

DEFAULT_GLYPH = "📦"

CATEGORY_GLYPHS: dict[str, str] = {
    "آرایشی و بهداشتی": "💄",
    "مراقبت مو": "🧴",
    "مراقبت پوست": "🧴",
    "بهداشتی": "🧼",
    "لوازم آرایشی": "💅",
    "عطر": "🌸",
    "کرم": "🧴",
    "شامپو": "🧴",
    "صابون": "🧼",
    "لوازم خانگی": "🏠",
    "لباس": "👕",
    "کفش": "👟",
    "اکسسوری": "👜",
    "لوازم الکترونیکی": "📱",
    "کتاب": "📚",
    "اسباب بازی": "🧸",
    "خوراکی": "🍎",
    "عمومی": "📦",
}

_SVG_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="400" height="300" viewBox="0 0 100 100">'
    '<rect width="100" height="100" fill="#f5f5f5"/>'
    '<text x="50" y="50" font-size="40" text-anchor="middle" dy=".3em" fill="#999">{glyph}</text>'
    "</svg>"
)


def placeholder_for(category: str) -> str:
    """Glyph for a category."""
    return CATEGORY_GLYPHS.get(category, DEFAULT_GLYPH)


def placeholder_image(category: str) -> str:
    """
    Deterministic SVG data URI showing the category glyph.

    Markup stays readable; '#' and the glyph are percent-encoded.
    """
    svg = _SVG_TEMPLATE.format(glyph=placeholder_for(category))
    return "data:image/svg+xml," + quote(svg, safe=" <>=\"'/:;.,-()")


__all__ = (
    "DEFAULT_GLYPH",
    "CATEGORY_GLYPHS",
    "placeholder_for",
    "placeholder_image",
)
