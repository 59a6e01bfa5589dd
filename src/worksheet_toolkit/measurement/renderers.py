"""
Module: measurement.renderers

Purpose:
    Reference renderer drawing a plain-text approximation of an element
    into a MeasurementRegion with Pillow. Host applications normally pass
    their own ``render_into``; this one lets the CLI and tests measure
    real drawn heights without a browser.

Key Functions:
    - render_text_block(): Draw one element (title, text, list, exercise,
      divider or image placeholder) and reserve its padding

Dependencies:
    - PIL: ImageDraw / ImageFont
    - common.thresholds: TEXT_RENDER_THRESHOLDS

Used By:
    - cli: --render mode
"""

from __future__ import annotations

import logging
import textwrap
from functools import lru_cache
from typing import Any, List, Mapping

from PIL import ImageFont

from worksheet_toolkit.common.thresholds import TEXT_RENDER_THRESHOLDS
from worksheet_toolkit.core.models import Element, Role

from .surface import MeasurementRegion

logger = logging.getLogger(__name__)

INK = 0

_TEXT_FIELDS = ("title", "text", "content", "instruction", "question", "description", "caption")
_ITEM_FIELDS = ("text", "question", "statement", "left", "right", "answer")


def render_text_block(element: Element, region: MeasurementRegion) -> None:
    """
    Draw ``element`` into ``region`` top-down.

    Layout: block padding, then wrapped text lines, then one line per
    item/option/row, then block padding. Dividers are a rule; image
    types are an outlined placeholder box.
    """
    t = TEXT_RENDER_THRESHOLDS
    role = element.role
    props = element.properties or {}
    pad = t.block_padding_px
    y = pad

    if role == Role.DIVIDER:
        region.draw.rectangle(
            (0, y, region.width - 1, y + t.divider_thickness_px - 1), fill=INK
        )
        region.reserve(y + t.divider_thickness_px + pad)
        return

    if element.type.startswith("image"):
        box_height = int(region.width * t.image_placeholder_ratio)
        region.draw.rectangle((0, y, region.width - 1, y + box_height - 1), outline=INK)
        y += box_height
        caption = _first_text(props)
        if caption:
            y = _draw_lines(region, [caption], _load_font(t.font_size), y + t.item_gap_px)
        region.reserve(y + pad)
        return

    size = t.title_font_size if role == Role.TITLE else t.font_size
    font = _load_font(size)

    y = _draw_lines(region, _paragraphs(props), font, y)
    entries = _entries(props)
    if entries:
        if y > pad:
            y += t.item_gap_px
        y = _draw_lines(region, entries, font, y, gap=t.item_gap_px)

    region.reserve(y + pad)


def _draw_lines(
    region: MeasurementRegion,
    paragraphs: List[str],
    font: ImageFont.ImageFont,
    y: int,
    gap: int = 0,
) -> int:
    """Wrap and draw paragraphs starting at ``y``; return the new y."""
    t = TEXT_RENDER_THRESHOLDS
    line_height = _line_height(font) + t.line_spacing_px
    chars = max(t.min_chars_per_line, int(region.width / _char_width(region, font)))

    for n, paragraph in enumerate(paragraphs):
        if n and gap:
            y += gap
        for line in textwrap.wrap(paragraph, width=chars) or [""]:
            region.draw.text((0, y), line, fill=INK, font=font)
            y += line_height
    return y


def _paragraphs(props: Mapping[str, Any]) -> List[str]:
    return [str(props[name]) for name in _TEXT_FIELDS if props.get(name)]


def _first_text(props: Mapping[str, Any]) -> str:
    paragraphs = _paragraphs(props)
    return paragraphs[0] if paragraphs else ""


def _entries(props: Mapping[str, Any]) -> List[str]:
    """One display line per list item, option, word-bank word or table row."""
    entries: List[str] = []
    for key in ("items", "options", "pairs", "rows"):
        value = props.get(key)
        if isinstance(value, list):
            entries.extend(_entry_text(v) for v in value)
    word_bank = props.get("wordBank")
    if isinstance(word_bank, list) and word_bank:
        entries.append("  ".join(str(word) for word in word_bank))
    return [e for e in entries if e]


def _entry_text(value: Any) -> str:
    if isinstance(value, Mapping):
        parts = [str(value[name]) for name in _ITEM_FIELDS if value.get(name)]
        options = value.get("options")
        if isinstance(options, list):
            parts.append(" / ".join(str(o) for o in options))
        return " - ".join(parts)
    if isinstance(value, list):
        return " | ".join(str(v) for v in value)
    return "" if value is None else str(value)


def _line_height(font: ImageFont.ImageFont) -> int:
    left, top, right, bottom = font.getbbox("Ag")
    return max(1, bottom - top)


def _char_width(region: MeasurementRegion, font: ImageFont.ImageFont) -> float:
    sample = "abcdefghijklmnopqrstuvwxyz"
    return max(1.0, region.draw.textlength(sample, font=font) / len(sample))


@lru_cache(maxsize=8)
def _load_font(size: int) -> ImageFont.ImageFont:
    """
    Load a TrueType font at ``size``.

    Falls back to Pillow's default font if none is available.
    """
    font_options = [
        "DejaVuSans.ttf",
        "arial.ttf",
        "Arial.ttf",
        "LiberationSans-Regular.ttf",
    ]

    for font_name in font_options:
        try:
            return ImageFont.truetype(font_name, size)
        except (IOError, OSError):
            continue

    logger.warning("Could not load TrueType font, using default")
    return ImageFont.load_default()
