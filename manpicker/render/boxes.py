"""Rounded pane borders with a centered title."""

from __future__ import annotations

from ..ansi import clip_text
from ..ui_theme import UITheme


def _paint(text: str, style: str, theme: UITheme) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{theme.reset}"


def box_top(width: int, title: str, theme: UITheme) -> str:
    """Top border of a ``width``-column box with ``title`` centered in it."""
    if width < 2:
        return "─" * max(0, width)
    inner = width - 2
    label, label_width = clip_text(title, inner)
    left = (inner - label_width) // 2
    right = inner - label_width - left
    return (
        _paint("╭" + "─" * left, theme.border, theme)
        + _paint(label, theme.title, theme)
        + _paint("─" * right + "╮", theme.border, theme)
    )


def box_bottom(width: int, theme: UITheme, label: str = "") -> str:
    """Bottom border, optionally carrying a centered dim ``label``."""
    if width < 2:
        return "─" * max(0, width)
    inner = width - 2
    text, text_width = clip_text(label, inner)
    left = (inner - text_width) // 2
    right = inner - text_width - left
    return (
        _paint("╰" + "─" * left, theme.border, theme)
        + _paint(text, theme.status_dim, theme)
        + _paint("─" * right + "╯", theme.border, theme)
    )


def box_rows(width: int, height: int, title: str, body: list[str], theme: UITheme, footer: str = "") -> list[str]:
    """Wrap pre-padded ``body`` rows in a border, filling to ``height`` rows."""
    if height <= 0:
        return []
    if height == 1:
        return [box_top(width, title, theme)]
    side = _paint("│", theme.border, theme)
    inner_rows = height - 2
    filler = " " * max(0, width - 2)
    rows = [box_top(width, title, theme)]
    for idx in range(inner_rows):
        content = body[idx] if idx < len(body) else filler
        rows.append(f"{side}{content}{side}")
    rows.append(box_bottom(width, theme, footer))
    return rows
