"""Terminal UI utilities for picking what to outline."""

from __future__ import annotations

import questionary

from schemaprint.cli.common.tui_style import QUESTIONARY_STYLE_SELECT

_MAX_SCHEMA_NAME_WIDTH = 96


def _truncate(text: str, max_len: int) -> str:
    """Return text capped at max_len characters using an ASCII ellipsis."""
    if max_len <= 3 or len(text) <= max_len:
        return text[:max_len]
    return f"{text[: max_len - 3]}..."


def select_schemas(schema_full_names: list[str]) -> list[str]:
    """Display a checkbox prompt to pick schemas.

    Args:
        schema_full_names: Schema full names to choose from.

    Returns:
        The picked full names, or an empty list if none were picked.
    """
    if not schema_full_names:
        return []

    choices = [
        questionary.Choice(title=_truncate(name, _MAX_SCHEMA_NAME_WIDTH), value=name)
        for name in schema_full_names
    ]

    return (
        questionary.checkbox(
            "Select schemas:",
            choices=choices,
            style=QUESTIONARY_STYLE_SELECT,
            qmark="✦",
            instruction="Use ↑/↓, space, a (all), i (invert), enter",
        ).ask()
        or []
    )
