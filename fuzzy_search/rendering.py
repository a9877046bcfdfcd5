from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text

MATCH_STYLE = "bold magenta"


def highlight_match(
    subject: str, indices: Iterable[int], *, style: str = MATCH_STYLE
) -> Text:
    text = Text(subject)
    for index in indices:
        if 0 <= index < len(subject):
            text.stylize(style, index, index + 1)
    return text


def format_score(score: int, width: int) -> str:
    return f"{score:>{width}d}"
