from fuzzy_search.rendering import MATCH_STYLE, format_score, highlight_match
from fuzzy_search.search import match


def test_highlight_match_styles_only_matched_characters() -> None:
    result = match("FileSystemManager", "fsm")

    text = highlight_match("FileSystemManager", result.indices)

    assert text.plain == "FileSystemManager"
    assert [(span.start, span.end, span.style) for span in text.spans] == [
        (0, 1, MATCH_STYLE),
        (4, 5, MATCH_STYLE),
        (10, 11, MATCH_STYLE),
    ]


def test_highlight_match_ignores_out_of_range_indices() -> None:
    text = highlight_match("abc", [-1, 1, 3], style="underline")

    assert [(span.start, span.end, span.style) for span in text.spans] == [
        (1, 2, "underline")
    ]


def test_format_score_right_aligns() -> None:
    assert format_score(5, 3) == "  5"
    assert format_score(-12, 3) == "-12"
