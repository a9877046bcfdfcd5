from __future__ import annotations

import logging

from fuzzy_search.models import MatchResult, ScoringWeights

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS = ScoringWeights()
SEPARATORS = frozenset("_ ")


def _require_str(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, not {type(value).__name__}")
    return value


def contains(subject: str, pattern: str) -> bool:
    """Return whether ``pattern`` is a case-insensitive subsequence of ``subject``.

    An empty pattern matches any non-empty subject, but not an empty one.
    """
    subject = _require_str("subject", subject)
    pattern = _require_str("pattern", pattern)
    if not pattern:
        return bool(subject)

    pattern_idx = 0
    pattern_length = len(pattern)
    for char in subject:
        if pattern_idx == pattern_length:
            break
        if pattern[pattern_idx].lower() == char.lower():
            pattern_idx += 1

    return pattern_idx == pattern_length


def match(
    subject: str, pattern: str, weights: ScoringWeights = DEFAULT_WEIGHTS
) -> MatchResult:
    """Match ``pattern`` against ``subject`` and score the match; higher is better.

    Scores are only comparable between calls that share a pattern. ``present``
    reports whether every pattern character was found, regardless of the score.
    """
    score, present, indices = calculate_score(subject, pattern, weights)
    return MatchResult(present=present, score=score, indices=indices)


def calculate_score(
    subject: str, pattern: str, weights: ScoringWeights = DEFAULT_WEIGHTS
) -> tuple[int, bool, tuple[int, ...]]:
    subject = _require_str("subject", subject)
    pattern = _require_str("pattern", pattern)
    if not pattern:
        return 0, bool(subject), ()

    score = 0
    pattern_idx = 0
    pattern_length = len(pattern)
    prev_matched = False
    prev_lower = False
    # Start of string counts as a separator for the first match.
    prev_separator = True

    # Pending best occurrence of the current letter: (folded letter, index, score).
    best: tuple[str, int, int] | None = None
    matched_indices: list[int] = []

    for subject_idx, char in enumerate(subject):
        pattern_lower = (
            pattern[pattern_idx].lower() if pattern_idx != pattern_length else None
        )
        char_lower = char.lower()
        char_upper = char.upper()

        next_match = pattern_lower is not None and pattern_lower == char_lower
        rematch = best is not None and best[0] == char_lower

        if best is not None and (
            next_match or (pattern_lower is not None and best[0] == pattern_lower)
        ):
            score += best[2]
            matched_indices.append(best[1])
            best = None

        if next_match or rematch:
            score = penalize_non_pattern_characters(
                score, pattern_idx, subject_idx, weights
            )
            new_score = apply_bonuses(
                prev_matched,
                prev_lower,
                prev_separator,
                char,
                char_lower,
                char_upper,
                0,
                weights,
            )

            if next_match:
                pattern_idx += 1

            if new_score >= (best[2] if best is not None else 0):
                if best is not None:
                    score += weights.unmatched_letter_penalty
                best = (char_lower, subject_idx, new_score)

            prev_matched = True
        else:
            score += weights.unmatched_letter_penalty
            prev_matched = False

        is_letter = char_lower != char_upper
        prev_lower = char == char_lower and is_letter
        prev_separator = char in SEPARATORS

    if best is not None:
        score += best[2]
        matched_indices.append(best[1])

    present = pattern_idx == pattern_length
    logger.debug(
        "Scored %r against %r: score=%d present=%s", pattern, subject, score, present
    )
    return score, present, tuple(matched_indices)


def apply_bonuses(
    prev_matched: bool,
    prev_lower: bool,
    prev_separator: bool,
    char: str,
    char_lower: str,
    char_upper: str,
    score: int,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> int:
    if prev_matched:
        score += weights.adjacent_match_bonus

    if prev_separator:
        score += weights.match_after_separator_bonus

    # Lowercase letter followed by an uppercase letter.
    if prev_lower and char == char_upper and char_lower != char_upper:
        score += weights.camel_case_match_bonus

    return score


def penalize_non_pattern_characters(
    score: int,
    pattern_index: int,
    subject_index: int,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> int:
    if pattern_index == 0:
        score += max(
            subject_index * weights.unmatched_prefix_letter_penalty,
            weights.max_prefix_penalty,
        )
    return score
