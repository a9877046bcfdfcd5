from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringWeights:
    adjacent_match_bonus: int = 5
    match_after_separator_bonus: int = 10
    camel_case_match_bonus: int = 10
    unmatched_letter_penalty: int = -1
    # Penalties are negative, so the max() in the prefix rule caps them.
    unmatched_prefix_letter_penalty: int = 0
    max_prefix_penalty: int = 0


@dataclass(frozen=True)
class MatchResult:
    present: bool
    score: int
    indices: tuple[int, ...] = ()

    def __bool__(self) -> bool:
        return self.present
