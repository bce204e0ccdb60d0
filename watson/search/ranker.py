"""
Fuzzy Ranker - Subsequence matching with boundary-aware scoring.

A target matches when every query character appears in it, in order,
ignoring case. rapidfuzz's LCS distance does the cheap yes/no check; the
score is then computed from the best alignment:

  +16 per matched character
  +30 if the match starts at position 0, +20 if right after a separator
  +8  for every later matched character that starts a word
  +12 for every matched character directly after the previous one
  -3  for every gap, -1 per skipped character inside gaps
  -1  per character before the first match (at most 5)
  -1  per unmatched character after the last match

So "chr" ranks "Chrome" above "Chromium" (shorter tail) and both above
"Orchard" (no prefix).
"""

from dataclasses import replace
from typing import Optional

from rapidfuzz.distance import LCSseq

SEPARATORS = frozenset(" -_/")

SCORE_MATCH = 16
BONUS_START = 30
BONUS_START_AFTER_SEPARATOR = 20
BONUS_BOUNDARY = 8
BONUS_CONSECUTIVE = 12
PENALTY_GAP_START = 3
PENALTY_GAP_EXTENSION = 1
PENALTY_LEADING = 1
MAX_LEADING_PENALTY = 5
PENALTY_TRAILING = 1


def _is_boundary(target: str, pos: int) -> bool:
    return pos == 0 or target[pos - 1] in SEPARATORS


class FuzzyRanker:
    """Score candidate names against a query and order them."""

    def score(self, query: str, target: str) -> Optional[int]:
        """
        Score target against query.

        Returns:
            Integer score (higher is better) or None when query is not a
            case-insensitive subsequence of target.
        """
        if not query:
            return 0

        q = query.lower()
        t = target.lower()
        if len(q) > len(t) or LCSseq.similarity(q, t) != len(q):
            return None

        best = None
        for start, ch in enumerate(t):
            if ch != q[0]:
                continue
            positions = self._align(q, t, start)
            if positions is None:
                # Later starts can only leave fewer characters to work with
                break
            points = self._score_positions(t, positions)
            if best is None or points > best:
                best = points
        return best

    def search(self, query: str, items: list) -> list:
        """
        Drop items whose name does not match and sort the rest.

        Each surviving item is returned with its score replaced by the
        fuzzy score. Sorting is stable, so equal scores keep input order.
        """
        scored = []
        for item in items:
            points = self.score(query, item.name)
            if points is not None:
                scored.append(replace(item, score=points))

        scored.sort(key=lambda item: item.score, reverse=True)
        return scored

    def _align(self, q: str, t: str, start: int) -> Optional[list[int]]:
        """Greedy left-to-right alignment of q inside t beginning at start."""
        positions = [start]
        pos = start
        for ch in q[1:]:
            pos = t.find(ch, pos + 1)
            if pos == -1:
                return None
            positions.append(pos)
        return positions

    def _score_positions(self, t: str, positions: list[int]) -> int:
        first = positions[0]
        points = SCORE_MATCH * len(positions)

        if first == 0:
            points += BONUS_START
        elif t[first - 1] in SEPARATORS:
            points += BONUS_START_AFTER_SEPARATOR
        points -= min(first, MAX_LEADING_PENALTY) * PENALTY_LEADING

        for prev, pos in zip(positions, positions[1:]):
            gap = pos - prev - 1
            if gap == 0:
                points += BONUS_CONSECUTIVE
            else:
                points -= PENALTY_GAP_START + gap * PENALTY_GAP_EXTENSION
            if _is_boundary(t, pos):
                points += BONUS_BOUNDARY

        points -= (len(t) - positions[-1] - 1) * PENALTY_TRAILING
        return points
