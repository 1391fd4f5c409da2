"""
Parse the model's semi-structured answer into a score and two bullet blocks.

Expected shape (the model does not always comply exactly):

    Score: 82
    Pros:
    - ...
    Cons:
    - ...

Three independent searches run over the same text, so marker order and any
prose around them do not matter. The score pattern accepts 1-3 digits only,
so "Score: 1000" reads as 100.
"""
import re
from dataclasses import dataclass
from typing import List, Optional

SCORE_RE = re.compile(r'Score\s*:\s*(\d{1,3})', re.IGNORECASE)

# A section ends at the other marker written with a colon, or at a line that
# starts with it; a bare "cons" inside a sentence is prose.
_CONS_AHEAD = r'(?=\bCons\s*:|^[ \t]*Cons\b|\Z)'
_FLAGS = re.IGNORECASE | re.DOTALL | re.MULTILINE

PROS_RE = re.compile(r'\bPros\s*:\s*(.*?)' + _CONS_AHEAD, _FLAGS)
CONS_RE = re.compile(r'\bCons\s*:\s*(.*)', _FLAGS)

# Colon-less headings only count at the start of a line
PROS_HEADING_RE = re.compile(r'^[ \t]*Pros\b\s*(.*?)' + _CONS_AHEAD, _FLAGS)
CONS_HEADING_RE = re.compile(r'^[ \t]*Cons\b\s*(.*)', _FLAGS)

_BULLET_RE = re.compile(r'^\s*(?:[-*•]|\d+[.)])\s*')


@dataclass
class ParsedScoreResult:
    score: Optional[int]   # None when no "Score: <digits>" was found
    pros: str
    cons: str


def parse(raw_text: str) -> ParsedScoreResult:
    text = raw_text or ''

    score_match = SCORE_RE.search(text)
    pros_match = PROS_RE.search(text) or PROS_HEADING_RE.search(text)
    cons_match = CONS_RE.search(text) or CONS_HEADING_RE.search(text)

    return ParsedScoreResult(
        score=int(score_match.group(1)) if score_match else None,
        pros=pros_match.group(1).strip() if pros_match else '',
        cons=cons_match.group(1).strip() if cons_match else '',
    )


def split_bullets(block: Optional[str]) -> List[str]:
    """Split a stored pros/cons block into individual points for display."""
    if not block:
        return []
    points = []
    for line in block.splitlines():
        point = _BULLET_RE.sub('', line).strip()
        if point:
            points.append(point)
    return points
