from __future__ import annotations

import re
from typing import List, Sequence

from .pipeline_types import HighlightSegment


def highlight(text: str, tokens: Sequence[str]) -> List[HighlightSegment]:
    """
    Split ``text`` into plain and matched segments for display.

    Tokens are lower-cased and de-duplicated, then matched case-insensitively
    as literals. With no tokens the text comes back as one plain segment.
    """
    unique_tokens = list(dict.fromkeys(t.lower() for t in tokens if t))
    if not unique_tokens:
        return [HighlightSegment(text=text)]

    pattern = re.compile(
        "(" + "|".join(re.escape(t) for t in unique_tokens) + ")",
        flags=re.IGNORECASE,
    )
    wanted = set(unique_tokens)

    segments: List[HighlightSegment] = []
    for part in pattern.split(text):
        if not part:
            continue
        segments.append(HighlightSegment(text=part, matched=part.lower() in wanted))
    return segments
