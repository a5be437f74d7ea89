import math
import re
from functools import lru_cache
from typing import Dict

from .lexicon import DEFAULT_LEXICON, Lexicon
from .models import FillerWordAnalysis


@lru_cache(maxsize=256)
def _filler_regex(phrase: str) -> "re.Pattern[str]":
    # multi-word fillers must appear as a contiguous phrase
    return re.compile(r"\b" + re.escape(phrase) + r"\b", re.IGNORECASE)


def round_half_up(value: float, digits: int = 1) -> float:
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def count_fillers(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> Dict[str, int]:
    """Occurrences per filler phrase, only for phrases seen at least once, in lexicon order."""
    lower = (text or "").lower()
    counts: Dict[str, int] = {}
    for phrase in lexicon.filler_words:
        n = len(_filler_regex(phrase).findall(lower))
        if n > 0:
            counts[phrase] = n
    return counts


def analyze_filler_words(text: str, duration_seconds: float, lexicon: Lexicon = DEFAULT_LEXICON) -> FillerWordAnalysis:
    by_word = count_fillers(text, lexicon)
    total = sum(by_word.values())
    minutes = duration_seconds / 60
    per_minute = total / minutes if minutes > 0 else 0.0
    return FillerWordAnalysis(
        total_count=total,
        by_word=by_word,
        frequency_per_minute=round_half_up(per_minute, 1),
    )
