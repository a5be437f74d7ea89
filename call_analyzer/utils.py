import re
from typing import List

SENT_SPLIT_RE = re.compile(r'[.!?]+')


def split_sentences(text: str) -> List[str]:
    """
    Naive splitter on runs of '.', '!' and '?'.
    Empty and whitespace-only fragments are dropped; survivors are trimmed
    and keep their input order.
    """
    parts = SENT_SPLIT_RE.split(text or "")
    return [p.strip() for p in parts if p.strip()]


def tokenize(text: str) -> List[str]:
    # whitespace only; punctuation stays attached to its word
    return (text or "").lower().split()


def word_count(text: str) -> int:
    return len((text or "").split())


def format_mmss(seconds: float) -> str:
    s = int(max(seconds, 0))
    return f"{s//60:02d}:{s%60:02d}"
