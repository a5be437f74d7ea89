from typing import Sequence, Tuple

from .lexicon import DEFAULT_LEXICON, Lexicon
from .models import Sentiment
from .utils import tokenize

POSITIVE_MARGIN = 1.5


def count_polarity(words: Sequence[str], lexicon: Lexicon = DEFAULT_LEXICON) -> Tuple[int, int]:
    """Exact-match counts of (positive, negative) words. No stemming."""
    pos = sum(1 for w in words if w in lexicon.positive_words)
    neg = sum(1 for w in words if w in lexicon.negative_words)
    return pos, neg


def classify(positive_count: int, negative_count: int) -> Sentiment:
    if positive_count > negative_count * POSITIVE_MARGIN:
        return "positive"
    if negative_count > positive_count:
        return "negative"
    return "neutral"


def score_text(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> Sentiment:
    """Classify a whole transcript or a single sentence."""
    return classify(*count_polarity(tokenize(text), lexicon))
