from typing import List, Optional

from .lexicon import DEFAULT_LEXICON, Lexicon
from .models import SentimentSegment
from .sentiment import score_text
from .utils import split_sentences, word_count

DEFAULT_REP_LABEL = "Sales Rep"
DEFAULT_CUSTOMER_LABEL = "Customer"


def speaker_for(index: int, rep_name: Optional[str] = None, customer_name: Optional[str] = None) -> str:
    # alternating heuristic, no diarization signal behind it
    if index % 2 == 0:
        return rep_name or DEFAULT_REP_LABEL
    return customer_name or DEFAULT_CUSTOMER_LABEL


def build_segments(
    text: str,
    duration_seconds: float,
    rep_name: Optional[str] = None,
    customer_name: Optional[str] = None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> List[SentimentSegment]:
    """
    Split the transcript into sentence segments with estimated timing.

    The speaking rate is assumed constant over the call:
      avg_words_per_second = total_words / duration_seconds
      sentence_duration    = sentence_words / avg_words_per_second
    Segments are contiguous; the first starts at 0. A non-positive duration
    (or a transcript with no words) gives zero-length segments.
    """
    sentences = split_sentences(text)
    total_words = word_count(text)
    rate = total_words / duration_seconds if duration_seconds > 0 else 0.0

    segments: List[SentimentSegment] = []
    current = 0.0
    for i, sentence in enumerate(sentences):
        length = word_count(sentence) / rate if rate > 0 else 0.0
        start, end = current, current + length
        segments.append(SentimentSegment(
            text=sentence,
            sentiment=score_text(sentence, lexicon),
            start_time=start,
            end_time=end,
            speaker=speaker_for(i, rep_name, customer_name),
        ))
        current = end
    return segments
