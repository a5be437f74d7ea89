from typing import Any, Dict, Optional, Sequence

from .fillers import round_half_up
from .models import AnalysisResult, SentimentSegment

# Numeric sentiment stored alongside a call.
SENTIMENT_VALUES = {"positive": 0.8, "negative": 0.3, "neutral": 0.5}


def sentiment_value(overall: str) -> float:
    return SENTIMENT_VALUES.get(overall, 0.5)


def talk_ratio(segments: Sequence[SentimentSegment]) -> Dict[str, float]:
    """
    Share (%) of estimated speaking time per role.
    Roles follow the same alternation as the segments: even index = rep.
    """
    rep = sum(s.end_time - s.start_time for s in segments[0::2])
    customer = sum(s.end_time - s.start_time for s in segments[1::2])
    total = rep + customer
    if total <= 0:
        return {"rep": 50.0, "customer": 50.0}
    return {
        "rep": round_half_up(rep / total * 100, 1),
        "customer": round_half_up(customer / total * 100, 1),
    }


def build_call_record(result: AnalysisResult, call_id: Optional[str] = None) -> Dict[str, Any]:
    value = sentiment_value(result.overall)
    ratio = talk_ratio(result.segments)
    return {
        "call_id": call_id,
        "sentiment_agent": value,
        "sentiment_customer": value,
        "transcription_notes": result.summary or "Sentiment analysis completed",
        "talk_ratio_rep": ratio["rep"],
        "talk_ratio_customer": ratio["customer"],
        "metadata": {
            "filler_words_count": result.filler_words.total_count,
            "filler_words_frequency": result.filler_words.frequency_per_minute,
            "confidence_issues_count": len(result.confidence_issues),
            "missed_opportunities_count": len(result.missed_opportunities),
        },
    }
