import logging
from typing import Optional

from .detectors import detect_confidence_issues, detect_missed_opportunities
from .fillers import analyze_filler_words
from .lexicon import DEFAULT_LEXICON, Lexicon
from .logger import timed
from .models import AnalysisResult, FillerWordAnalysis
from .segments import build_segments
from .sentiment import score_text
from .summary import EMPTY_SUMMARY, FAILURE_SUMMARY, compose_summary

logger = logging.getLogger(__name__)

DEFAULT_DURATION_SECONDS = 120


def default_result(summary: str = FAILURE_SUMMARY) -> AnalysisResult:
    """Neutral result with empty sequences and zeroed filler counts."""
    return AnalysisResult(
        overall="neutral",
        segments=(),
        confidence_issues=(),
        missed_opportunities=(),
        filler_words=FillerWordAnalysis(total_count=0, by_word={}, frequency_per_minute=0.0),
        summary=summary,
    )


def _run(
    text: str,
    rep_name: Optional[str],
    customer_name: Optional[str],
    duration_seconds: float,
    lexicon: Lexicon,
) -> AnalysisResult:
    with timed("Overall sentiment"):
        overall = score_text(text, lexicon)
    with timed("Segments"):
        segments = build_segments(text, duration_seconds, rep_name, customer_name, lexicon)
    with timed("Filler words"):
        fillers = analyze_filler_words(text, duration_seconds, lexicon)
    with timed("Confidence issues"):
        issues = detect_confidence_issues(text, lexicon)
    with timed("Missed opportunities"):
        opportunities = detect_missed_opportunities(text, rep_name, customer_name, lexicon)
    with timed("Summary"):
        summary = compose_summary(overall, fillers, issues, opportunities, rep_name, customer_name)

    return AnalysisResult(
        overall=overall,
        segments=tuple(segments),
        confidence_issues=tuple(issues),
        missed_opportunities=tuple(opportunities),
        filler_words=fillers,
        summary=summary,
    )


def analyze(
    text: str,
    rep_name: Optional[str] = None,
    customer_name: Optional[str] = None,
    duration_seconds: Optional[float] = None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> AnalysisResult:
    """
    Run every stage over one transcript and merge the outputs.

    Never raises: blank input yields the empty result, and any failure inside
    a stage is logged and replaced by the neutral default result.
    """
    try:
        if not text or not text.strip():
            return default_result(EMPTY_SUMMARY)
        duration = DEFAULT_DURATION_SECONDS if duration_seconds is None else float(duration_seconds)
        return _run(text, rep_name, customer_name, duration, lexicon)
    except Exception:
        logger.exception("Transcript analysis failed (chars=%s)", len(text) if isinstance(text, str) else None)
        return default_result(FAILURE_SUMMARY)
