from typing import List, Optional, Sequence, Tuple

from .models import ConfidenceIssue, FillerWordAnalysis, MissedOpportunity, Sentiment

FREQUENT_FILLER_THRESHOLD = 10
FREQUENT_CONFIDENCE_THRESHOLD = 3

EMPTY_SUMMARY = "No transcript content was available to analyze."
FAILURE_SUMMARY = "Failed to analyze sentiment"


def most_common_filler(fillers: FillerWordAnalysis) -> Tuple[str, int]:
    # strict '>' keeps the first word that reached the max
    best, best_count = "", 0
    for word, count in fillers.by_word.items():
        if count > best_count:
            best, best_count = word, count
    return best, best_count


def sentiment_clause(sentiment: Sentiment, rep: str, customer: str) -> str:
    if sentiment == "positive":
        return f"{rep} maintained a positive tone throughout the call. {customer} appeared receptive to the conversation."
    if sentiment == "negative":
        return f"The call had a generally negative tone. {rep} should work on creating a more positive atmosphere."
    return f"The call maintained a neutral tone. {rep} could work on bringing more enthusiasm to increase engagement."


def filler_clause(fillers: FillerWordAnalysis, rep: str) -> str:
    if fillers.total_count > FREQUENT_FILLER_THRESHOLD:
        clause = (
            f"{rep} used filler words frequently ({fillers.frequency_per_minute:.1f} per minute), "
            "which may impact perceived confidence."
        )
        word, count = most_common_filler(fillers)
        if word:
            clause += f' The most common filler word was "{word}" ({count} times).'
        return clause
    if fillers.total_count > 0:
        return f"{rep} used some filler words, but not excessively."
    return f"{rep} spoke clearly with minimal filler words."


def confidence_clause(issues: Sequence[ConfidenceIssue], rep: str) -> str:
    if len(issues) > FREQUENT_CONFIDENCE_THRESHOLD:
        return f"There were {len(issues)} instances where {rep} displayed uncertainty or hesitation."
    if issues:
        return f"{rep} showed a few moments of uncertainty."
    return f"{rep} displayed good confidence throughout the call."


def opportunity_clause(opportunities: Sequence[MissedOpportunity], rep: str) -> str:
    if not opportunities:
        return f"{rep} did well at identifying and addressing sales opportunities."
    example = opportunities[0].suggestion.lower().rstrip(".")
    return (
        f"There were {len(opportunities)} missed opportunities to strengthen the sale. "
        f"For example, {rep} could have {example}."
    )


def compose_summary(
    sentiment: Sentiment,
    fillers: FillerWordAnalysis,
    confidence_issues: Sequence[ConfidenceIssue],
    missed_opportunities: Sequence[MissedOpportunity],
    rep_name: Optional[str] = None,
    customer_name: Optional[str] = None,
) -> str:
    """Sentiment, filler, confidence and opportunity clauses, always in that order."""
    rep = rep_name or "The sales rep"
    customer = customer_name or "The customer"
    parts: List[str] = [
        sentiment_clause(sentiment, rep, customer),
        filler_clause(fillers, rep),
        confidence_clause(confidence_issues, rep),
        opportunity_clause(missed_opportunities, rep),
    ]
    return " ".join(parts)
