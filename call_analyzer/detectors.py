from typing import Iterator, List, Optional, Sequence, Tuple

from .lexicon import DEFAULT_LEXICON, Lexicon, PatternRule
from .models import ConfidenceIssue, MissedOpportunity
from .utils import split_sentences

# Coarse placeholder: each sentence is assumed to sit 10s after the previous one.
SECONDS_PER_SENTENCE = 10


# -----------------------------
# Shared rule scan
# -----------------------------

def scan(sentences: Sequence[str], rules: Sequence[PatternRule]) -> Iterator[Tuple[int, str, PatternRule]]:
    """
    Yields (sentence_index, sentence, rule) for every rule that matches a sentence.
    One sentence can match several rules; each match is reported once.
    """
    for i, sentence in enumerate(sentences):
        for rule in rules:
            if rule.matcher.search(sentence):
                yield i, sentence, rule


def personalize(suggestion: str, rep_name: Optional[str], customer_name: Optional[str]) -> str:
    """Swap generic wording for the call's names. Needs both names; otherwise unchanged."""
    if not (rep_name and customer_name):
        return suggestion
    out = suggestion.replace("customers", customer_name)
    return out.replace("your", f"{rep_name}'s")


# -----------------------------
# Detectors
# -----------------------------

def detect_confidence_issues(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> List[ConfidenceIssue]:
    sentences = split_sentences(text)
    return [
        ConfidenceIssue(
            text=sentence,
            issue_type=rule.tag,
            time=i * SECONDS_PER_SENTENCE,
            suggestion=rule.suggestion,
        )
        for i, sentence, rule in scan(sentences, lexicon.confidence_rules)
    ]


def detect_missed_opportunities(
    text: str,
    rep_name: Optional[str] = None,
    customer_name: Optional[str] = None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> List[MissedOpportunity]:
    sentences = split_sentences(text)
    return [
        MissedOpportunity(
            text=sentence,
            opportunity_type=rule.tag,
            time=i * SECONDS_PER_SENTENCE,
            suggestion=personalize(rule.suggestion, rep_name, customer_name),
        )
        for i, sentence, rule in scan(sentences, lexicon.opportunity_rules)
    ]
