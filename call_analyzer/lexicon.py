import hashlib
import json
import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Mapping, Tuple

# -----------------------------
# Word lists
# -----------------------------

POSITIVE_WORDS = (
    "happy", "great", "excellent", "perfect", "good", "love",
    "best", "amazing", "interested", "yes", "agreed",
)

NEGATIVE_WORDS = (
    "bad", "poor", "terrible", "awful", "hate", "dislike", "no",
    "not", "never", "problem", "issue", "sorry", "unfortunate",
)

# Order matters: the summary tie-break picks the first filler reaching the max.
FILLER_WORDS = (
    "um", "uh", "like", "actually", "you know", "so",
    "kind of", "sort of", "basically",
)

ISSUE_TYPES = ("uncertainty", "hesitation")
OPPORTUNITY_TYPES = ("value_proposition", "competitive_positioning", "objection_handling", "upsell")

# -----------------------------
# Confidence patterns
# -----------------------------

CONFIDENCE_SUGGESTIONS = {
    "uncertainty": (
        "Replace uncertain language with confident statements. For example, "
        "instead of 'I think' say 'I know' or 'I'm confident that'."
    ),
    "hesitation": "Reduce filler words and practice a smoother delivery with prepared talking points.",
}

CONFIDENCE_PATTERNS = (
    (r"I'm not (really )?sure", "uncertainty"),
    (r"I think", "uncertainty"),
    (r"maybe|perhaps", "uncertainty"),
    (r"I don't know", "uncertainty"),
    (r"um{2,}|uh{2,}", "hesitation"),
    (r"let me (just )?check", "uncertainty"),
)

# -----------------------------
# Opportunity patterns
# -----------------------------

OPPORTUNITY_PATTERNS = (
    (
        r"how much (is|does) it cost|price",
        "value_proposition",
        "When customers ask about price, always emphasize value before discussing cost.",
    ),
    (
        r"(competitor|other option|alternative)",
        "competitive_positioning",
        "When competitors are mentioned, highlight your unique advantages rather than criticizing alternatives.",
    ),
    (
        r"not sure|need to think",
        "objection_handling",
        "Address hesitation directly by asking what specific concerns they have.",
    ),
    (
        r"interest(ed)? in (just|only)",
        "upsell",
        "When customers express interest in just one product, consider introducing complementary offerings.",
    ),
)


@dataclass(frozen=True)
class PatternRule:
    """One detector row: a compiled matcher, the tag it emits and its suggestion text."""
    matcher: "re.Pattern[str]"
    tag: str
    suggestion: str


@dataclass(frozen=True)
class Lexicon:
    positive_words: FrozenSet[str]
    negative_words: FrozenSet[str]
    filler_words: Tuple[str, ...]
    confidence_rules: Tuple[PatternRule, ...]
    opportunity_rules: Tuple[PatternRule, ...]


def compile_rule(pattern: str, tag: str, suggestion: str) -> PatternRule:
    return PatternRule(matcher=re.compile(pattern, re.IGNORECASE), tag=tag, suggestion=suggestion)


def confidence_suggestion(issue_type: str, suggestions: Mapping[str, str] = CONFIDENCE_SUGGESTIONS) -> str:
    return suggestions[issue_type]


def build_lexicon(
    positive_words: Iterable[str] = POSITIVE_WORDS,
    negative_words: Iterable[str] = NEGATIVE_WORDS,
    filler_words: Iterable[str] = FILLER_WORDS,
    confidence_patterns: Iterable[Tuple[str, str]] = CONFIDENCE_PATTERNS,
    opportunity_patterns: Iterable[Tuple[str, str, str]] = OPPORTUNITY_PATTERNS,
    confidence_suggestions: Mapping[str, str] = CONFIDENCE_SUGGESTIONS,
) -> Lexicon:
    """
    Compile the raw tables into an immutable Lexicon.
    Word lists are lower-cased; pattern order is preserved.
    """
    return Lexicon(
        positive_words=frozenset(w.lower() for w in positive_words),
        negative_words=frozenset(w.lower() for w in negative_words),
        filler_words=tuple(w.lower() for w in filler_words),
        confidence_rules=tuple(
            compile_rule(pat, tag, confidence_suggestion(tag, confidence_suggestions))
            for pat, tag in confidence_patterns
        ),
        opportunity_rules=tuple(
            compile_rule(pat, tag, suggestion) for pat, tag, suggestion in opportunity_patterns
        ),
    )


def lexicon_fingerprint(lexicon: Lexicon) -> str:
    """SHA-256 over the table contents; two lexicons with equal tables share it."""
    tables = [
        sorted(lexicon.positive_words),
        sorted(lexicon.negative_words),
        list(lexicon.filler_words),
        [[r.matcher.pattern, r.tag, r.suggestion] for r in lexicon.confidence_rules],
        [[r.matcher.pattern, r.tag, r.suggestion] for r in lexicon.opportunity_rules],
    ]
    return hashlib.sha256(json.dumps(tables, ensure_ascii=False).encode("utf-8")).hexdigest()


DEFAULT_LEXICON = build_lexicon()
