
import os
import re
import yaml
from typing import Any, Dict, List, Tuple

from .lexicon import (
    CONFIDENCE_PATTERNS,
    CONFIDENCE_SUGGESTIONS,
    FILLER_WORDS,
    ISSUE_TYPES,
    NEGATIVE_WORDS,
    OPPORTUNITY_PATTERNS,
    OPPORTUNITY_TYPES,
    POSITIVE_WORDS,
    DEFAULT_LEXICON,
    Lexicon,
    build_lexicon,
)


class LexiconError(ValueError):
    """Raised when a lexicon file is malformed."""


def _words(data: Dict[str, Any], key: str, default: Tuple[str, ...]) -> List[str]:
    if key not in data:
        return list(default)
    raw = data[key] or []
    if not isinstance(raw, list):
        raise LexiconError(f"{key}: expected a list of words")
    for w in raw:
        # unquoted yes/no/on/off load as booleans
        if not isinstance(w, str) or not w.strip():
            raise LexiconError(f"{key}: {w!r} is not a word, quote it in the YAML file")
    return list(raw)


def _items(raw: Any, key: str) -> List[Dict[str, Any]]:
    if not isinstance(raw, list):
        raise LexiconError(f"{key}: expected a list of pattern entries")
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise LexiconError(f"{key}[{i}]: expected a mapping, got {item!r}")
    return raw


def _pattern(item: Dict[str, Any], where: str) -> str:
    pattern = item.get("pattern")
    if not isinstance(pattern, str) or not pattern:
        raise LexiconError(f"{where}: pattern must be a non-empty string")
    try:
        re.compile(pattern)
    except re.error as e:
        raise LexiconError(f"{where}: invalid pattern {pattern!r} ({e})") from e
    return pattern


def _confidence_rows(raw: Any) -> List[Tuple[str, str]]:
    rows = []
    for i, item in enumerate(_items(raw, "confidence_patterns")):
        where = f"confidence_patterns[{i}]"
        issue_type = item.get("issue_type")
        if issue_type not in ISSUE_TYPES:
            raise LexiconError(f"{where}: unknown issue_type {issue_type!r}")
        rows.append((_pattern(item, where), issue_type))
    return rows


def _opportunity_rows(raw: Any) -> List[Tuple[str, str, str]]:
    rows = []
    for i, item in enumerate(_items(raw, "opportunity_patterns")):
        where = f"opportunity_patterns[{i}]"
        opp_type = item.get("opportunity_type")
        if opp_type not in OPPORTUNITY_TYPES:
            raise LexiconError(f"{where}: unknown opportunity_type {opp_type!r}")
        suggestion = item.get("suggestion")
        if not isinstance(suggestion, str) or not suggestion.strip():
            raise LexiconError(f"{where}: missing suggestion")
        rows.append((_pattern(item, where), opp_type, suggestion))
    return rows


def _suggestions(data: Dict[str, Any]) -> Dict[str, str]:
    suggestions = dict(CONFIDENCE_SUGGESTIONS)
    raw = data.get("confidence_suggestions") or {}
    if not isinstance(raw, dict):
        raise LexiconError("confidence_suggestions: expected a mapping of issue_type to text")
    for issue_type, text in raw.items():
        if issue_type not in ISSUE_TYPES:
            raise LexiconError(f"confidence_suggestions: unknown issue_type {issue_type!r}")
        if not isinstance(text, str) or not text.strip():
            raise LexiconError(f"confidence_suggestions.{issue_type}: expected text")
        suggestions[issue_type] = text
    return suggestions


def load_lexicon(path: str) -> Lexicon:
    """Build a Lexicon from a YAML file. Keys left out keep their built-in tables."""
    with open(path, 'r', encoding="utf-8") as f:
        data: Dict[str, Any] = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise LexiconError(f"{path}: expected a mapping at the top level")

    confidence = CONFIDENCE_PATTERNS
    if "confidence_patterns" in data:
        confidence = _confidence_rows(data["confidence_patterns"] or [])

    opportunities = OPPORTUNITY_PATTERNS
    if "opportunity_patterns" in data:
        opportunities = _opportunity_rows(data["opportunity_patterns"] or [])

    return build_lexicon(
        positive_words=_words(data, "positive_words", POSITIVE_WORDS),
        negative_words=_words(data, "negative_words", NEGATIVE_WORDS),
        filler_words=_words(data, "filler_words", FILLER_WORDS),
        confidence_patterns=confidence,
        opportunity_patterns=opportunities,
        confidence_suggestions=_suggestions(data),
    )


def lexicon_from_env() -> Lexicon:
    """LEXICON_PATH when set, otherwise the built-in tables."""
    path = os.environ.get("LEXICON_PATH", "").strip()
    if not path:
        return DEFAULT_LEXICON
    return load_lexicon(path)
