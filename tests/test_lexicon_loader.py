from pathlib import Path

import pytest

from call_analyzer import analyze
from call_analyzer.lexicon import CONFIDENCE_SUGGESTIONS, DEFAULT_LEXICON, lexicon_fingerprint
from call_analyzer.lexicon_loader import LexiconError, lexicon_from_env, load_lexicon

LEXICON_YML = Path(__file__).resolve().parent.parent / "config" / "lexicon.yml"


def _rows(rules):
    return [(r.matcher.pattern, r.tag, r.suggestion) for r in rules]


def test_shipped_file_matches_builtin_tables():
    lex = load_lexicon(str(LEXICON_YML))
    assert lex.positive_words == DEFAULT_LEXICON.positive_words
    assert lex.negative_words == DEFAULT_LEXICON.negative_words
    assert lex.filler_words == DEFAULT_LEXICON.filler_words
    assert _rows(lex.confidence_rules) == _rows(DEFAULT_LEXICON.confidence_rules)
    assert _rows(lex.opportunity_rules) == _rows(DEFAULT_LEXICON.opportunity_rules)


def test_partial_override(tmp_path):
    p = tmp_path / "lex.yml"
    p.write_text("positive_words: [stellar, Superb]\n", encoding="utf-8")
    lex = load_lexicon(str(p))
    assert lex.positive_words == frozenset({"stellar", "superb"})
    assert lex.negative_words == DEFAULT_LEXICON.negative_words
    assert analyze("stellar superb great", lexicon=lex).overall == "positive"


@pytest.mark.parametrize("body", [
    "confidence_patterns:\n  - pattern: 'hmm'\n    issue_type: doubt\n",
    "confidence_patterns:\n  - pattern: '('\n    issue_type: uncertainty\n",
    "opportunity_patterns:\n  - pattern: 'budget'\n    opportunity_type: upsell\n",
    "filler_words: um\n",
    "negative_words: [no, not, bad]\n",
    "confidence_patterns:\n  - 'I think'\n",
    "confidence_patterns:\n  - pattern: ''\n    issue_type: uncertainty\n",
    "confidence_suggestions: [be direct]\n",
])
def test_bad_lexicon_raises(tmp_path, body):
    p = tmp_path / "lex.yml"
    p.write_text(body, encoding="utf-8")
    with pytest.raises(LexiconError):
        load_lexicon(str(p))


def test_lexicon_from_env(monkeypatch):
    monkeypatch.delenv("LEXICON_PATH", raising=False)
    assert lexicon_from_env() is DEFAULT_LEXICON
    monkeypatch.setenv("LEXICON_PATH", str(LEXICON_YML))
    assert lexicon_from_env().filler_words == DEFAULT_LEXICON.filler_words


def test_quoted_yes_no_stay_words(tmp_path):
    p = tmp_path / "lex.yml"
    p.write_text("negative_words: ['no', not, bad]\n", encoding="utf-8")
    assert load_lexicon(str(p)).negative_words == frozenset({"no", "not", "bad"})


def test_shipped_file_fingerprint():
    assert lexicon_fingerprint(load_lexicon(str(LEXICON_YML))) == lexicon_fingerprint(DEFAULT_LEXICON)


def test_suggestion_override(tmp_path):
    p = tmp_path / "lex.yml"
    p.write_text("confidence_suggestions:\n  hesitation: Pause instead of hedging.\n", encoding="utf-8")
    lex = load_lexicon(str(p))
    by_tag = {r.tag: r.suggestion for r in lex.confidence_rules}
    assert by_tag["hesitation"] == "Pause instead of hedging."
    assert by_tag["uncertainty"] == CONFIDENCE_SUGGESTIONS["uncertainty"]
    for rule in DEFAULT_LEXICON.confidence_rules:
        assert rule.suggestion == CONFIDENCE_SUGGESTIONS[rule.tag]
