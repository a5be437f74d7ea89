from call_analyzer.models import ConfidenceIssue, FillerWordAnalysis, MissedOpportunity
from call_analyzer.summary import compose_summary, most_common_filler

NO_FILLERS = FillerWordAnalysis(total_count=0, by_word={}, frequency_per_minute=0.0)


def _issues(n):
    return [ConfidenceIssue(text="I think", issue_type="uncertainty", time=i * 10, suggestion="x") for i in range(n)]


def test_clean_neutral_call():
    assert compose_summary("neutral", NO_FILLERS, [], []) == (
        "The call maintained a neutral tone. The sales rep could work on bringing more enthusiasm "
        "to increase engagement. The sales rep spoke clearly with minimal filler words. "
        "The sales rep displayed good confidence throughout the call. "
        "The sales rep did well at identifying and addressing sales opportunities."
    )


def test_sentiment_clauses():
    pos = compose_summary("positive", NO_FILLERS, [], [], "Sam", "Jo")
    assert pos.startswith("Sam maintained a positive tone throughout the call. Jo appeared receptive")
    neg = compose_summary("negative", NO_FILLERS, [], [], "Sam", "Jo")
    assert neg.startswith("The call had a generally negative tone. Sam should work on")


def test_frequent_fillers_name_the_first_most_common():
    fw = FillerWordAnalysis(total_count=12, by_word={"um": 5, "like": 5, "so": 2}, frequency_per_minute=6.0)
    s = compose_summary("neutral", fw, [], [])
    assert "used filler words frequently (6.0 per minute)" in s
    assert most_common_filler(fw) == ("um", 5)
    assert 'The most common filler word was "um" (5 times).' in s


def test_filler_threshold_boundary():
    fw = FillerWordAnalysis(total_count=10, by_word={"um": 10}, frequency_per_minute=5.0)
    assert "used some filler words, but not excessively" in compose_summary("neutral", fw, [], [])


def test_confidence_thresholds():
    assert "There were 4 instances where" in compose_summary("neutral", NO_FILLERS, _issues(4), [])
    assert "showed a few moments of uncertainty" in compose_summary("neutral", NO_FILLERS, _issues(3), [])


def test_opportunity_example():
    opp = MissedOpportunity(
        text="What is the price",
        opportunity_type="value_proposition",
        time=0,
        suggestion="When Jo ask about price, always emphasize value before discussing cost.",
    )
    s = compose_summary("neutral", NO_FILLERS, [], [opp], "Sam", "Jo")
    assert s.endswith(
        "There were 1 missed opportunities to strengthen the sale. "
        "For example, Sam could have when jo ask about price, always emphasize value before discussing cost."
    )


def test_clause_order():
    s = compose_summary("neutral", NO_FILLERS, _issues(1), [])
    order = [s.index(p) for p in ("neutral tone", "spoke clearly", "few moments", "did well at")]
    assert order == sorted(order)
