from call_analyzer.segments import build_segments
from call_analyzer.utils import split_sentences

TEXT = "One two three four. Five six seven eight nine ten! Eleven twelve?"


def test_split_sentences_drops_empty_fragments():
    assert split_sentences("Hello...  ! ?  World") == ["Hello", "World"]
    assert split_sentences("  ") == []


def test_timing_from_speaking_rate():
    segs = build_segments(TEXT, 12)
    assert [(s.start_time, s.end_time) for s in segs] == [(0.0, 4.0), (4.0, 10.0), (10.0, 12.0)]
    assert [s.text for s in segs] == ["One two three four", "Five six seven eight nine ten", "Eleven twelve"]


def test_speakers_alternate():
    segs = build_segments(TEXT, 12, rep_name="Sam", customer_name="Jo")
    assert [s.speaker for s in segs] == ["Sam", "Jo", "Sam"]
    segs = build_segments(TEXT, 12)
    assert [s.speaker for s in segs] == ["Sales Rep", "Customer", "Sales Rep"]


def test_sentence_sentiment():
    segs = build_segments("That is great news. No, that is a problem. Okay then.", 30)
    assert [s.sentiment for s in segs] == ["positive", "negative", "neutral"]


def test_zero_duration_gives_zero_length_segments():
    segs = build_segments(TEXT, 0)
    assert len(segs) == 3
    assert all(s.start_time == 0 and s.end_time == 0 for s in segs)
