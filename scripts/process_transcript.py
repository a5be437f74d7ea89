import os
import sys
import json
from dotenv import load_dotenv

from call_analyzer.analyzer import analyze
from call_analyzer.lexicon_loader import lexicon_from_env
from call_analyzer.logger import configure_logging
from call_analyzer.records import build_call_record
from call_analyzer.storage import persist
from call_analyzer.utils import format_mmss


def read_transcript(path):
    """
    .json files may carry text, rep_name, customer_name and duration_seconds;
    anything else is read as plain transcript text.
    """
    with open(path, "r", encoding="utf-8") as f:
        if path.lower().endswith(".json"):
            data = json.load(f)
            return (
                data.get("text", ""),
                data.get("rep_name"),
                data.get("customer_name"),
                data.get("duration_seconds"),
            )
        return f.read(), None, None, None


def main(paths):
    load_dotenv()
    configure_logging()
    lexicon = lexicon_from_env()
    output_dir = os.environ.get("OUTPUT_DIR", "outputs")

    for p in paths:
        if not os.path.exists(p):
            print(f"File not found: {p}")
            continue

        text, rep_name, customer_name, duration = read_transcript(p)
        result = analyze(text, rep_name, customer_name, duration, lexicon)

        base = os.path.splitext(os.path.basename(p))[0]
        outj = persist({
            "id": base,
            "analysis": result.model_dump(mode="json"),
            "record": build_call_record(result, base),
            "transcript_chars": len(text),
        }, output_dir)

        length = result.segments[-1].end_time if result.segments else 0
        print(
            f"Done: {outj} | Sentiment: {result.overall} | Length: {format_mmss(length)} | "
            f"Fillers: {result.filler_words.total_count} | Issues: {len(result.confidence_issues)} | "
            f"Missed: {len(result.missed_opportunities)}"
        )


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/process_transcript.py <file1.txt|file1.json> [file2 ...]")
        sys.exit(1)
    main(sys.argv[1:])
