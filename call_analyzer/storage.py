import csv
import json
import os
from typing import Any, Dict

INDEX_HEADER = [
    "id", "call_id", "overall", "sentiment_value", "filler_words",
    "confidence_issues", "missed_opportunities", "transcript_chars",
]


def ensure_index(output_dir: str) -> str:
    os.makedirs(output_dir, exist_ok=True)
    index_csv = os.path.join(output_dir, "index.csv")
    if not os.path.exists(index_csv):
        with open(index_csv, "w", newline="", encoding="utf-8") as f:
            csv.writer(f).writerow(INDEX_HEADER)
    return index_csv


def persist(payload: Dict[str, Any], output_dir: str) -> str:
    """
    Write {output_dir}/{id}.json and append one row to index.csv.
    `payload` is the response body: {"id", "analysis", "record", "transcript_chars"}.
    Returns the JSON path.
    """
    index_csv = ensure_index(output_dir)
    json_path = os.path.join(output_dir, f"{payload['id']}.json")
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)

    analysis = payload["analysis"]
    record = payload["record"]
    with open(index_csv, "a", newline="", encoding="utf-8") as f:
        csv.writer(f).writerow([
            payload["id"],
            record.get("call_id") or "",
            analysis["overall"],
            record["sentiment_agent"],
            analysis["filler_words"]["total_count"],
            len(analysis["confidence_issues"]),
            len(analysis["missed_opportunities"]),
            payload.get("transcript_chars", 0),
        ])
    return json_path
