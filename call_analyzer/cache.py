import hashlib
import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = ".cache"


def cache_dir() -> str:
    # read per call so a .env loaded after import still applies
    return os.environ.get("RESULT_CACHE_DIR", DEFAULT_CACHE_DIR)


def _ensure_dir() -> str:
    path = cache_dir()
    os.makedirs(path, exist_ok=True)
    return path


def make_key(
    text: str,
    rep_name: Optional[str],
    customer_name: Optional[str],
    duration_seconds: Optional[float],
    lexicon_key: str = "",
) -> str:
    # analysis is deterministic, so the inputs fully identify the result
    payload = json.dumps([text, rep_name, customer_name, duration_seconds, lexicon_key or ""], ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def get_cached(key: str) -> Optional[Dict[str, Any]]:
    path = os.path.join(_ensure_dir(), f"{key}.json")
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable cache entry %s: %s", path, e)
        return None


def put_cached(key: str, obj: Dict[str, Any]) -> None:
    path = os.path.join(_ensure_dir(), f"{key}.json")
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(obj, f, ensure_ascii=False)
    except (OSError, ValueError) as e:
        logger.warning("Could not write cache entry %s: %s", path, e)
