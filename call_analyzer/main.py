import os
import uuid
import asyncio
import logging
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from .analyzer import analyze
from .cache import get_cached, make_key, put_cached
from .lexicon import lexicon_fingerprint
from .lexicon_loader import lexicon_from_env
from .logger import configure_logging, timed
from .models import AnalysisResult, AnalyzeRequest
from .records import build_call_record
from .storage import persist
from .summary import FAILURE_SUMMARY

load_dotenv()
configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Call Analyzer")

lexicon = lexicon_from_env()
LEXICON_KEY = lexicon_fingerprint(lexicon)

OUTPUT_DIR = os.environ.get("OUTPUT_DIR", "outputs")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/analyze")
async def analyze_call(req: AnalyzeRequest):
    if req.text is None:
        return JSONResponse({"error": "Missing 'text' in request body."}, status_code=400)

    # Identical input gives an identical analysis, so reuse it from the digest cache
    key = make_key(req.text, req.rep_name, req.customer_name, req.duration_seconds, LEXICON_KEY)
    cached = get_cached(key)
    if cached is not None:
        result = AnalysisResult.model_validate(cached)
    else:
        with timed("Analysis"):
            loop = asyncio.get_running_loop()
            result = await loop.run_in_executor(
                None,
                lambda: analyze(req.text, req.rep_name, req.customer_name, req.duration_seconds, lexicon),
            )
        if result.summary != FAILURE_SUMMARY:
            put_cached(key, result.model_dump(mode="json"))

    payload = {
        "id": str(uuid.uuid4()),
        "analysis": result.model_dump(mode="json"),
        "record": build_call_record(result, req.call_id),
        "transcript_chars": len(req.text),
    }
    with timed("Persist"):
        persist(payload, OUTPUT_DIR)

    logger.info("Analysis completed id=%s call_id=%s overall=%s", payload["id"], req.call_id, result.overall)
    return JSONResponse(payload)
