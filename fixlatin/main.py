import base64
import hashlib
import logging

from charset_normalizer import from_bytes
from fastapi import FastAPI, UploadFile, File, HTTPException, Request

from .config import Config
from .fix import InvalidOptionError, check_options, fix_latin_report
from .models import FixResponse, HealthResponse
from .rules import TARGET_ENCODING

logging.getLogger("fixlatin").setLevel(Config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="fix-latin",
    description="Best-effort repair of mixed ASCII/UTF-8/Latin-1/CP1252 input to UTF-8",
    version="0.1.0",
)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _detect(raw: bytes):
    # Informational only; the repair itself never depends on it.
    match = from_bytes(raw).best()
    return match.encoding if match is not None else None


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/fix", response_model=FixResponse)
async def fix_upload(request: Request, file: UploadFile = File(...)):
    options = dict(request.query_params)
    try:
        check_options(options)
    except InvalidOptionError as e:
        logger.warning("rejected /fix request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    bytes_only = options.get("bytes_only", "").lower() in _TRUE_VALUES

    raw = await file.read()
    if len(raw) > Config.MAX_CONTENT_LENGTH:
        logger.warning("rejected /fix upload of %d bytes", len(raw))
        raise HTTPException(status_code=413, detail="Upload too large")

    fixed, report = fix_latin_report(raw)
    report["detected"] = _detect(raw)

    return {
        "fixed": {
            "sha256": hashlib.sha256(fixed).hexdigest(),
            "encoding": TARGET_ENCODING,
            "content_b64": base64.b64encode(fixed).decode("ascii"),
        },
        # JSON cannot carry the escaped bytes of out-of-range sequences
        "text": None if bytes_only else fixed.decode(TARGET_ENCODING, errors="replace"),
        "report": report,
    }
