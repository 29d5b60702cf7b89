"""FastAPI web server for difficulty/target calculations"""

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse
import time
import logging

from ..consensus.targets import (
    difficulty_to_target,
    target_to_diff1,
    target_to_difficulty_estimate,
)
from ..errors import TargetConversionError
from ..utils.enc import escaped
from ..utils.units import format_hashrate

logger = logging.getLogger("WebAPI")

app = FastAPI(title="PoW Target Calculator")

# Default for the prefix query parameter (set on startup from Settings)
default_prefix = False


def set_default_prefix(add_prefix: bool):
    """Set the prefix used when a request does not specify one"""
    global default_prefix
    default_prefix = add_prefix


def _rejected(e: TargetConversionError) -> JSONResponse:
    logger.warning("Rejected %s: %s", type(e).__name__, escaped(str(e)))
    return JSONResponse(
        {"error": str(e), "kind": type(e).__name__}, status_code=400
    )


@app.get("/api/target")
async def get_target(
    difficulty: float = Query(..., description="Share or network difficulty"),
    prefix: bool | None = Query(None, description="Prepend 0x to the target"),
):
    """Convert a difficulty to its 64-digit hex target"""
    add_prefix = default_prefix if prefix is None else prefix
    try:
        target = difficulty_to_target(difficulty, add_prefix)
    except TargetConversionError as e:
        return _rejected(e)
    logger.debug("difficulty %s -> target %s", difficulty, target)
    return JSONResponse({"difficulty": difficulty, "target": target})


@app.get("/api/difficulty")
async def get_difficulty(target: str = Query(..., description="Hex target")):
    """Estimate the difficulty represented by a hex target"""
    try:
        estimate = target_to_difficulty_estimate(target)
        diff1 = target_to_diff1(target)
    except TargetConversionError as e:
        return _rejected(e)
    return JSONResponse({"target": target, "estimate": estimate, "diff1": diff1})


@app.get("/api/hashrate")
async def get_hashrate(
    rate: float = Query(..., ge=0, allow_inf_nan=False, description="Hashes per second"),
):
    """Format a raw hash rate for display"""
    return JSONResponse({"rate": rate, "display": format_hashrate(rate)})


@app.get("/api/health")
async def health_check():
    """Simple health check endpoint"""
    return JSONResponse({"status": "ok", "timestamp": int(time.time())})
