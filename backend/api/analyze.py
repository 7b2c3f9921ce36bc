"""Text and URL analysis endpoints."""

from datetime import datetime, timezone
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from errors import InputError, UpstreamFetchError
from llm import is_ai_enabled
from models.schemas import AnalyzeRequest
from services.competition_service import analyze_text, analyze_url

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health")
def health():
    return {
        "status": "OK",
        "service": "Konkurranseguiden AI Backend - Text Analysis",
        "aiEnabled": is_ai_enabled(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post("/analyze")
async def analyze(request: AnalyzeRequest):
    """Dispatch on `action`: `analyzeText` mines the given text, `analyze` scrapes the URL."""
    overrides = request.manual_overrides.as_dict() if request.manual_overrides else {}
    try:
        if request.action == "analyzeText" and request.url and request.text:
            competition = await analyze_text(request.url, request.text, overrides)
            return {"success": True, "competition": competition}

        if request.action == "analyze" and request.url:
            competition = await analyze_url(request.url, overrides)
            return {"success": True, "competition": competition}

        return JSONResponse(status_code=400, content={"error": "Missing required parameters"})
    except InputError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except UpstreamFetchError as e:
        return JSONResponse(status_code=502, content={"success": False, "error": str(e)})
    except Exception as e:
        logger.error(f"Analysis error: {e}")
        return JSONResponse(status_code=500, content={"error": str(e) or "Analysis failed"})
