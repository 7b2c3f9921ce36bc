from fastapi import APIRouter
from fastapi.responses import JSONResponse
import logging

from errors import InputError, UpstreamFetchError
from models.schemas import CompetitionAnalyzeRequest
from services.competition_service import (
    analyze_and_store,
    list_competitions,
    remove_competition,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/competitions")
def get_competitions():
    try:
        return list_competitions()
    except Exception as e:
        logger.error(f"Failed to load competitions: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to load competitions"})


@router.post("/competitions/analyze")
async def analyze_competition(request: CompetitionAnalyzeRequest):
    """Analyze a competition (scraping the page when no text is given) and store it."""
    if not request.url:
        return JSONResponse(status_code=400, content={"error": "URL is required"})

    overrides = request.manual_overrides.as_dict() if request.manual_overrides else {}
    try:
        competition = await analyze_and_store(request.url, request.text, overrides)
        return {
            "success": True,
            "competition": competition,
            "message": "Competition analyzed and added",
        }
    except InputError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except UpstreamFetchError as e:
        return JSONResponse(status_code=502, content={"error": str(e)})
    except Exception as e:
        logger.error(f"Analysis error: {e}")
        return JSONResponse(status_code=500, content={"error": str(e) or "Failed to analyze competition"})


@router.delete("/competitions/{competition_id}")
def delete_competition(competition_id: int):
    try:
        if not remove_competition(competition_id):
            return JSONResponse(status_code=404, content={"error": "Competition not found"})
        return {"success": True, "message": "Competition deleted"}
    except Exception as e:
        logger.error(f"Failed to delete competition {competition_id}: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to delete competition"})
