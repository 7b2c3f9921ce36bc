from fastapi import APIRouter

# Compose modular sub-routers
from api import analyze_router, competitions_router


router = APIRouter()

# main.py applies `/api` prefix
router.include_router(analyze_router)
router.include_router(competitions_router)
