import logging
import os

import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from router import router
from models.db import init_db
from llm import is_ai_enabled

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

PORT = int(os.getenv("PORT", "3001"))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    init_db()
    if is_ai_enabled():
        logger.info("AI functionality enabled")
    else:
        logger.warning("OpenAI API key not configured. Set OPENAI_API_KEY to enable AI analysis.")
    yield

app = FastAPI(
    title="Konkurranseguiden",
    description="Competition extraction backend with AI analysis and heuristic fallback.",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(router, prefix="/api")
if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=PORT, reload=True)
