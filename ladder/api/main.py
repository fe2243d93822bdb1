import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ladder.api.config import settings
from ladder.api.routers import calculator

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Ladder Calculator API",
    description="Staged leveraged entry plan and liquidation estimate",
    version="1.0.0"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:3001"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calculator.router, prefix=f"{settings.API_V1_PREFIX}/calculator", tags=["Calculator"])


@app.get("/health")
async def health():
    return {"status": "ok"}
