import logging
from pathlib import Path
from fastapi import FastAPI
from fastapi import APIRouter
from dotenv import load_dotenv

# Load environment variables from .env file in project root
project_root = Path(__file__).resolve().parents[2]
env_path = project_root / '.env'
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

from .config import settings
from .shared.response_models import HealthCheckResponse, StatusEnum
from .domains.valuation.api.public_endpoints import router as public_valuation_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="API for estimating the per-share intrinsic value of a company with a two-stage DCF model.",
    version=settings.version
)

# Create a main API router to group all versioned endpoints
api_router = APIRouter()
api_router.include_router(public_valuation_router, prefix="/intrinsic-value", tags=["Intrinsic Value"])

app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/")
async def read_root():
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.version,
        "endpoints": {
            "intrinsic_value": f"POST {settings.api_prefix}/intrinsic-value/calculate - Two-stage DCF valuation",
            "health": "GET /health - Service health",
        },
        "documentation": "/docs - Swagger UI"
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health_check():
    return HealthCheckResponse(
        status=StatusEnum.SUCCESS,
        service_name=settings.app_name,
        version=settings.version,
    )

# To run this application (from the backend directory):
# uvicorn intrinsic_value.main:app --reload
