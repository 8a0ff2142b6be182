"""
FastAPI Endpoints for the Lead Scoring Engine
=============================================
JSON API around the deterministic scoring engine.

Base URL: http://localhost:3000

Endpoints:
- GET  /                          - API info
- GET  /api/health                - Health check
- POST /api/analyze-lead          - Score a single lead
- POST /api/batch-analyze         - Score multiple leads
- GET  /api/analysis-criteria     - Scoring tables
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, Body, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from ..config.settings import API_CONFIG, SERVICE_NAME, SERVICE_VERSION
from ..config.logging_config import setup_logging
from ..models.schemas import AnalyzeLeadRequest, BatchItemResult, LeadAnalysis
from ..engine import LeadScoringEngine, InvalidLeadError

setup_logging()
logger = logging.getLogger(__name__)


# =============================================================================
# FastAPI App Initialization
# =============================================================================

app = FastAPI(
    title="Lead Scoring Engine API",
    description="""
## B2B Lead Prioritization

Scores sales leads from a job title and company profile.

### Features:
- **Job Title Analysis**: seniority level and department
- **Company Analysis**: size tier with industry modifiers
- **Priority & Insights**: high / medium / low / very_low plus explanations
- **Batch Processing**: per-lead error isolation
    """,
    version=SERVICE_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[API_CONFIG["frontend_url"]],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

engine = LeadScoringEngine()


# =============================================================================
# Health & Info Endpoints
# =============================================================================

@app.get("/", tags=["Info"])
async def root():
    """API information and available endpoints"""
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "Analyze Lead": "POST /api/analyze-lead",
            "Batch Analyze": "POST /api/batch-analyze",
            "Criteria": "GET /api/analysis-criteria",
            "Health": "GET /api/health",
        }
    }


@app.get("/api/health", tags=["Info"])
async def health_check():
    """Health check endpoint for monitoring"""
    return engine.health_check()


# =============================================================================
# Scoring Endpoints
# =============================================================================

@app.post("/api/analyze-lead", tags=["Scoring"])
async def analyze_lead(request: AnalyzeLeadRequest):
    """
    Score a single lead.

    Returns the total score, job and company analyses, priority and
    insights. Both `job` and `company` are required.
    """
    analysis = engine.analyze_lead(request.job, request.company)

    return {
        "success": True,
        "data": {
            **_serialize_analysis(analysis),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    }


@app.post("/api/batch-analyze", tags=["Scoring"])
async def batch_analyze(payload: Dict[str, Any] = Body(..., description="{leads: [...]}")):
    """
    Score multiple leads at once

    - Each lead is scored independently
    - A malformed lead yields an error entry instead of failing the batch
    - `id` defaults to the lead's position in the list
    """
    result = engine.score_batch(payload.get("leads"))

    return {
        "success": True,
        "processed": result.processed,
        "results": [_serialize_item(item) for item in result.results],
    }


@app.get("/api/analysis-criteria", tags=["Configuration"])
async def analysis_criteria():
    """Scoring tables used by the engine"""
    return {"success": True, "data": engine.get_criteria()}


# =============================================================================
# Helper Functions
# =============================================================================

def _serialize_analysis(analysis: LeadAnalysis) -> Dict[str, Any]:
    return analysis.model_dump(by_alias=True, mode="json")


def _serialize_item(item: BatchItemResult) -> Dict[str, Any]:
    body: Dict[str, Any] = {"id": item.id, "success": item.success}
    if item.success:
        body["analysis"] = _serialize_analysis(item.analysis)
    else:
        body["error"] = item.error
    return body


# =============================================================================
# Error Handlers
# =============================================================================

@app.exception_handler(InvalidLeadError)
async def invalid_lead_handler(request: Request, exc: InvalidLeadError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request payload",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={"error": "Endpoint not found"})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    development = API_CONFIG["environment"] == "development"
    return JSONResponse(
        status_code=500,
        content={
            "error": "Something went wrong!",
            "message": str(exc) if development else "Internal server error",
        },
    )
