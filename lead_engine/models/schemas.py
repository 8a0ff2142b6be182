"""
Pydantic schemas for the Lead Scoring Engine
"""

from enum import Enum
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================

class JobLevel(str, Enum):
    """Seniority bucket derived from the best job-title weight"""
    C_LEVEL = "c_level"
    DIRECTOR = "director"
    MANAGER = "manager"
    SPECIALIST = "specialist"
    INDIVIDUAL_CONTRIBUTOR = "individual_contributor"
    UNKNOWN = "unknown"


class CompanyTier(str, Enum):
    """Company size bracket"""
    STARTUP = "startup"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    ENTERPRISE = "enterprise"


class Priority(str, Enum):
    """Outreach priority derived from the total score"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    VERY_LOW = "very_low"


# =============================================================================
# INPUT SCHEMAS
# =============================================================================

class JobData(BaseModel):
    """Job information for a lead"""
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None


class CompanyData(BaseModel):
    """Employer information for a lead"""
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    employees: Optional[Union[int, float]] = None
    industry: Optional[str] = None
    location: Optional[str] = None


# =============================================================================
# STAGE RESULT SCHEMAS
# =============================================================================

class _FrozenResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class JobAnalysisResult(_FrozenResult):
    """Result from Stage 1: Job Title Classifier"""
    score: int = Field(0, ge=0, le=100)
    level: JobLevel = JobLevel.UNKNOWN
    department: str = "unknown"


class CompanyAnalysisResult(_FrozenResult):
    """Result from Stage 2: Company Classifier"""
    tier: CompanyTier
    weight: int
    employees: Optional[Union[int, float]] = None
    industry: str = "unknown"
    location: str = "unknown"


class ScoreResult(_FrozenResult):
    """Result from Stage 3: Score Composer"""
    total_score: int = Field(..., ge=0, le=100, alias="totalScore")
    job_analysis: JobAnalysisResult = Field(..., alias="jobAnalysis")
    company_analysis: CompanyAnalysisResult = Field(..., alias="companyAnalysis")
    priority: Priority


# =============================================================================
# UNIFIED OUTPUT SCHEMA
# =============================================================================

class LeadAnalysis(ScoreResult):
    """Complete lead analysis: composed score plus Stage 4 insights"""
    insights: List[str] = Field(default_factory=list)


# =============================================================================
# BATCH SCHEMAS
# =============================================================================

class BatchItemResult(_FrozenResult):
    """Outcome for one entry of a batch request"""
    id: Union[int, str, None]
    success: bool
    analysis: Optional[LeadAnalysis] = None
    error: Optional[str] = None


class BatchAnalysisResult(_FrozenResult):
    """Result from batch scoring"""
    processed: int
    results: List[BatchItemResult]


# =============================================================================
# API REQUEST SCHEMAS
# =============================================================================

class AnalyzeLeadRequest(BaseModel):
    """Request to analyze a single lead"""
    job: Optional[JobData] = None
    company: Optional[CompanyData] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "job": {"title": "Sales Director", "company": "StartupXYZ"},
                "company": {
                    "name": "StartupXYZ",
                    "employees": 25,
                    "industry": "SaaS",
                    "location": "Austin, TX",
                },
            }
        }
    )

