"""
Lead Scoring Engine - Main Orchestrator
=======================================
Orchestrates the four-stage pipeline:
  Stage 1: Job Title → Stage 2: Company →
  Stage 3: Score Composition → Stage 4: Insights

Key properties:
- Every stage is a pure function over read-only tables
- Batch processing fans out over a thread pool, keeps input order and
  isolates per-lead failures
"""

import logging
from typing import Optional, List, Dict, Any, Union
from datetime import datetime, timezone
from concurrent.futures import ThreadPoolExecutor, as_completed

from .models.schemas import (
    JobData,
    CompanyData,
    LeadAnalysis,
    BatchItemResult,
    BatchAnalysisResult,
)
from .config.settings import (
    API_CONFIG,
    SERVICE_NAME,
    SERVICE_VERSION,
    INDUSTRY_MULTIPLIERS,
)
from .stages.stage3_scoring import ScoringStage
from .stages.stage4_insights import InsightStage

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields: job and company data"
INVALID_LEADS_MESSAGE = "Leads must be an array"


class InvalidLeadError(ValueError):
    """Raised when a caller passes a lead without job or company data"""


class LeadScoringEngine:
    """
    Main Lead Scoring Engine that orchestrates all four stages.
    """

    def __init__(
        self,
        scoring_stage: Optional[ScoringStage] = None,
        insight_stage: Optional[InsightStage] = None,
        max_workers: Optional[int] = None,
    ):
        """
        Initialize the scoring engine.

        Args:
            scoring_stage: Stage 3 composer (wraps Stages 1 and 2)
            insight_stage: Stage 4 insight generator
            max_workers: Thread pool size for batch scoring
        """
        self.scoring_stage = scoring_stage or ScoringStage()
        self.insight_stage = insight_stage or InsightStage()
        self.max_workers = max_workers or API_CONFIG["batch_max_workers"]

    def analyze_lead(
        self,
        job: Union[JobData, Dict[str, Any], None],
        company: Union[CompanyData, Dict[str, Any], None],
    ) -> LeadAnalysis:
        """
        Score a single lead through the four-stage pipeline.

        Args:
            job: Job data (dict or JobData)
            company: Company data (dict or CompanyData)

        Returns:
            LeadAnalysis with score, both classifications, priority and insights

        Raises:
            InvalidLeadError: job or company is missing
            pydantic.ValidationError: job or company has the wrong shape
        """
        job_data = _coerce(job, JobData)
        company_data = _coerce(company, CompanyData)

        # =====================================================================
        # STAGES 1-3: Classification and Score Composition
        # =====================================================================
        scoring_result = self.scoring_stage.process(job_data, company_data)

        # =====================================================================
        # STAGE 4: Insights
        # =====================================================================
        insights = self.insight_stage.process(scoring_result)

        logger.debug(
            "Scored lead title=%r tier=%s total=%d priority=%s",
            job_data.title,
            scoring_result.company_analysis.tier.value,
            scoring_result.total_score,
            scoring_result.priority.value,
        )

        return LeadAnalysis(
            total_score=scoring_result.total_score,
            job_analysis=scoring_result.job_analysis,
            company_analysis=scoring_result.company_analysis,
            priority=scoring_result.priority,
            insights=insights,
        )

    def score_batch(self, leads: List[Any]) -> BatchAnalysisResult:
        """
        Score multiple leads independently.

        Each entry is a mapping with optional "id" plus "job" and "company".
        A failing entry is reported with success=False and does not affect
        the others. Results keep the input order.

        Raises:
            InvalidLeadError: leads is not a list
        """
        if not isinstance(leads, (list, tuple)):
            raise InvalidLeadError(INVALID_LEADS_MESSAGE)

        results: List[Optional[BatchItemResult]] = [None] * len(leads)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(self._score_entry, entry, index): index
                for index, entry in enumerate(leads)
            }
            for future in as_completed(futures):
                index = futures[future]
                results[index] = future.result()

        failed = sum(1 for r in results if not r.success)
        logger.info("Batch scored: %d processed, %d failed", len(results), failed)

        return BatchAnalysisResult(processed=len(results), results=results)

    def get_criteria(self) -> Dict[str, Any]:
        """Snapshot of the scoring tables for client-side introspection"""
        return {
            "jobTitleWeights": dict(self.scoring_stage.job_stage.title_weights),
            "departmentWeights": dict(self.scoring_stage.job_stage.department_weights),
            "companyTiers": {
                name: {
                    "weight": tier["weight"],
                    "employee_range": list(tier["employee_range"]),
                }
                for name, tier in self.scoring_stage.company_stage.tiers.items()
            },
            "industryMultipliers": dict(INDUSTRY_MULTIPLIERS),
        }

    def health_check(self) -> Dict[str, Any]:
        """Service health payload"""
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def _score_entry(self, entry: Any, index: int) -> BatchItemResult:
        """Score one batch entry, converting any failure into an error result"""
        lead_id = _entry_id(entry, index)
        try:
            if not isinstance(entry, dict):
                raise InvalidLeadError(MISSING_FIELDS_MESSAGE)
            analysis = self.analyze_lead(entry.get("job"), entry.get("company"))
        except Exception as e:
            logger.warning("Batch entry %r failed: %s", lead_id, e)
            return BatchItemResult(id=lead_id, success=False, error=str(e))

        return BatchItemResult(id=lead_id, success=True, analysis=analysis)


def _coerce(value, model):
    if value is None:
        raise InvalidLeadError(MISSING_FIELDS_MESSAGE)
    if isinstance(value, model):
        return value
    return model.model_validate(value)


def _entry_id(entry: Any, index: int) -> Union[int, str]:
    lead_id = entry.get("id") if isinstance(entry, dict) else None
    if lead_id is None:
        return index
    if isinstance(lead_id, (int, str)):
        return lead_id
    return str(lead_id)


# =============================================================================
# Convenience Functions
# =============================================================================

# Tables are read-only, so one engine can serve every caller and thread.
default_engine = LeadScoringEngine()


def analyze_lead(job, company) -> LeadAnalysis:
    """Score a single lead with the default engine"""
    return default_engine.analyze_lead(job, company)


def batch_analyze(leads: List[Any]) -> BatchAnalysisResult:
    """Score a batch of leads with the default engine"""
    return default_engine.score_batch(leads)


def get_criteria() -> Dict[str, Any]:
    return default_engine.get_criteria()


def health_check() -> Dict[str, Any]:
    return default_engine.health_check()
