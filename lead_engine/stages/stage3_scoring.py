"""
Stage 3: Score Composition
==========================
Deterministic combination of the job and company classifications.

Steps:
- Base score from the job title weight
- Scaled by company tier weight
- Sales / business development bonus
- Industry multiplier
- Capped at 100, rounded half-up, bucketed into a priority
"""

import math
from typing import Optional

from ..models.schemas import (
    JobData,
    CompanyData,
    JobAnalysisResult,
    CompanyAnalysisResult,
    ScoreResult,
    Priority,
)
from ..config.settings import (
    SALES_DEPARTMENTS,
    SALES_DEPARTMENT_BONUS,
    INDUSTRY_MULTIPLIERS,
    DEFAULT_INDUSTRY_MULTIPLIER,
    MAX_SCORE,
    PRIORITY_MAPPING,
    DEFAULT_PRIORITY,
)
from .stage1_job_title import JobTitleStage
from .stage2_company import CompanyStage


def map_to_priority(score: float) -> Priority:
    """Bucket a score: >=80 high, >=60 medium, >=40 low, else very_low"""
    for min_score, priority in PRIORITY_MAPPING:
        if score >= min_score:
            return Priority(priority)
    return Priority(DEFAULT_PRIORITY)


def round_half_up(value: float) -> int:
    # round() would send 66.5 to 66
    return int(math.floor(value + 0.5))


class ScoringStage:
    """
    Stage 3: Compose the total lead score from both classifications.
    """

    def __init__(
        self,
        job_stage: Optional[JobTitleStage] = None,
        company_stage: Optional[CompanyStage] = None,
    ):
        self.job_stage = job_stage or JobTitleStage()
        self.company_stage = company_stage or CompanyStage()

    def process(self, job: JobData, company: CompanyData) -> ScoreResult:
        """
        Classify the raw job and company data and compose the score.

        Args:
            job: Raw job data (title)
            company: Raw company data (employees, industry, location)

        Returns:
            ScoreResult with total score, both analyses and priority
        """
        job_analysis = self.job_stage.process(job.title)
        company_analysis = self.company_stage.process(company)

        scaled = self.calculate_scaled_score(job_analysis, company_analysis)
        total_score = round_half_up(min(scaled, MAX_SCORE))

        return ScoreResult(
            total_score=total_score,
            job_analysis=job_analysis,
            company_analysis=company_analysis,
            priority=map_to_priority(total_score),
        )

    @staticmethod
    def calculate_scaled_score(
        job_analysis: JobAnalysisResult,
        company_analysis: CompanyAnalysisResult,
    ) -> float:
        """Uncapped, unrounded score"""
        score = job_analysis.score * (company_analysis.weight / 100)

        if job_analysis.department in SALES_DEPARTMENTS:
            score *= SALES_DEPARTMENT_BONUS

        industry_key = company_analysis.industry.lower()
        score *= INDUSTRY_MULTIPLIERS.get(industry_key, DEFAULT_INDUSTRY_MULTIPLIER)

        return score
