"""
Stage 2: Company Classification
===============================
Buckets a company into a size tier by employee count. Industry and
location are passed through for the scoring stage.
"""

from typing import Mapping, Optional

from ..models.schemas import CompanyData, CompanyAnalysisResult, CompanyTier
from ..config.settings import COMPANY_TIERS, DEFAULT_COMPANY_TIER


class CompanyStage:
    """
    Stage 2: Classify a company into a size tier.
    """

    def __init__(self, tiers: Optional[Mapping[str, Mapping]] = None):
        self.tiers = COMPANY_TIERS if tiers is None else tiers

    def process(self, company: CompanyData) -> CompanyAnalysisResult:
        """
        Classify a company.

        Tiers are scanned in declared order and the first inclusive range
        holding the employee count wins. Missing, zero or negative counts
        fall back to the startup tier, as do fractional counts that fall
        between two ranges (9.5).
        """
        tier, weight = self._match_tier(company.employees)

        return CompanyAnalysisResult(
            tier=CompanyTier(tier),
            weight=weight,
            employees=company.employees,
            industry=company.industry or "unknown",
            location=company.location or "unknown",
        )

    def _match_tier(self, employees: Optional[float]):
        if employees is None:
            return DEFAULT_COMPANY_TIER

        for tier_name, tier_data in self.tiers.items():
            low, high = tier_data["employee_range"]
            if employees >= low and (high is None or employees <= high):
                return tier_name, tier_data["weight"]

        return DEFAULT_COMPANY_TIER
