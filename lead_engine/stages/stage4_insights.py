"""
Stage 4: Insight Generation
===========================
Human-readable explanations of why a lead scored as it did.

Each insight is an independent rule: a predicate over the composed
ScoreResult and one fixed message. Rules are evaluated in order and every
rule that holds contributes its message, so zero or more insights can fire.
"""

from typing import Callable, List, NamedTuple, Optional, Sequence

from ..models.schemas import ScoreResult, JobLevel, CompanyTier
from ..config.settings import INSIGHT_MESSAGES, PRIME_PROSPECT_THRESHOLD


class InsightRule(NamedTuple):
    name: str
    applies: Callable[[ScoreResult], bool]
    message: str


DEFAULT_INSIGHT_RULES = (
    InsightRule(
        name="c_level",
        applies=lambda result: result.job_analysis.level == JobLevel.C_LEVEL,
        message=INSIGHT_MESSAGES["c_level"],
    ),
    # Only "sales", unlike the scoring bonus which also covers business development
    InsightRule(
        name="sales_department",
        applies=lambda result: result.job_analysis.department == "sales",
        message=INSIGHT_MESSAGES["sales_department"],
    ),
    InsightRule(
        name="enterprise",
        applies=lambda result: result.company_analysis.tier == CompanyTier.ENTERPRISE,
        message=INSIGHT_MESSAGES["enterprise"],
    ),
    InsightRule(
        name="prime_prospect",
        applies=lambda result: result.total_score >= PRIME_PROSPECT_THRESHOLD,
        message=INSIGHT_MESSAGES["prime_prospect"],
    ),
)


class InsightStage:
    """
    Stage 4: Derive insights from a composed score.
    """

    def __init__(self, rules: Optional[Sequence[InsightRule]] = None):
        self.rules = tuple(rules) if rules is not None else DEFAULT_INSIGHT_RULES

    def process(self, result: ScoreResult) -> List[str]:
        return [rule.message for rule in self.rules if rule.applies(result)]
