# Scoring stages module
from .stage1_job_title import JobTitleStage
from .stage2_company import CompanyStage
from .stage3_scoring import ScoringStage, map_to_priority
from .stage4_insights import InsightStage, InsightRule, DEFAULT_INSIGHT_RULES
