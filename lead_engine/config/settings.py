"""
Configuration settings for the Lead Scoring Engine
"""

from types import MappingProxyType
import os

# =============================================================================
# SERVICE CONFIGURATION
# =============================================================================

SERVICE_NAME = "Lead Scoring Engine"
SERVICE_VERSION = "1.0.0"

API_CONFIG = {
    "host": os.getenv("HOST", "0.0.0.0"),
    "port": int(os.getenv("PORT", "3000")),
    "frontend_url": os.getenv("FRONTEND_URL", "http://localhost:3000"),
    "environment": os.getenv("APP_ENV", "production"),  # development, production
    "log_level": os.getenv("LOG_LEVEL", "INFO"),
    "batch_max_workers": int(os.getenv("BATCH_MAX_WORKERS", "4")),
}

# =============================================================================
# JOB TITLE WEIGHTS
# =============================================================================

JOB_TITLE_WEIGHTS = MappingProxyType({
    "ceo": 100, "chief executive officer": 100,
    "cto": 95, "chief technology officer": 95,
    "cfo": 95, "chief financial officer": 95,
    "vp": 90, "vice president": 90,
    "director": 85, "senior director": 87,
    "manager": 70, "senior manager": 75,
    "lead": 65, "senior lead": 68,
    "specialist": 50, "senior specialist": 55,
    "analyst": 45, "senior analyst": 50,
    "coordinator": 40, "associate": 35,
    "assistant": 30, "intern": 20,
})

# (min_weight, level), checked top to bottom
JOB_LEVEL_MAPPING = (
    (90, "c_level"),
    (80, "director"),
    (65, "manager"),
    (45, "specialist"),
    (0, "individual_contributor"),
)

# =============================================================================
# DEPARTMENT WEIGHTS
# =============================================================================

# Declaration order matters: the first keyword found in a title wins.
DEPARTMENT_WEIGHTS = MappingProxyType({
    "sales": 95, "business development": 90,
    "marketing": 85, "product": 80,
    "engineering": 75, "technology": 75,
    "operations": 70, "finance": 65,
    "hr": 60, "human resources": 60,
    "legal": 55, "admin": 40,
})

# =============================================================================
# COMPANY TIERS
# =============================================================================

# Scanned in this order; None means no upper bound.
COMPANY_TIERS = MappingProxyType({
    "enterprise": MappingProxyType({"weight": 100, "employee_range": (1000, None)}),
    "large": MappingProxyType({"weight": 85, "employee_range": (250, 999)}),
    "medium": MappingProxyType({"weight": 70, "employee_range": (50, 249)}),
    "small": MappingProxyType({"weight": 55, "employee_range": (10, 49)}),
    "startup": MappingProxyType({"weight": 40, "employee_range": (1, 9)}),
})

DEFAULT_COMPANY_TIER = ("startup", 40)

# =============================================================================
# SCORE MODIFIERS
# =============================================================================

SALES_DEPARTMENTS = frozenset({"sales", "business development"})
SALES_DEPARTMENT_BONUS = 1.2

INDUSTRY_MULTIPLIERS = MappingProxyType({
    "technology": 1.1,
    "software": 1.1,
    "saas": 1.15,
    "finance": 1.05,
    "healthcare": 1.05,
    "manufacturing": 0.95,
    "retail": 0.9,
})

DEFAULT_INDUSTRY_MULTIPLIER = 1.0
MAX_SCORE = 100

# =============================================================================
# PRIORITY MAPPING
# =============================================================================

PRIORITY_MAPPING = (
    (80, "high"),
    (60, "medium"),
    (40, "low"),
)

DEFAULT_PRIORITY = "very_low"

# =============================================================================
# INSIGHT MESSAGES
# =============================================================================

INSIGHT_MESSAGES = MappingProxyType({
    "c_level": "High-value C-level executive - excellent decision-making authority",
    "sales_department": "Sales professional - likely understands value of sales tools",
    "enterprise": "Large enterprise - potential for high-value deal",
    "prime_prospect": "Prime prospect - should be prioritized for immediate outreach",
})

PRIME_PROSPECT_THRESHOLD = 80
