"""
Lead Scoring Engine
===================
Deterministic B2B lead prioritization in four stages:
  Stage 1: Job Title Classification (level, department, weight)
  Stage 2: Company Classification (size tier)
  Stage 3: Score Composition (multipliers, cap, priority)
  Stage 4: Insight Generation (rule list)
"""

__version__ = "1.0.0"
__author__ = "Lead Scoring Team"
