"""
Stage 1: Job Title Classification
=================================
Maps a free-text job title to a seniority level, a department and a
numeric weight using keyword tables.

Matching:
- Lowercase substring match ("lead" matches "leadership", "vp" matches "svp")
- A hit lying entirely inside a longer matched keyword of the same table
  is ignored ("cto" inside "director")
- Best weight wins for the level; first department keyword wins
"""

from typing import Iterable, Mapping, Optional, Set

from ..models.schemas import JobAnalysisResult, JobLevel
from ..config.settings import (
    JOB_TITLE_WEIGHTS,
    JOB_LEVEL_MAPPING,
    DEPARTMENT_WEIGHTS,
)


def _occurrences(text: str, keyword: str):
    """All (start, end) spans of keyword in text, overlapping included"""
    spans = []
    start = text.find(keyword)
    while start != -1:
        spans.append((start, start + len(keyword)))
        start = text.find(keyword, start + 1)
    return spans


def find_keywords(text: str, keywords: Iterable[str]) -> Set[str]:
    """
    Keywords contained in text, minus those whose every occurrence lies
    inside an occurrence of a longer keyword that also matched.
    """
    spans = {}
    for keyword in keywords:
        found = _occurrences(text, keyword)
        if found:
            spans[keyword] = found

    matched = set()
    for keyword, own_spans in spans.items():
        for start, end in own_spans:
            covered = any(
                len(other) > len(keyword)
                and any(o_start <= start and end <= o_end for o_start, o_end in other_spans)
                for other, other_spans in spans.items()
            )
            if not covered:
                matched.add(keyword)
                break
    return matched


class JobTitleStage:
    """
    Stage 1: Classify a job title into level, department and score.
    """

    def __init__(
        self,
        title_weights: Optional[Mapping[str, int]] = None,
        department_weights: Optional[Mapping[str, int]] = None,
    ):
        self.title_weights = JOB_TITLE_WEIGHTS if title_weights is None else title_weights
        self.department_weights = (
            DEPARTMENT_WEIGHTS if department_weights is None else department_weights
        )

    def process(self, title: Optional[str]) -> JobAnalysisResult:
        """
        Classify a job title.

        Args:
            title: Free-text job title, may be None or empty

        Returns:
            JobAnalysisResult; UNKNOWN level for a missing title,
            INDIVIDUAL_CONTRIBUTOR for a title with no known keyword
        """
        if not title:
            return JobAnalysisResult()

        normalized = title.lower()
        matched = find_keywords(normalized, self.title_weights)
        best_score = max((self.title_weights[k] for k in matched), default=0)

        return JobAnalysisResult(
            score=best_score,
            level=self._map_to_level(best_score),
            department=self._find_department(normalized),
        )

    def _find_department(self, normalized_title: str) -> str:
        """First department keyword in table order wins"""
        matched = find_keywords(normalized_title, self.department_weights)
        for department in self.department_weights:
            if department in matched:
                return department
        return "unknown"

    @staticmethod
    def _map_to_level(score: int) -> JobLevel:
        for min_score, level in JOB_LEVEL_MAPPING:
            if score >= min_score:
                return JobLevel(level)
        return JobLevel.INDIVIDUAL_CONTRIBUTOR
