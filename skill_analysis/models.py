from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Posting(BaseModel):
    """
    One job posting as found in the input document.
    Every field is optional; unknown keys are ignored.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: Optional[Union[str, int]] = None
    company: Optional[str] = None
    title: Optional[str] = None
    region: Optional[str] = None
    seniority: Optional[str] = None
    status: Optional[str] = None

    full_text: Optional[str] = None
    responsibilities: Optional[List[str]] = None
    requirements: Optional[List[str]] = None
    nice_to_have: Optional[List[str]] = None


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


class SkillHit(_Result):
    id: str
    matched_term: str


class ClusterMatch(_Result):
    label: str
    match_count: int
    matched: List[SkillHit] = Field(default_factory=list)

    def skill_ids(self) -> List[str]:
        return [m.id for m in self.matched]


class PostingResult(_Result):
    id: Optional[Union[str, int]] = None
    company: Optional[str] = None
    title: Optional[str] = None
    region: Optional[str] = None
    seniority: Optional[str] = None
    status: Optional[str] = None
    skills: Dict[str, ClusterMatch]


class ClusterFrequency(_Result):
    label: str
    posting_count: int
    percentage: int
    top_skills: Dict[str, int]


class ClusterShare(_Result):
    count: int
    percentage: int


class GroupBreakdown(_Result):
    count: int
    clusters: Dict[str, ClusterShare]


class AICompany(_Result):
    company: Optional[str] = None
    title: Optional[str] = None
    ai_skills_found: List[str]


class AIDeepDive(_Result):
    total_with_ai: int
    percentage: int
    companies: List[AICompany]
    specific_skills: Dict[str, int]


class Metadata(_Result):
    total_postings: int
    date_analyzed: str
    regions: List[str]
    seniority_levels: List[str]
    companies: List[str]


class AnalysisResult(_Result):
    metadata: Metadata
    cluster_frequency: Dict[str, ClusterFrequency]
    by_region: Dict[str, GroupBreakdown]
    by_seniority: Dict[str, GroupBreakdown]
    ai_deep_dive: AIDeepDive
    per_posting: List[PostingResult]

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
