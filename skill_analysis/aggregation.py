# skill_analysis/aggregation.py
from __future__ import annotations

import logging
import math
from collections import Counter
from datetime import date
from typing import Dict, List, Optional, Sequence

from skill_analysis.matching import analyze_posting
from skill_analysis.models import (
    AICompany,
    AIDeepDive,
    AnalysisResult,
    ClusterFrequency,
    ClusterShare,
    GroupBreakdown,
    Metadata,
    Posting,
    PostingResult,
)
from skill_analysis.taxonomy import AI_CLUSTER, Taxonomy
from skill_analysis.utils import unique_in_order

logger = logging.getLogger(__name__)

# Group name for postings without a region/seniority value.
UNSPECIFIED = "unspecified"


def percentage(count: int, total: int) -> int:
    """Whole-number percentage, rounding .5 up. Zero total gives 0."""
    if total <= 0:
        return 0
    return int(math.floor(count / total * 100 + 0.5))


def _group_value(value: Optional[str]) -> str:
    return UNSPECIFIED if value is None else value


def _skill_counts(results: Sequence[PostingResult], cluster_id: str) -> Counter:
    # one count per posting per skill id, in first-encountered order
    counts: Counter = Counter()
    for r in results:
        counts.update(r.skills[cluster_id].skill_ids())
    return counts


def _cluster_shares(results: Sequence[PostingResult], taxonomy: Taxonomy) -> Dict[str, ClusterShare]:
    total = len(results)
    shares: Dict[str, ClusterShare] = {}
    for cluster_id in taxonomy:
        count = sum(1 for r in results if r.skills[cluster_id].match_count > 0)
        shares[cluster_id] = ClusterShare(count=count, percentage=percentage(count, total))
    return shares


# ----------------------------
# Reducers
# ----------------------------

def cluster_frequency(results: Sequence[PostingResult], taxonomy: Taxonomy) -> Dict[str, ClusterFrequency]:
    """
    How many postings mention each cluster, plus per-skill posting counts
    sorted by count (ties keep first-encountered order).
    """
    out: Dict[str, ClusterFrequency] = {}
    shares = _cluster_shares(results, taxonomy)

    for cluster_id, cluster in taxonomy.items():
        # most_common sorts stably, so equal counts keep insertion order
        top_skills = dict(_skill_counts(results, cluster_id).most_common())
        out[cluster_id] = ClusterFrequency(
            label=cluster["label"],
            posting_count=shares[cluster_id].count,
            percentage=shares[cluster_id].percentage,
            top_skills=top_skills,
        )
    return out


def group_breakdown(
    results: Sequence[PostingResult],
    taxonomy: Taxonomy,
    field: str,
) -> Dict[str, GroupBreakdown]:
    """
    Partition postings by the literal value of `field` (region, seniority)
    and compute cluster shares against each group's own size.
    """
    groups: Dict[str, List[PostingResult]] = {}
    for r in results:
        groups.setdefault(_group_value(getattr(r, field)), []).append(r)

    return {
        name: GroupBreakdown(count=len(members), clusters=_cluster_shares(members, taxonomy))
        for name, members in groups.items()
    }


def ai_deep_dive(results: Sequence[PostingResult], ai_cluster: str = AI_CLUSTER) -> AIDeepDive:
    with_ai = [r for r in results if r.skills[ai_cluster].match_count > 0]
    return AIDeepDive(
        total_with_ai=len(with_ai),
        percentage=percentage(len(with_ai), len(results)),
        companies=[
            AICompany(
                company=r.company,
                title=r.title,
                ai_skills_found=r.skills[ai_cluster].skill_ids(),
            )
            for r in with_ai
        ],
        specific_skills=dict(_skill_counts(with_ai, ai_cluster)),
    )


def build_metadata(postings: Sequence[Posting], today: Optional[date] = None) -> Metadata:
    return Metadata(
        total_postings=len(postings),
        date_analyzed=(today or date.today()).isoformat(),
        regions=unique_in_order(_group_value(p.region) for p in postings),
        seniority_levels=unique_in_order(_group_value(p.seniority) for p in postings),
        companies=unique_in_order(p.company for p in postings if p.company is not None),
    )


# ----------------------------
# Pipeline
# ----------------------------

def analyze_postings(
    postings: Sequence[Posting],
    taxonomy: Taxonomy,
    ai_cluster: str = AI_CLUSTER,
    today: Optional[date] = None,
) -> AnalysisResult:
    if ai_cluster not in taxonomy:
        raise ValueError(f"AI cluster '{ai_cluster}' is not defined in the taxonomy")

    results = [analyze_posting(p, taxonomy) for p in postings]
    logger.info("Matched %d postings against %d clusters", len(results), len(taxonomy))

    return AnalysisResult(
        metadata=build_metadata(postings, today),
        cluster_frequency=cluster_frequency(results, taxonomy),
        by_region=group_breakdown(results, taxonomy, "region"),
        by_seniority=group_breakdown(results, taxonomy, "seniority"),
        ai_deep_dive=ai_deep_dive(results, ai_cluster),
        per_posting=results,
    )
