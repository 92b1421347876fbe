# skill_analysis/matching.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List

from pydantic import ValidationError

from skill_analysis.models import ClusterMatch, Posting, PostingResult, SkillHit
from skill_analysis.taxonomy import Taxonomy, keyword_rules
from skill_analysis.utils import combined_text

logger = logging.getLogger(__name__)


# ----------------------------
# IO
# ----------------------------

def load_postings(path: str | Path) -> List[Posting]:
    """
    Read the postings document: a JSON array of posting objects.
    Anything else is rejected before analysis starts.
    """
    p = Path(path).expanduser().resolve()
    if not p.exists():
        raise FileNotFoundError(f"Postings file not found: {p}")

    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Postings file is not valid JSON: {p} ({e})") from e

    if not isinstance(data, list):
        raise ValueError(f"Postings must be a JSON array. Got: {type(data).__name__}")

    postings: List[Posting] = []
    for i, record in enumerate(data):
        if not isinstance(record, dict):
            raise ValueError(f"Posting #{i} must be an object. Got: {type(record).__name__}")
        try:
            postings.append(Posting.model_validate(record))
        except ValidationError as e:
            raise ValueError(f"Posting #{i} is malformed: {e}") from e

    logger.info("Loaded %d postings from %s", len(postings), p)
    return postings


# ----------------------------
# Keyword matching
# ----------------------------

def match_skills(text: str, taxonomy: Taxonomy) -> Dict[str, ClusterMatch]:
    """
    Case-insensitive substring match of every cluster's terms against text.
    The first term to hit a skill id is recorded; later terms for the same
    id are skipped, so match_count counts distinct skill ids.
    """
    lower_text = (text or "").lower()
    results: Dict[str, ClusterMatch] = {}

    for cluster_id, cluster in taxonomy.items():
        seen_ids = set()
        matched: List[SkillHit] = []

        for term, skill_id in keyword_rules(cluster):
            if skill_id in seen_ids:
                continue
            if term.lower() in lower_text:
                seen_ids.add(skill_id)
                matched.append(SkillHit(id=skill_id, matched_term=term))

        results[cluster_id] = ClusterMatch(
            label=cluster["label"],
            match_count=len(matched),
            matched=matched,
        )

    return results


def analyze_posting(posting: Posting, taxonomy: Taxonomy) -> PostingResult:
    skills = match_skills(combined_text(posting), taxonomy)
    logger.debug(
        "Posting %s: %s",
        posting.id,
        {cid: m.match_count for cid, m in skills.items()},
    )
    return PostingResult(
        id=posting.id,
        company=posting.company,
        title=posting.title,
        region=posting.region,
        seniority=posting.seniority,
        status=posting.status,
        skills=skills,
    )
