# skill_analysis/report.py
from __future__ import annotations

from typing import Any, Dict, List

RULE = "═" * 60


def _bar(pct: int) -> str:
    return "█" * int(pct / 2 + 0.5)


def _group_section(groups: Dict[str, Any], labels: Dict[str, str]) -> List[str]:
    lines: List[str] = []
    for name, data in groups.items():
        lines.append(f"  {name} ({data['count']} postings):")
        for cluster_id, share in data["clusters"].items():
            label = labels.get(cluster_id, cluster_id)[:30]
            lines.append(f"    {label.ljust(32)} {share['percentage']}%")
        lines.append("")
    return lines


def format_report(document: Dict[str, Any], top_n: int = 5) -> str:
    """
    Render the console summary from a result document (AnalysisResult.to_dict()).
    Only the document is read; no taxonomy or posting lookups.
    """
    meta = document["metadata"]
    clusters = document["cluster_frequency"]
    ai = document["ai_deep_dive"]
    total = meta["total_postings"]
    labels = {cid: c["label"] for cid, c in clusters.items()}

    lines: List[str] = [
        "",
        RULE,
        "  CONTENT DESIGN SKILLS ANALYSIS — RESULTS",
        RULE,
        f"  Postings analyzed: {total}",
        f"  Regions: {', '.join(meta['regions'])}",
        f"  Companies: {len(meta['companies'])} unique",
        f"  Date: {meta['date_analyzed']}",
        RULE,
        "",
        "CLUSTER FREQUENCY (% of postings mentioning each cluster)",
        "",
    ]

    ranked = sorted(clusters.values(), key=lambda c: c["percentage"], reverse=True)
    for cluster in ranked:
        lines.append(f"  {cluster['label']}")
        lines.append(f"  {_bar(cluster['percentage'])} {cluster['percentage']}% ({cluster['posting_count']}/{total})")
        top = list(cluster["top_skills"].items())[:top_n]
        if top:
            lines.append("  Top: " + ", ".join(f"{k} ({v})" for k, v in top))
        lines.append("")

    lines += ["", "BY REGION", ""]
    lines += _group_section(document["by_region"], labels)

    lines += ["", "BY SENIORITY", ""]
    lines += _group_section(document["by_seniority"], labels)

    lines += [
        "",
        "AI DEEP DIVE",
        "",
        f"  Postings mentioning AI: {ai['total_with_ai']}/{total} ({ai['percentage']}%)",
        "",
        "  Specific AI skills found:",
    ]
    for skill, count in sorted(ai["specific_skills"].items(), key=lambda kv: kv[1], reverse=True):
        lines.append(f"    {skill.ljust(24)} {count} postings")

    lines += ["", "  Companies with AI mentions:"]
    for entry in ai["companies"]:
        lines.append(f"    {entry['company']} — {entry['title']}")
        lines.append(f"      Skills: {', '.join(entry['ai_skills_found'])}")

    lines += ["", RULE, "  END OF REPORT", RULE, ""]
    return "\n".join(lines)
