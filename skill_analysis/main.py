# skill_analysis/main.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from skill_analysis.aggregation import analyze_postings
from skill_analysis.config import load_config
from skill_analysis.logging_config import configure_logging
from skill_analysis.matching import load_postings
from skill_analysis.report import format_report
from skill_analysis.taxonomy import SKILL_TAXONOMY, load_taxonomy

REPO_ROOT = Path(__file__).resolve().parents[1]

logger = logging.getLogger(__name__)


def _resolve(path: str) -> Path:
    # relative paths are taken from the repo root; absolute ones win the join
    return (REPO_ROOT / Path(path).expanduser()).resolve()


def _write_results(document: Dict[str, Any], out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Wrote results for %d postings → %s", document["metadata"]["total_postings"], out_path)


def run(
    config_path: str = "config/config.yaml",
    input_path: Optional[str] = None,
    output_path: Optional[str] = None,
    print_report: Optional[bool] = None,
) -> Dict[str, Any]:
    config_file = _resolve(config_path)
    cfg = load_config(str(config_file))
    configure_logging(cfg.logging.level)
    logger.info("Using config file: %s", config_file)

    if cfg.taxonomy_path:
        taxonomy_file = _resolve(cfg.taxonomy_path)
        logger.info("Using taxonomy file: %s", taxonomy_file)
        taxonomy = load_taxonomy(taxonomy_file)
    else:
        taxonomy = SKILL_TAXONOMY

    postings = load_postings(_resolve(input_path or cfg.input_path))
    if not postings:
        logger.warning("No postings found; all percentages will be 0")

    document = analyze_postings(postings, taxonomy, ai_cluster=cfg.ai_cluster).to_dict()

    _write_results(document, _resolve(output_path or cfg.output_path))

    show = cfg.report.enabled if print_report is None else print_report
    if show:
        print(format_report(document, top_n=cfg.report.top_skills))

    return document


if __name__ == "__main__":
    run()
