# skill_analysis/taxonomy.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError

# Each cluster maps keyword phrases to skill ids. Matching is a
# case-insensitive substring check, so short phrases that would hit inside
# other words are padded with spaces (see " AI ").
Taxonomy = Dict[str, Dict[str, Any]]

AI_CLUSTER = "ai_skills"

SKILL_TAXONOMY: Taxonomy = {
    "writing_craft": {
        "label": "Writing Craft & UX Fundamentals",
        "keywords": [
            ("clear, concise", "clarity"),
            ("microcopy", "microcopy"),
            ("UX copy", "ux_copy"),
            ("UX writing", "ux_writing"),
            ("in-product language", "in_product_language"),
            ("in-product copy", "in_product_copy"),
            ("interface copy", "interface_copy"),
            ("product flows", "product_flows"),
            ("voice and tone", "voice_tone"),
            ("voice & tone", "voice_tone"),
            ("tone of voice", "voice_tone"),
            ("brand voice", "brand_voice"),
            ("product naming", "product_naming"),
            ("nomenclature", "nomenclature"),
            ("taxonomy", "taxonomy"),
            ("editing", "editing"),
            ("proofreading", "proofreading"),
            ("onboarding", "onboarding_copy"),
            ("error message", "error_messages"),
            ("empty state", "empty_states"),
            ("notification", "notifications"),
            ("email", "email_copy"),
            ("end-to-end", "end_to_end"),
            ("user journey", "user_journey"),
            ("customer journey", "user_journey"),
            ("writing sample", "writing_samples"),
            ("portfolio", "portfolio"),
            ("storytelling", "storytelling"),
        ],
    },
    "systems_thinking": {
        "label": "Systems Thinking & Content Systems",
        "keywords": [
            ("systems thinking", "systems_thinking"),
            ("thinks in systems", "systems_thinking"),
            ("content system", "content_systems"),
            ("content design system", "content_systems"),
            ("design system", "design_systems"),
            ("content framework", "content_frameworks"),
            ("content pattern", "content_patterns"),
            ("reusable content", "content_patterns"),
            ("style guide", "style_guides"),
            ("content guidelines", "content_guidelines"),
            ("information architecture", "information_architecture"),
            ("content model", "content_modeling"),
            ("content structure", "content_structure"),
            ("content governance", "content_governance"),
            ("content audit", "content_audit"),
            ("scalable", "scalability"),
            ("at scale", "scalability"),
            ("content strategy", "content_strategy"),
            ("content standards", "content_standards"),
        ],
    },
    "collaboration": {
        "label": "Cross-Functional Collaboration & Stakeholder Influence",
        "keywords": [
            ("cross-functional", "cross_functional"),
            ("product manager", "work_with_pm"),
            ("product designer", "work_with_design"),
            ("engineer", "work_with_engineering"),
            ("researcher", "work_with_research"),
            ("marketing", "work_with_marketing"),
            ("stakeholder", "stakeholder_mgmt"),
            ("influence", "influence"),
            ("present work", "presenting"),
            ("present to", "presenting"),
            ("presenting", "presenting"),
            ("collaborate", "collaboration"),
            ("partner with", "collaboration"),
            ("partner closely", "collaboration"),
            ("agile", "agile"),
            ("sprint", "agile"),
        ],
    },
    "research_data": {
        "label": "Research, Data & Measurement",
        "keywords": [
            ("A/B test", "ab_testing"),
            ("experimentation", "experimentation"),
            ("content experiment", "experimentation"),
            ("user research", "user_research"),
            ("usability", "usability_testing"),
            ("data", "data_informed"),
            ("KPI", "kpis"),
            ("metric", "metrics"),
            ("measure", "measurement"),
            ("impact", "impact_oriented"),
            ("quantitative", "quantitative"),
            ("qualitative", "qualitative"),
            ("insight", "insights"),
            ("analytics", "analytics"),
        ],
    },
    "accessibility_inclusion": {
        "label": "Accessibility, Inclusion & Localization",
        "keywords": [
            ("accessibility", "accessibility"),
            ("accessible", "accessibility"),
            ("WCAG", "wcag"),
            ("Section 508", "section_508"),
            ("inclusive design", "inclusive_design"),
            ("inclusivity", "inclusive_design"),
            ("inclusive", "inclusive_design"),
            ("localization", "localization"),
            ("localisation", "localization"),
            ("multi-language", "multilingual"),
            ("multi-market", "multi_market"),
            ("global audience", "global_audience"),
            ("worldwide", "global_audience"),
            ("diverse user", "diverse_users"),
        ],
    },
    "ai_skills": {
        "label": "AI Skills & AI Product Experience",
        "keywords": [
            ("AI tool", "ai_tools"),
            ("AI fluency", "ai_fluency"),
            ("AI writing", "ai_writing"),
            ("AI-powered", "ai_powered"),
            ("AI capabilities", "ai_capabilities"),
            (" AI ", "ai_general"),
            ("artificial intelligence", "ai_general"),
            ("LLM", "llm"),
            ("Large Language Model", "llm"),
            ("generative AI", "genai"),
            ("GenAI", "genai"),
            ("prompt engineering", "prompt_engineering"),
            ("prompt", "prompts"),
            ("Claude", "claude"),
            ("ChatGPT", "chatgpt"),
            ("Gemini app", "gemini"),
            ("machine learning", "ml"),
            ("conversation design", "conversation_design"),
            ("conversational UI", "conversational_ui"),
            ("conversational user interface", "conversational_ui"),
            ("chatbot", "chatbot"),
            ("voice-driven", "voice_ui"),
            ("voice assistant", "voice_ui"),
        ],
    },
    "tools": {
        "label": "Tools & Technical Skills",
        "keywords": [
            ("Figma", "figma"),
            ("Sketch", "sketch"),
            ("InVision", "invision"),
            ("Contentful", "contentful"),
            ("CMS", "cms"),
            ("content management system", "cms"),
            ("prototype", "prototyping"),
            ("prototyping", "prototyping"),
            ("code", "code_literacy"),
            ("codebase", "code_literacy"),
            ("GitHub", "github"),
            ("Markdown", "markdown"),
            ("SEO", "seo"),
            ("Ditto", "ditto"),
            ("Frontitude", "frontitude"),
        ],
    },
}


# ----------------------------
# YAML taxonomy files
# ----------------------------

class KeywordRule(BaseModel):
    # terms keep their surrounding whitespace
    term: str = Field(min_length=1)
    id: str = Field(min_length=1)


class ClusterDef(BaseModel):
    label: str = Field(min_length=1)
    keywords: List[KeywordRule] = Field(min_length=1)


def cluster_labels(taxonomy: Taxonomy) -> Dict[str, str]:
    return {cid: cluster["label"] for cid, cluster in taxonomy.items()}


def keyword_rules(cluster: Dict[str, Any]) -> List[Tuple[str, str]]:
    return [(term, skill_id) for term, skill_id in cluster.get("keywords", [])]


def load_taxonomy(path: str | Path) -> Taxonomy:
    """
    Load a taxonomy from YAML:

        cluster_id:
          label: "Display label"
          keywords:
            - {term: "UX writing", id: ux_writing}

    Returns the same plain-data shape as SKILL_TAXONOMY, clusters and
    keywords in file order.
    """
    p = Path(path).expanduser().resolve()
    if not p.exists():
        raise FileNotFoundError(f"Taxonomy not found: {p}")

    raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    if not isinstance(raw, dict) or not raw:
        raise ValueError(f"Taxonomy must be a non-empty YAML mapping: {p}")

    taxonomy: Taxonomy = {}
    for cluster_id, body in raw.items():
        try:
            cluster = ClusterDef.model_validate(body)
        except ValidationError as e:
            raise ValueError(f"Invalid cluster '{cluster_id}' in {p}: {e}") from e
        taxonomy[str(cluster_id)] = {
            "label": cluster.label,
            "keywords": [(rule.term, rule.id) for rule in cluster.keywords],
        }
    return taxonomy
