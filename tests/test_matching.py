import json

import pytest

from skill_analysis.matching import analyze_posting, load_postings, match_skills
from skill_analysis.models import Posting
from skill_analysis.taxonomy import SKILL_TAXONOMY
from skill_analysis.utils import combined_text


SCENARIO = Posting(
    id="1",
    company="Acme",
    title="Senior Content Designer",
    region="US",
    seniority="Senior",
    full_text=(
        "We need someone skilled in UX writing, microcopy, and prompt engineering, "
        "who can partner with engineers using Figma."
    ),
)


def _ids(match):
    return [m.id for m in match.matched]


def test_combined_text_order_and_missing_fields():
    posting = Posting(
        title="Writer",
        full_text="Intro",
        responsibilities=["r1", "r2"],
        nice_to_have=["n1"],
    )
    assert combined_text(posting) == "Intro Writer r1 r2 n1"
    assert combined_text(Posting()) == " "


def test_combined_text_does_not_mutate_posting():
    posting = Posting(full_text="a", requirements=["b"])
    before = posting.model_dump()
    combined_text(posting)
    assert posting.model_dump() == before


def test_scenario_posting():
    result = analyze_posting(SCENARIO, SKILL_TAXONOMY)
    skills = result.skills

    assert skills["writing_craft"].match_count >= 2
    assert {"ux_writing", "microcopy"} <= set(_ids(skills["writing_craft"]))

    assert skills["ai_skills"].match_count >= 1
    assert "prompt_engineering" in _ids(skills["ai_skills"])

    assert "figma" in _ids(skills["tools"])

    collab = skills["collaboration"]
    assert {"collaboration", "work_with_engineering"} <= set(_ids(collab))
    hits = {m.id: m.matched_term for m in collab.matched}
    assert hits["collaboration"] == "partner with"
    assert hits["work_with_engineering"] == "engineer"

    assert result.company == "Acme"
    assert result.region == "US"


def test_match_count_equals_distinct_skill_ids():
    text = "Own voice and tone, tone of voice, voice & tone and brand voice."
    match = match_skills(text, SKILL_TAXONOMY)["writing_craft"]

    assert _ids(match) == ["voice_tone", "brand_voice"]
    assert match.match_count == len(match.matched) == 2
    # first declared phrase wins for a skill id
    assert match.matched[0].matched_term == "voice and tone"


def test_no_duplicate_skill_ids_in_any_cluster():
    text = "accessibility accessible inclusive design inclusivity inclusive localisation localization"
    for match in match_skills(text, SKILL_TAXONOMY).values():
        ids = _ids(match)
        assert len(ids) == len(set(ids)) == match.match_count


def test_matching_is_case_insensitive():
    upper = match_skills("Design in FIGMA", SKILL_TAXONOMY)["tools"]
    lower = match_skills("design in figma", SKILL_TAXONOMY)["tools"]
    assert upper == lower
    assert _ids(upper) == ["figma"]
    assert upper.matched[0].matched_term == "Figma"


def test_substring_matching_has_no_word_boundaries():
    # "data" inside "metadata" still counts
    match = match_skills("Maintain metadata", SKILL_TAXONOMY)["research_data"]
    assert "data_informed" in _ids(match)


def test_space_padded_ai_phrase():
    assert match_skills("Send an email today", SKILL_TAXONOMY)["ai_skills"].match_count == 0
    assert _ids(match_skills("Comfortable with AI every day", SKILL_TAXONOMY)["ai_skills"]) == ["ai_general"]


def test_empty_text_matches_nothing():
    matches = match_skills("", SKILL_TAXONOMY)
    assert list(matches) == list(SKILL_TAXONOMY)
    assert all(m.match_count == 0 and m.matched == [] for m in matches.values())


def test_clusters_are_independent():
    taxonomy = {
        "a": {"label": "A", "keywords": [("figma", "shared")]},
        "b": {"label": "B", "keywords": [("sketch", "shared")]},
    }
    matches = match_skills("figma and sketch", taxonomy)
    assert _ids(matches["a"]) == ["shared"]
    assert _ids(matches["b"]) == ["shared"]
    assert matches["b"].matched[0].matched_term == "sketch"


def test_load_postings(tmp_path):
    path = tmp_path / "postings.json"
    path.write_text(json.dumps([{"id": 7, "title": "Writer", "extra": "ignored"}]), encoding="utf-8")

    postings = load_postings(path)

    assert len(postings) == 1
    assert postings[0].id == 7
    assert postings[0].responsibilities is None


@pytest.mark.parametrize(
    "payload",
    [
        '{"id": "1"}',
        "not json",
        '["just a string"]',
        '[{"title": ["not", "a", "string"]}]',
    ],
)
def test_load_postings_rejects_malformed_documents(tmp_path, payload):
    path = tmp_path / "postings.json"
    path.write_text(payload, encoding="utf-8")
    with pytest.raises(ValueError):
        load_postings(path)


def test_load_postings_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_postings(tmp_path / "missing.json")
