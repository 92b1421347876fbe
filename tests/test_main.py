import json

import pytest

from skill_analysis.main import run


POSTINGS = [
    {"id": "1", "company": "Acme", "title": "Content Designer", "region": "US", "seniority": "Senior",
     "full_text": "UX writing in Figma with generative AI tools."},
    {"id": "2", "company": "Globex", "title": "UX Writer", "region": "EU", "seniority": "Mid",
     "requirements": ["Style guide ownership"]},
]


def _setup(tmp_path, postings=POSTINGS, extra=""):
    input_path = tmp_path / "postings.json"
    input_path.write_text(json.dumps(postings), encoding="utf-8")
    output_path = tmp_path / "out" / "results.json"
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"input_path: {input_path}\noutput_path: {output_path}\n{extra}",
        encoding="utf-8",
    )
    return config_path, output_path


def test_run_writes_results(tmp_path, capsys):
    config_path, output_path = _setup(tmp_path)

    document = run(str(config_path))

    written = json.loads(output_path.read_text(encoding="utf-8"))
    assert written == document
    assert list(written) == ["metadata", "cluster_frequency", "by_region", "by_seniority", "ai_deep_dive", "per_posting"]
    assert written["metadata"]["total_postings"] == 2
    assert written["ai_deep_dive"]["total_with_ai"] == 1
    assert "CONTENT DESIGN SKILLS ANALYSIS" in capsys.readouterr().out


def test_run_without_report(tmp_path, capsys):
    config_path, output_path = _setup(tmp_path)

    run(str(config_path), print_report=False)

    assert output_path.exists()
    assert "CONTENT DESIGN SKILLS ANALYSIS" not in capsys.readouterr().out


def test_run_with_overrides_and_taxonomy_file(tmp_path):
    taxonomy_path = tmp_path / "taxonomy.yaml"
    taxonomy_path.write_text(
        "design:\n  label: Design\n  keywords:\n    - {term: figma, id: figma}\n"
        "ai:\n  label: AI\n  keywords:\n    - {term: generative ai, id: genai}\n",
        encoding="utf-8",
    )
    config_path, _ = _setup(
        tmp_path,
        extra=f"taxonomy_path: {taxonomy_path}\nai_cluster: ai\nreport:\n  enabled: false\n",
    )
    other_output = tmp_path / "elsewhere.json"

    document = run(str(config_path), output_path=str(other_output))

    assert other_output.exists()
    assert list(document["cluster_frequency"]) == ["design", "ai"]
    assert document["ai_deep_dive"]["specific_skills"] == {"genai": 1}


def test_malformed_input_writes_nothing(tmp_path):
    config_path, output_path = _setup(tmp_path, postings={"not": "a list"})

    with pytest.raises(ValueError):
        run(str(config_path))

    assert not output_path.exists()
