"""LLM-backed route handlers: validation, upstream failures, pass-through."""

import pytest

from backend.dashboard.errors import LLMError


# (path, proxy function, valid body, invalid body, 400 message, 500 message)
ROUTES = [
    (
        "/api/grammar-fix", "check_grammar",
        {"text": "The cat is happy."}, {"text": ""},
        "Invalid request. Text is required.", "Failed to check grammar",
    ),
    (
        "/api/story-analyzer", "analyze_story",
        {"text": "Once upon a time."}, {},
        "Invalid request. Text is required.", "Failed to analyze story",
    ),
    (
        "/api/thesis-builder", "generate_thesis",
        {"topic": "School uniforms", "essayType": "argumentative"}, {"topic": "", "essayType": "analytical"},
        "Invalid request. Topic and essayType are required.", "Failed to generate thesis",
    ),
    (
        "/api/literature-analysis", "analyze_literature",
        {"text": "It was the best of times.", "analysisTypes": ["themes"]}, {"text": "It was", "analysisTypes": []},
        "Text and at least one analysis type are required", "Failed to analyze literature",
    ),
    (
        "/api/paraphrase", "paraphrase_text",
        {"text": "Plants need light.", "style": "simplified"}, {"text": "Plants need light."},
        "Text and style are required", "Failed to paraphrase text",
    ),
    (
        "/api/essay-grader", "grade_essay",
        {"essay": "In the novel..."}, {"prompt": "Discuss the ending."},
        "Invalid request. Essay text is required.", "Failed to grade essay",
    ),
    (
        "/api/poem-analysis", "analyze_poem",
        {"poem": "Whose woods these are I think I know."}, {"title": "Untitled"},
        "Invalid request. Poem text is required.", "Failed to analyze poem",
    ),
    (
        "/api/prose-practice", "generate_prose_questions",
        {"passage": "The house stood empty."}, {"passage": ""},
        "Invalid request. Passage text is required.", "Failed to generate practice questions",
    ),
]

IDS = [r[0] for r in ROUTES]


@pytest.mark.parametrize("path,func,valid,invalid,msg400,msg500", ROUTES, ids=IDS)
def test_missing_field_returns_400_without_upstream_call(client, upstream, path, func, valid, invalid, msg400, msg500):
    calls = upstream(func, {"unused": True})
    resp = client.post(path, json=invalid)
    assert resp.status_code == 400
    assert resp.json() == {"error": msg400}
    assert calls == []


@pytest.mark.parametrize("path,func,valid,invalid,msg400,msg500", ROUTES, ids=IDS)
def test_upstream_failure_returns_500(client, upstream, path, func, valid, invalid, msg400, msg500):
    calls = upstream(func, LLMError(msg500))
    resp = client.post(path, json=valid)
    assert resp.status_code == 500
    assert resp.json() == {"error": msg500}
    assert len(calls) == 1
    # the app keeps serving after the failure
    assert client.get("/health").status_code == 200


@pytest.mark.parametrize("path,func,valid,invalid,msg400,msg500", ROUTES, ids=IDS)
def test_unexpected_upstream_exception_returns_500(client, upstream, path, func, valid, invalid, msg400, msg500):
    upstream(func, RuntimeError("connection reset"))
    resp = client.post(path, json=valid)
    assert resp.status_code == 500
    assert resp.json() == {"error": msg500}


@pytest.mark.parametrize("path,func,valid,invalid,msg400,msg500", ROUTES, ids=IDS)
def test_mock_mode_skips_upstream(client, upstream, mock_mode, path, func, valid, invalid, msg400, msg500):
    calls = upstream(func, LLMError("should not be called"))
    resp = client.post(path, json=valid)
    assert resp.status_code == 200
    assert resp.json()
    assert calls == []


@pytest.mark.parametrize("path", IDS)
def test_non_object_body_is_rejected(client, path):
    resp = client.post(path, json=["not", "an", "object"])
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_thesis_builder_empty_topic_example(client, upstream):
    calls = upstream("generate_thesis", "unused")
    resp = client.post("/api/thesis-builder", json={"topic": "", "essayType": "analytical"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid request. Topic and essayType are required."}
    assert calls == []


def test_thesis_builder_wraps_result_and_fills_defaults(client, upstream):
    calls = upstream("generate_thesis", "Uniforms limit self-expression.")
    resp = client.post("/api/thesis-builder", json={"topic": "School uniforms", "essayType": "argumentative"})
    assert resp.status_code == 200
    assert resp.json() == {"thesis": "Uniforms limit self-expression."}
    args, _ = calls[0]
    assert args == ("argumentative", "School uniforms", "", [])


def test_grammar_fix_passes_result_through_unchanged(client, upstream):
    result = {"errorCount": 0, "errors": [], "correctedText": "The cat is happy."}
    calls = upstream("check_grammar", result)
    resp = client.post("/api/grammar-fix", json={"text": "The cat is happy."})
    assert resp.status_code == 200
    assert resp.json() == result
    assert calls[0][0] == ("The cat is happy.",)


def test_grammar_fix_rejects_non_string_text(client, upstream):
    calls = upstream("check_grammar", {})
    resp = client.post("/api/grammar-fix", json={"text": 42})
    assert resp.status_code == 400
    assert calls == []


def test_paraphrase_applies_option_defaults(client, upstream):
    calls = upstream("paraphrase_text", {"paraphrasedText": "Light is needed by plants."})
    resp = client.post("/api/paraphrase", json={"text": "Plants need light.", "style": "formal", "sourceTitle": "Botany"})
    assert resp.status_code == 200
    _, kwargs = calls[0]
    assert kwargs["style"] == "formal"
    assert kwargs["complexity"] == 7
    assert kwargs["length_preference"] == "similar"
    assert kwargs["keep_structure"] is True
    assert kwargs["vocabulary_level"] == "advanced"
    assert kwargs["source_title"] == "Botany"
    assert kwargs["source_author"] is None


def test_literature_analysis_forwards_types(client, upstream):
    calls = upstream("analyze_literature", {"overallInsights": {}})
    client.post(
        "/api/literature-analysis",
        json={"text": "Call me Ishmael.", "title": "Moby-Dick", "analysisTypes": ["symbolism", "narrative"]},
    )
    args, kwargs = calls[0]
    assert args == ("Call me Ishmael.", ["symbolism", "narrative"])
    assert kwargs == {"title": "Moby-Dick", "author": None}


def test_essay_grader_default_essay_type(client, upstream):
    calls = upstream("grade_essay", {"score": 5})
    resp = client.post("/api/essay-grader", json={"essay": "In the novel..."})
    assert resp.json() == {"score": 5}
    assert calls[0][1]["essay_type"] == "Literary Analysis"


def test_mock_literature_analysis_only_includes_requested_sections(client, mock_mode):
    data = client.post(
        "/api/literature-analysis",
        json={"text": "Call me Ishmael.", "analysisTypes": ["themes", "literary-devices"]},
    ).json()
    assert set(data) == {"overallInsights", "themes", "literaryDevices"}


def test_mock_thesis_uses_reasons(client, mock_mode):
    data = client.post(
        "/api/thesis-builder",
        json={"topic": "Homework", "essayType": "argumentative", "stance": "Homework should be limited",
              "reasons": ["sleep matters", "", "family time"]},
    ).json()
    assert data["thesis"] == "Homework should be limited because sleep matters and family time."


def test_grammar_common_errors_reference(client):
    data = client.get("/api/grammar-fix/common-errors").json()
    assert [e["type"] for e in data] == [
        "Run-on sentence", "Subject-verb agreement", "Comma splice", "Pronoun reference",
    ]
