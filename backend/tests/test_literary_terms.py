"""Literary terms flashcards and quiz sessions."""

import random

import pytest

from backend.dashboard.errors import ToolError
from backend.dashboard.routers.literary_terms import FLASHCARDS, QuizSession, filter_cards, quiz_options


def test_list_terms_counts_per_category(client):
    data = client.get("/english/literary-terms").json()
    assert len(data["cards"]) == 16
    counts = {c["id"]: c["count"] for c in data["categories"]}
    assert counts == {
        "all": 16,
        "figure-of-speech": 4,
        "literary-element": 5,
        "poetic-device": 4,
        "narrative": 3,
    }


def test_list_terms_filtered(client):
    data = client.get("/english/literary-terms", params={"category": "narrative"}).json()
    assert [c["term"] for c in data["cards"]] == ["Protagonist", "Antagonist", "Foreshadowing"]


def test_unknown_category_is_rejected(client):
    resp = client.get("/english/literary-terms", params={"category": "drama"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Unknown category: drama"}


def test_quiz_options_contain_correct_definition_once():
    card = FLASHCARDS[0]
    options = quiz_options(card, random.Random(1))
    assert len(options) == 4
    assert options.count(card.definition) == 1
    assert len(set(options)) == 4


def test_matching_definition_records_correct():
    session = QuizSession("poetic-device", seed=7)
    card = session.cards[0]
    assert session.record_answer(card.definition) is True
    assert session.answers == {0: True}
    assert session.current_index == 1


def test_other_definition_records_incorrect():
    session = QuizSession("poetic-device", seed=7)
    card = session.cards[0]
    wrong = next(o for o in session.options_for(0) if o != card.definition)
    assert session.record_answer(wrong) is False
    assert session.answers == {0: False}
    assert session.score == 0


def test_quiz_completes_and_stays_on_last_card():
    session = QuizSession("narrative", shuffle=False)
    for card in session.cards:
        session.record_answer(card.definition)
    assert session.completed
    assert session.current_index == len(session.cards) - 1
    assert session.summary()["percentage"] == 100
    with pytest.raises(ToolError) as exc:
        session.record_answer(session.cards[-1].definition)
    assert exc.value.status_code == 409


@pytest.mark.parametrize("correct,expected", [(2, 13), (10, 63), (6, 38)])
def test_percentage_rounds_halves_up(correct, expected):
    session = QuizSession("all", shuffle=False)
    assert len(session.cards) == 16
    for i, card in enumerate(session.cards):
        session.record_answer(card.definition if i < correct else "not a definition")
    assert session.score == correct
    assert session.summary()["percentage"] == expected


def test_reset_restores_initial_state():
    session = QuizSession("all", seed=3)
    session.record_answer(session.cards[0].definition)
    session.record_answer("not a definition")
    session.reset()
    assert session.answers == {}
    assert session.current_index == 0
    assert session.score == 0
    assert not session.completed
    assert sorted(c.term for c in session.cards) == sorted(c.term for c in filter_cards("all"))


def test_quiz_flow_over_http(client):
    started = client.post("/english/literary-terms/quiz", json={"category": "narrative", "shuffle": False})
    assert started.status_code == 201
    quiz = started.json()
    session_id = quiz["session_id"]
    assert quiz["total"] == 3
    assert quiz["question"]["term"] == "Protagonist"

    right = client.post(
        f"/english/literary-terms/quiz/{session_id}/answer",
        json={"definition": "The main character or lead figure in a story or play"},
    ).json()
    assert right["correct"] is True
    assert right["score"] == 1
    assert right["question"]["term"] == "Antagonist"

    options = right["question"]["options"]
    wrong_index = next(i for i, o in enumerate(options) if o != "The character or force that opposes the protagonist")
    wrong = client.post(
        f"/english/literary-terms/quiz/{session_id}/answer", json={"optionIndex": wrong_index}
    ).json()
    assert wrong["correct"] is False
    assert wrong["answered"] == 2
    assert wrong["score"] == 1

    reset = client.post(f"/english/literary-terms/quiz/{session_id}/reset").json()
    assert reset["answered"] == 0
    assert reset["score"] == 0
    assert reset["completed"] is False
    assert reset["question"]["index"] == 0


def test_answer_requires_a_choice(client):
    session_id = client.post("/english/literary-terms/quiz", json={}).json()["session_id"]
    resp = client.post(f"/english/literary-terms/quiz/{session_id}/answer", json={})
    assert resp.status_code == 400


def test_unknown_quiz_session(client):
    resp = client.get("/english/literary-terms/quiz/missing")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Quiz session not found"}


def test_oldest_quiz_sessions_are_evicted(client, monkeypatch):
    from backend.dashboard.routers import literary_terms

    monkeypatch.setattr(literary_terms, "MAX_SESSIONS", 2)
    first = client.post("/english/literary-terms/quiz", json={}).json()["session_id"]
    second = client.post("/english/literary-terms/quiz", json={}).json()["session_id"]
    # touching the first session makes the second the least recently used
    assert client.get(f"/english/literary-terms/quiz/{first}").status_code == 200
    third = client.post("/english/literary-terms/quiz", json={}).json()["session_id"]

    assert len(literary_terms._sessions) == 2
    assert client.get(f"/english/literary-terms/quiz/{second}").status_code == 404
    assert client.get(f"/english/literary-terms/quiz/{first}").status_code == 200
    assert client.get(f"/english/literary-terms/quiz/{third}").status_code == 200
