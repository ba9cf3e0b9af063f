from __future__ import annotations

import math
import random
import uuid
from collections import OrderedDict
from typing import Dict, List, Literal, Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from ..errors import ToolError


router = APIRouter(prefix="/english/literary-terms", tags=["literary_terms"])


Category = Literal["figure-of-speech", "literary-element", "poetic-device", "narrative"]


class FlashCard(BaseModel):
    term: str
    definition: str
    example: str
    category: Category


FLASHCARDS: List[FlashCard] = [
    FlashCard(term="Simile", definition="A comparison between two unlike things using 'like' or 'as'",
              example="Her eyes twinkled like stars in the night sky.", category="figure-of-speech"),
    FlashCard(term="Metaphor", definition="A direct comparison between two unlike things without using 'like' or 'as'",
              example="Time is money. The classroom was a zoo.", category="figure-of-speech"),
    FlashCard(term="Personification", definition="Giving human qualities to non-human objects or abstract ideas",
              example="The wind whispered through the trees. Opportunity knocked on his door.", category="figure-of-speech"),
    FlashCard(term="Alliteration", definition="Repetition of the same consonant sounds at the beginning of words",
              example="Peter Piper picked a peck of pickled peppers.", category="poetic-device"),
    FlashCard(term="Onomatopoeia", definition="Words that imitate the sound they represent",
              example="Buzz, hiss, splash, boom", category="poetic-device"),
    FlashCard(term="Hyperbole", definition="Exaggeration used for emphasis or effect",
              example="I'm so hungry I could eat a horse. I've told you a million times.", category="figure-of-speech"),
    FlashCard(term="Imagery", definition="Language that appeals to the senses (sight, sound, taste, touch, smell)",
              example="The rusty metal gate creaked loudly as the wind pushed it open.", category="literary-element"),
    FlashCard(term="Symbolism", definition="Using an object, person, place, or event to represent something else",
              example="A dove represents peace. The color red can symbolize anger or love.", category="literary-element"),
    FlashCard(term="Theme", definition="The central or underlying message of a literary work",
              example="Themes in 'Romeo and Juliet' include love, fate, and family rivalry.", category="literary-element"),
    FlashCard(term="Protagonist", definition="The main character or lead figure in a story or play",
              example="Harry Potter is the protagonist of the Harry Potter series.", category="narrative"),
    FlashCard(term="Antagonist", definition="The character or force that opposes the protagonist",
              example="Lord Voldemort is the antagonist who opposes Harry Potter.", category="narrative"),
    FlashCard(term="Foreshadowing", definition="Hints or clues about events that will happen later in the story",
              example="Dark clouds gathering might foreshadow a coming conflict.", category="narrative"),
    FlashCard(term="Irony", definition="A contrast between expectation and reality",
              example="A fire station burning down. A traffic cop getting a speeding ticket.", category="literary-element"),
    FlashCard(term="Allusion", definition="A reference to another work of literature, person, or event",
              example="Calling someone a 'Romeo' alludes to Shakespeare's romantic character.", category="literary-element"),
    FlashCard(term="Rhyme", definition="Repetition of similar sounds at the end of words",
              example="Jack and Jill went up the hill.", category="poetic-device"),
    FlashCard(term="Meter", definition="The rhythmic pattern of stressed and unstressed syllables in poetry",
              example="Shall I comPARE thee TO a SUMmer's DAY? (iambic pentameter)", category="poetic-device"),
]

CATEGORIES: List[Dict[str, str]] = [
    {"id": "all", "label": "All Terms"},
    {"id": "figure-of-speech", "label": "Figures of Speech"},
    {"id": "literary-element", "label": "Literary Elements"},
    {"id": "poetic-device", "label": "Poetic Devices"},
    {"id": "narrative", "label": "Narrative Elements"},
]

DISTRACTOR_COUNT = 3


def filter_cards(category: str = "all") -> List[FlashCard]:
    if category == "all":
        return list(FLASHCARDS)
    if category not in {c["id"] for c in CATEGORIES}:
        raise ToolError(400, f"Unknown category: {category}")
    return [card for card in FLASHCARDS if card.category == category]


def quiz_options(card: FlashCard, rng: random.Random) -> List[str]:
    """The card's definition plus up to three definitions from other cards, shuffled."""
    others = [c.definition for c in FLASHCARDS if c.term != card.term]
    rng.shuffle(others)
    options = [card.definition] + others[:DISTRACTOR_COUNT]
    rng.shuffle(options)
    return options


class QuizSession:
    def __init__(self, category: str = "all", *, shuffle: bool = True, seed: Optional[int] = None) -> None:
        self.session_id: str = uuid.uuid4().hex
        self.category = category
        self.shuffle = shuffle
        self._rng = random.Random(seed)
        self.cards: List[FlashCard] = filter_cards(category)
        if not self.cards:
            raise ToolError(400, f"No terms in category: {category}")
        self.current_index: int = 0
        self.answers: Dict[int, bool] = {}
        self._options: Dict[int, List[str]] = {}
        if shuffle:
            self._rng.shuffle(self.cards)

    @property
    def score(self) -> int:
        return sum(1 for ok in self.answers.values() if ok)

    @property
    def completed(self) -> bool:
        return len(self.answers) == len(self.cards)

    def options_for(self, index: int) -> List[str]:
        if index not in self._options:
            self._options[index] = quiz_options(self.cards[index], self._rng)
        return self._options[index]

    def record_answer(self, definition: str) -> bool:
        if self.completed:
            raise ToolError(409, "Quiz already completed")
        index = self.current_index
        if index in self.answers:
            raise ToolError(409, "Question already answered")
        correct = definition == self.cards[index].definition
        self.answers[index] = correct
        if index < len(self.cards) - 1:
            self.current_index = index + 1
        return correct

    def reset(self) -> None:
        self.answers = {}
        self._options = {}
        self.current_index = 0
        if self.shuffle:
            self._rng.shuffle(self.cards)

    def question(self) -> Optional[Dict[str, object]]:
        if self.completed:
            return None
        return {
            "index": self.current_index,
            "term": self.cards[self.current_index].term,
            "options": self.options_for(self.current_index),
        }

    def summary(self) -> Dict[str, object]:
        answered = len(self.answers)
        return {
            "session_id": self.session_id,
            "category": self.category,
            "score": self.score,
            "answered": answered,
            "total": len(self.cards),
            "completed": self.completed,
            "percentage": math.floor(self.score / answered * 100 + 0.5) if answered else 0,
            "question": self.question(),
        }


# Least recently used first; oldest sessions are dropped past MAX_SESSIONS.
MAX_SESSIONS = 1000
_sessions: OrderedDict[str, QuizSession] = OrderedDict()


def _store_session(session: QuizSession) -> None:
    _sessions[session.session_id] = session
    while len(_sessions) > MAX_SESSIONS:
        _sessions.popitem(last=False)


def _get_session(session_id: str) -> QuizSession:
    session = _sessions.get(session_id)
    if session is None:
        raise ToolError(404, "Quiz session not found")
    _sessions.move_to_end(session_id)
    return session


class StartQuizRequest(BaseModel):
    category: str = "all"
    shuffle: bool = True


class AnswerRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    definition: Optional[str] = None
    option_index: Optional[int] = Field(default=None, alias="optionIndex", ge=0)


@router.get("")
def list_terms(category: str = "all"):
    cards = filter_cards(category)
    return {
        "category": category,
        "cards": [card.model_dump() for card in cards],
        "categories": [
            {**c, "count": len(filter_cards(c["id"]))} for c in CATEGORIES
        ],
    }


@router.post("/quiz", status_code=201)
def start_quiz(req: StartQuizRequest):
    session = QuizSession(req.category, shuffle=req.shuffle)
    _store_session(session)
    return session.summary()


@router.get("/quiz/{session_id}")
def quiz_status(session_id: str):
    return _get_session(session_id).summary()


@router.post("/quiz/{session_id}/answer")
def answer_question(session_id: str, req: AnswerRequest):
    session = _get_session(session_id)
    if req.definition is None and req.option_index is None:
        raise ToolError(400, "Either definition or optionIndex is required")
    index = session.current_index
    if req.definition is not None:
        chosen = req.definition
    else:
        options = session.options_for(index)
        if req.option_index >= len(options):
            raise ToolError(400, "optionIndex is out of range")
        chosen = options[req.option_index]
    correct = session.record_answer(chosen)
    return {
        "correct": correct,
        "definition": session.cards[index].definition,
        **session.summary(),
    }


@router.post("/quiz/{session_id}/reset")
def reset_quiz(session_id: str):
    session = _get_session(session_id)
    session.reset()
    return session.summary()
