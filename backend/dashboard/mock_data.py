"""Hand-authored example results returned when mock data mode is on."""
from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Sequence


def grammar_fix(text: str) -> Dict[str, Any]:
    return {
        "errorCount": 2,
        "errors": [
            {
                "type": "Subject-verb agreement",
                "position": "Sentence 1",
                "text": "The group of students were talking",
                "suggestion": "Use the singular verb 'was' with the collective noun 'group'.",
            },
            {
                "type": "Comma splice",
                "position": "Sentence 2",
                "text": "It was raining, we stayed inside.",
                "suggestion": "Join the clauses with 'so' or separate them with a semicolon.",
            },
        ],
        "correctedText": text,
    }


def story_analysis(text: str) -> Dict[str, Any]:
    return {
        "themes": {
            "primary": "Coming of age",
            "secondary": ["Identity", "Loss of innocence", "Belonging"],
            "explanation": "The narrator's choices trace a movement from dependence toward self-definition.",
        },
        "tone": {
            "primary": "Reflective",
            "secondary": ["Melancholic", "Hopeful"],
            "explanation": "Past-tense narration looks back on events with quiet regret and cautious optimism.",
        },
        "structure": {
            "type": "Linear with a framing flashback",
            "explanation": "The story opens in the present before returning to the summer that changed the narrator.",
        },
        "characters": {
            "main": ["The narrator"],
            "secondary": ["The grandmother", "The older brother"],
            "analysis": "Secondary characters act as mirrors for the narrator's shifting sense of self.",
        },
        "literary_devices": [
            {
                "name": "Symbolism",
                "example": "the locked garden gate",
                "explanation": "The gate stands for the boundary between childhood and adulthood.",
            },
            {
                "name": "Foreshadowing",
                "example": "clouds gathering over the lake",
                "explanation": "The weather hints at the conflict of the final scene.",
            },
        ],
    }


def thesis(essay_type: str, topic: str, stance: str, reasons: Sequence[str]) -> str:
    given = [r.strip() for r in reasons if r and r.strip()]
    main_point = stance.strip() or f"{topic} deserves careful examination"
    if essay_type == "expository":
        return f"{topic} can be understood through {', '.join(given) or 'its causes, features, and effects'}."
    if given:
        return f"{main_point} because {', '.join(given[:-1]) + (' and ' if len(given) > 1 else '') + given[-1]}."
    return f"{main_point}, as an analysis of {topic} reveals."


def literature_analysis(analysis_types: Sequence[str], title: Optional[str] = None, author: Optional[str] = None) -> Dict[str, Any]:
    work = title or "the text"
    result: Dict[str, Any] = {
        "overallInsights": {
            "summary": f"{work} examines how private ambition collides with public expectation.",
            "significance": "The work is often read as a study of unreliable self-perception.",
            "criticalPerspectives": "Feminist and Marxist readings both find rich material in its portrayal of power.",
        }
    }
    if "themes" in analysis_types:
        result["themes"] = {
            "primaryThemes": [
                {
                    "name": "Ambition",
                    "description": "Desire for status drives most of the central decisions.",
                    "evidence": ["The opening promise", "The broken engagement", "The final letter"],
                }
            ],
            "motifs": ["Mirrors", "Clocks", "Closed doors"],
        }
    if "symbolism" in analysis_types:
        result["symbolism"] = [
            {
                "symbol": "The green light",
                "meaning": "An unreachable future",
                "occurrences": ["Chapter 1", "Chapter 5", "Final chapter"],
            }
        ]
    if "character" in analysis_types:
        result["characters"] = [
            {
                "name": "The narrator",
                "analysis": "An observer who is more involved than he admits.",
                "traits": ["Reserved", "Judgmental", "Loyal"],
                "development": "Gradually revealed to be more fallible than initially presented",
                "relationships": "Torn between admiration for and disapproval of the protagonist.",
            }
        ]
    if "narrative" in analysis_types:
        result["narrative"] = {
            "structure": "Retrospective first-person account",
            "perspective": "First-person peripheral narrator",
            "techniques": ["Flashback", "Dramatic irony", "Framing"],
            "arc": "Rising fascination followed by disillusionment.",
        }
    if "literary-devices" in analysis_types:
        result["literaryDevices"] = [
            {"device": "Imagery", "examples": ["Color imagery", "Weather imagery", "Light and dark"]}
        ]
    return result


_ACADEMIC_SWAPS = {
    "shows": "demonstrates",
    "important": "significant",
    "use": "utilize",
    "help": "facilitate",
    "think": "postulate",
    "big": "substantial",
}

_STYLE_TEXT = {
    "academic": (
        "The research indicates that the phenomenon in question demonstrates significant implications for "
        "understanding the underlying mechanisms. Various scholars have postulated theoretical frameworks that "
        "encompass multifaceted dimensions of this complex subject matter."
    ),
    "simplified": (
        "Research shows that this topic has important effects that help us understand how it works. Many "
        "researchers have created theories about the different parts of this complicated subject."
    ),
    "formal": (
        "Evidence suggests that the aforementioned phenomenon exhibits considerable ramifications for "
        "comprehending the fundamental mechanisms. Numerous scholars have proposed theoretical constructs "
        "that incorporate multidimensional aspects of this intricate subject."
    ),
    "creative": (
        "This fascinating topic opens doors to understanding deeper workings, with thought leaders crafting "
        "innovative frameworks that capture its richness and complexity."
    ),
}


def paraphrase(text: str, style: str) -> Dict[str, Any]:
    paraphrased = _STYLE_TEXT.get(style, _STYLE_TEXT["academic"])
    original_words = text.split()
    new_words = paraphrased.split()
    swaps: List[Dict[str, str]] = [{k: v} for k, v in _ACADEMIC_SWAPS.items()]
    academic = sum(1 for w in new_words if re.sub(r"\W", "", w).lower() in _ACADEMIC_SWAPS.values())
    return {
        "paraphrasedText": paraphrased,
        "originalLength": len(original_words),
        "newLength": len(new_words),
        "readabilityScore": 45 if style in ("academic", "formal") else 70,
        "academicWordsCount": academic,
        "changedWordsPercentage": 85,
        "originalToNew": swaps,
    }


def essay_grade(essay: str) -> Dict[str, Any]:
    return {
        "score": 4,
        "overview": "A clear response with genuine analysis that would benefit from deeper commentary on technique.",
        "thesis": {"score": 4, "feedback": "Defensible, though it could name the devices you plan to discuss."},
        "evidence": {"score": 4, "feedback": "Quotations are relevant; integrate them more smoothly."},
        "analysis": {"score": 3, "feedback": "Explain how each device creates meaning rather than naming it."},
        "organization": {"score": 4, "feedback": "Paragraphs follow a logical order with clear topic sentences."},
        "style": {"score": 4, "feedback": "Generally controlled prose with occasional wordiness."},
        "specific_suggestions": [
            "Connect every quotation back to the thesis.",
            "Replace plot summary in paragraph two with analysis.",
            "Add a sentence on the work's broader significance in the conclusion.",
        ],
    }


def poem_analysis(title: Optional[str] = None) -> Dict[str, Any]:
    return {
        "title_analysis": f"The title {title!r} frames the poem as a meditation." if title else "",
        "tone": {"primary": "Contemplative", "secondary": ["Wistful", "Serene"], "explanation": "Long vowels slow the pace."},
        "poetic_devices": [
            {
                "name": "Enjambment",
                "example": "and miles to go / before I sleep",
                "explanation": "The sentence runs over the line break.",
                "effect": "Creates forward momentum that mirrors the journey.",
            }
        ],
        "themes": {"primary": "Obligation versus desire", "secondary": ["Mortality", "Solitude"], "explanation": "The speaker pauses but moves on."},
        "structure": {"form": "Quatrains", "rhyme_scheme": "AABA", "meter": "Iambic tetrameter", "explanation": "Linked rhymes chain the stanzas."},
        "ap_insights": [{"topic": "Shift", "explanation": "The final stanza turns from observation to resolve."}],
    }


def prose_questions(passage: str, num_questions: int = 5) -> Dict[str, Any]:
    letters = ["A", "B", "C", "D", "E"]
    questions = []
    for i in range(num_questions):
        questions.append(
            {
                "question": f"In context, the passage's description in paragraph {i + 1} primarily serves to",
                "choices": [
                    {"letter": "A", "text": "establish the narrator's detachment"},
                    {"letter": "B", "text": "foreshadow a later conflict"},
                    {"letter": "C", "text": "characterize the setting as oppressive"},
                    {"letter": "D", "text": "introduce an ironic contrast"},
                    {"letter": "E", "text": "summarize the preceding events"},
                ],
                "correct_answer": letters[i % len(letters)],
                "explanation": "The surrounding sentences support this reading.",
                "skill_tested": "Literary technique identification",
            }
        )
    return {
        "passage_summary": "A character returns to a childhood home and confronts how it has changed.",
        "passage_analysis": "Setting details carry the emotional weight of memory and loss.",
        "questions": questions,
    }
