"""Prompt templates and chat-completion wrappers behind the LLM-backed tools.

Every public coroutine here follows the same shape: build a system prompt,
send one chat completion, parse the reply, and raise :class:`LLMError` with a
short "Failed to ..." message if anything along the way goes wrong. The shape
of the returned object is only described in the prompt; it is not validated.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

from .errors import LLMError
from .openai_client import OpenAIClient


ANALYSIS_TYPES = ("themes", "symbolism", "character", "narrative", "literary-devices")


async def _chat(
	system_prompt: str,
	user_prompt: str,
	*,
	temperature: float,
	max_tokens: int,
	json_mode: bool = True,
) -> str:
	client = OpenAIClient()
	try:
		return await client.complete(
			[
				{"role": "system", "content": system_prompt},
				{"role": "user", "content": user_prompt},
			],
			temperature=temperature,
			max_tokens=max_tokens,
			json_mode=json_mode,
		)
	finally:
		await client.aclose()


async def _chat_json(failure: str, system_prompt: str, user_prompt: str, *, temperature: float, max_tokens: int) -> Dict[str, Any]:
	try:
		content = await _chat(system_prompt, user_prompt, temperature=temperature, max_tokens=max_tokens)
		data = json.loads(content or "{}")
	except Exception as err:
		raise LLMError(failure) from err
	if not isinstance(data, dict):
		raise LLMError(failure) from ValueError(f"completion JSON is a {type(data).__name__}, not an object")
	return data


STORY_SYSTEM_PROMPT = (
	"You are a literary analysis assistant. Analyze the provided text and extract:\n"
	"- Themes (primary and secondary)\n"
	"- Tone and mood\n"
	"- Narrative structure\n"
	"- Characters (main and secondary)\n"
	"- Literary devices used, with examples from the text\n\n"
	"Return ONLY a JSON object with this structure:\n"
	"{\n"
	'  "themes": {"primary": string, "secondary": [string, string, string], "explanation": string},\n'
	'  "tone": {"primary": string, "secondary": [string, string], "explanation": string},\n'
	'  "structure": {"type": string, "explanation": string},\n'
	'  "characters": {"main": [string], "secondary": [string], "analysis": string},\n'
	'  "literary_devices": [{"name": string, "example": string, "explanation": string}]\n'
	"}"
)


async def analyze_story(text: str) -> Dict[str, Any]:
	return await _chat_json(
		"Failed to analyze story",
		STORY_SYSTEM_PROMPT,
		text,
		temperature=0.7,
		max_tokens=2000,
	)


def _thesis_system_prompt(essay_type: str) -> str:
	return (
		"You are a thesis statement generator for high school students.\n"
		"Generate a strong, focused thesis statement from the information provided.\n"
		f"The essay type is {essay_type}.\n\n"
		"Respond with the thesis statement only, as plain text."
	)


def _thesis_user_prompt(essay_type: str, topic: str, stance: str, reasons: Sequence[str]) -> str:
	supporting = ", ".join(r for r in reasons if r)
	return (
		f"Essay type: {essay_type}\n"
		f"Topic: {topic}\n"
		f"Main point/stance: {stance}\n"
		f"Supporting reasons: {supporting}\n\n"
		"Please generate a thesis statement that is clear, specific, and debatable."
	)


async def generate_thesis(essay_type: str, topic: str, stance: str = "", reasons: Optional[Sequence[str]] = None) -> str:
	try:
		content = await _chat(
			_thesis_system_prompt(essay_type),
			_thesis_user_prompt(essay_type, topic, stance, reasons or []),
			temperature=0.7,
			max_tokens=200,
			json_mode=False,
		)
	except Exception as err:
		raise LLMError("Failed to generate thesis") from err
	return content.strip()


GRAMMAR_SYSTEM_PROMPT = (
	"You are a grammar checker for students. Analyze the provided text for grammar, spelling,\n"
	"punctuation, and style errors. Return ONLY a JSON object with this structure:\n"
	"{\n"
	'  "errorCount": number,\n'
	'  "errors": [\n'
	"    {\n"
	'      "type": string,        (e.g. "Subject-verb agreement", "Run-on sentence")\n'
	'      "position": string,    (e.g. "Sentence 2", "Paragraph 1")\n'
	'      "text": string,        (the problematic text)\n'
	'      "suggestion": string   (how to fix it)\n'
	"    }\n"
	"  ],\n"
	'  "correctedText": string    (the full text with all corrections applied)\n'
	"}\n\n"
	"If there are no errors, return errorCount 0 and an empty errors array."
)


async def check_grammar(text: str) -> Dict[str, Any]:
	return await _chat_json(
		"Failed to check grammar",
		GRAMMAR_SYSTEM_PROMPT,
		text,
		temperature=0.3,
		max_tokens=2000,
	)


_LITERATURE_SECTIONS: Dict[str, str] = {
	"themes": (
		'"themes": {\n'
		'  "primaryThemes": [{"name": string, "description": string, "evidence": [string, string, string]}],\n'
		'  "motifs": [string, string, string]\n'
		"}"
	),
	"symbolism": (
		'"symbolism": [{"symbol": string, "meaning": string, "occurrences": [string, string, string]}]'
	),
	"character": (
		'"characters": [{"name": string, "analysis": string, "traits": [string, string, string],\n'
		'  "development": string, "relationships": string}]'
	),
	"narrative": (
		'"narrative": {"structure": string, "perspective": string, "techniques": [string, string, string], "arc": string}'
	),
	"literary-devices": (
		'"literaryDevices": [{"device": string, "examples": [string, string, string]}]'
	),
}


def _literature_system_prompt(analysis_types: Sequence[str]) -> str:
	sections = [_LITERATURE_SECTIONS[t] for t in ANALYSIS_TYPES if t in analysis_types]
	prompt = (
		"You are a sophisticated literary analysis assistant for students. "
		"Analyze the provided text based on the requested analysis types.\n\n"
		"Return ONLY a JSON object. It must contain:\n"
		'"overallInsights": {\n'
		'  "summary": string (concise overall analysis of the text),\n'
		'  "significance": string (literary significance of the work),\n'
		'  "criticalPerspectives": string (how different critical lenses might read the work)\n'
		"}"
	)
	if sections:
		prompt += "\n\nAlso include these sections for the requested analysis types:\n" + ",\n".join(sections)
	return prompt


def _describe_work(noun: str, title: Optional[str], author: Optional[str], title_phrase: str) -> str:
	described = title_phrase.format(title=title) if title else noun
	if author:
		described += f" by {author}"
	return described


async def analyze_literature(
	text: str,
	analysis_types: Sequence[str],
	title: Optional[str] = None,
	author: Optional[str] = None,
) -> Dict[str, Any]:
	work = _describe_work("text", title, author, 'work titled "{title}"')
	user_prompt = (
		f"Please analyze the following {work}.\n\n"
		f"Analysis types requested: {', '.join(analysis_types)}\n\n"
		f"TEXT:\n{text}"
	)
	return await _chat_json(
		"Failed to analyze literature",
		_literature_system_prompt(analysis_types),
		user_prompt,
		temperature=0.7,
		max_tokens=2500,
	)


def _paraphrase_system_prompt(
	style: str,
	complexity: int,
	length_preference: str,
	keep_structure: bool,
	vocabulary_level: str,
) -> str:
	return (
		"You are an academic paraphrasing assistant that helps students rewrite text in their own words\n"
		"while keeping the original meaning. Paraphrase the provided text with these parameters:\n\n"
		f"- Style: {style} (academic = scholarly language with a formal tone; simplified = clearer and easier to understand;\n"
		"  creative = more expressive and engaging; formal = highly professional and proper)\n"
		f"- Complexity level: {complexity}/10 (higher means more complex sentence structures and vocabulary)\n"
		f"- Length preference: {length_preference} (shorter = more concise than the original; similar = about the same length;\n"
		"  longer = more detailed explanation)\n"
		f"- Structure preservation: {'Yes' if keep_structure else 'No'} (if yes, keep similar paragraph breaks and structure)\n"
		f"- Vocabulary level: {vocabulary_level} (basic = common words; intermediate = moderately advanced terms;\n"
		"  advanced = specialized academic vocabulary)\n\n"
		"Return ONLY a JSON object with this structure:\n"
		"{\n"
		'  "paraphrasedText": string,\n'
		'  "originalLength": number,\n'
		'  "newLength": number,\n'
		'  "readabilityScore": number (1-100, higher is more readable),\n'
		'  "academicWordsCount": number,\n'
		'  "changedWordsPercentage": number,\n'
		'  "originalToNew": [{"original word or phrase": "new word or phrase"}]\n'
		"}\n\n"
		"The paraphrase must:\n"
		"1. Change the wording completely while preserving meaning\n"
		"2. Not simply rearrange words or swap in simple synonyms\n"
		"3. Keep any citations present in the original\n"
		"4. Restructure sentences to suit the chosen style\n"
		"5. Match the requested complexity level\n"
		"6. List at least 5 word or phrase changes in originalToNew"
	)


async def paraphrase_text(
	text: str,
	style: str = "academic",
	complexity: int = 7,
	length_preference: str = "similar",
	keep_structure: bool = True,
	vocabulary_level: str = "advanced",
	source_title: Optional[str] = None,
	source_author: Optional[str] = None,
) -> Dict[str, Any]:
	source = _describe_work("text", source_title, source_author, 'text from "{title}"')
	user_prompt = f"Please paraphrase the following {source}.\n\nTEXT TO PARAPHRASE:\n{text}"
	return await _chat_json(
		"Failed to paraphrase text",
		_paraphrase_system_prompt(style, complexity, length_preference, keep_structure, vocabulary_level),
		user_prompt,
		temperature=0.7,
		max_tokens=2500,
	)


ESSAY_RUBRIC = (
	"- Score 6: Superior papers are specific in their references, cogent in their definitions, and free of plot summary "
	"that is not relevant to the prompt. They discuss literature with significant insight and understanding.\n"
	"- Score 5: These essays respond to the task with precision and clarity, making a strong case for their "
	"interpretation, though less thorough or convincing than a 6.\n"
	"- Score 4: These essays respond to the task adequately, with analysis beyond summary that is less thorough "
	"or convincing than a 5 or 6.\n"
	"- Score 3: These essays respond to the task simplistically or with uneven development; analysis may be "
	"unclear, limited, or incomplete.\n"
	"- Score 2: These essays are less successful; the analysis may be partial, unconvincing, irrelevant, or "
	"rely mainly on plot summary.\n"
	"- Score 1: These essays compound the weaknesses of a 2 and show minimal understanding of the text or prompt."
)


def _essay_system_prompt() -> str:
	dimensions = ("thesis", "evidence", "analysis", "organization", "style")
	lines = [f'  "{d}": {{"score": number, "feedback": string}},' for d in dimensions]
	return (
		"You are an AP Literature essay grader using the College Board's 6-point rubric. "
		"Evaluate the provided essay and give detailed feedback.\n\n"
		f"Rubric:\n{ESSAY_RUBRIC}\n\n"
		"Return ONLY a JSON object with this structure:\n"
		"{\n"
		'  "score": number,\n'
		'  "overview": string,\n'
		+ "\n".join(lines) + "\n"
		'  "specific_suggestions": [string, string, string]\n'
		"}"
	)


async def grade_essay(essay: str, prompt: Optional[str] = None, essay_type: str = "Literary Analysis") -> Dict[str, Any]:
	user_prompt = f"Essay Type: {essay_type}\n"
	if prompt:
		user_prompt += f"Prompt: {prompt}\n"
	user_prompt += f"\nEssay:\n{essay}"
	return await _chat_json(
		"Failed to grade essay",
		_essay_system_prompt(),
		user_prompt,
		temperature=0.5,
		max_tokens=2500,
	)


POEM_SYSTEM_PROMPT = (
	"You are an AP Literature poetry analysis assistant. Analyze the provided poem and cover:\n"
	"- Title and author (if provided)\n"
	"- Tone and mood\n"
	"- Poetic devices (metaphor, simile, alliteration, etc.) with examples from the text\n"
	"- Themes and meaning\n"
	"- Structure and form\n"
	"- AP Literature-level insights\n\n"
	"Return ONLY a JSON object with this structure:\n"
	"{\n"
	'  "title_analysis": string,\n'
	'  "tone": {"primary": string, "secondary": [string, string], "explanation": string},\n'
	'  "poetic_devices": [{"name": string, "example": string, "explanation": string, "effect": string}],\n'
	'  "themes": {"primary": string, "secondary": [string, string], "explanation": string},\n'
	'  "structure": {"form": string, "rhyme_scheme": string, "meter": string, "explanation": string},\n'
	'  "ap_insights": [{"topic": string, "explanation": string}]\n'
	"}"
)


def _heading(title: Optional[str], author: Optional[str]) -> str:
	lines: List[str] = []
	if title:
		lines.append(f"Title: {title}")
	if author:
		lines.append(f"Author: {author}")
	return "\n".join(lines) + "\n\n" if lines else ""


async def analyze_poem(poem: str, title: Optional[str] = None, author: Optional[str] = None) -> Dict[str, Any]:
	return await _chat_json(
		"Failed to analyze poem",
		POEM_SYSTEM_PROMPT,
		f"{_heading(title, author)}Poem:\n{poem}",
		temperature=0.7,
		max_tokens=2000,
	)


def _prose_system_prompt(num_questions: int) -> str:
	return (
		"You are an AP Literature exam question writer. Write authentic AP Literature-style multiple choice "
		"questions about the provided prose passage.\n\n"
		"Guidelines:\n"
		f"- Write exactly {num_questions} questions in the style of the AP Literature exam\n"
		"- Assess literary elements, narrative technique, tone, theme, and similar skills\n"
		"- Give each question 5 answer choices, A through E\n"
		"- Mark the correct answer and briefly explain why it is correct\n"
		"- Range from straightforward to challenging\n"
		"- Use line references where appropriate\n\n"
		"Return ONLY a JSON object with this structure:\n"
		"{\n"
		'  "passage_summary": string,\n'
		'  "passage_analysis": string,\n'
		'  "questions": [\n'
		"    {\n"
		'      "question": string,\n'
		'      "choices": [{"letter": "A", "text": string}, ... through "E"],\n'
		'      "correct_answer": string (A-E),\n'
		'      "explanation": string,\n'
		'      "skill_tested": string\n'
		"    }\n"
		"  ]\n"
		"}"
	)


async def generate_prose_questions(
	passage: str,
	title: Optional[str] = None,
	author: Optional[str] = None,
	num_questions: int = 5,
) -> Dict[str, Any]:
	return await _chat_json(
		"Failed to generate practice questions",
		_prose_system_prompt(num_questions),
		f"{_heading(title, author)}Passage:\n{passage}",
		temperature=0.7,
		max_tokens=3000,
	)
