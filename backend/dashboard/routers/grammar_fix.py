from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from .. import llm, mock_data
from ..errors import ToolError
from ..settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/grammar-fix", tags=["grammar"])


# Reference panel shown next to the checker
COMMON_ERRORS: List[Dict[str, Any]] = [
	{
		"type": "Run-on sentence",
		"examples": [
			{
				"incorrect": "I went to the store I bought some milk.",
				"correct": "I went to the store, and I bought some milk.",
				"explanation": "Two independent clauses should be joined with a conjunction or separated with proper punctuation.",
			}
		],
	},
	{
		"type": "Subject-verb agreement",
		"examples": [
			{
				"incorrect": "The group of students were talking loudly.",
				"correct": "The group of students was talking loudly.",
				"explanation": "'Group' is a singular collective noun, so it takes a singular verb.",
			}
		],
	},
	{
		"type": "Comma splice",
		"examples": [
			{
				"incorrect": "It was raining, we stayed inside.",
				"correct": "It was raining, so we stayed inside.",
				"explanation": "A comma alone cannot join two independent clauses. Use a conjunction, semicolon, or period.",
			}
		],
	},
	{
		"type": "Pronoun reference",
		"examples": [
			{
				"incorrect": "Maria told Susan that she should study more.",
				"correct": "Maria told Susan, 'You should study more.'",
				"explanation": "Unclear pronoun reference: 'she' could refer to either Maria or Susan.",
			}
		],
	},
]


class GrammarFixRequest(BaseModel):
	text: Optional[str] = None


@router.post("")
async def grammar_fix(req: GrammarFixRequest):
	if not req.text:
		raise ToolError(400, "Invalid request. Text is required.")
	if settings.use_mock_data:
		return mock_data.grammar_fix(req.text)
	try:
		return await llm.check_grammar(req.text)
	except Exception:
		logger.exception("Error in grammar checker API")
		raise ToolError(500, "Failed to check grammar")


@router.get("/common-errors")
def common_errors():
	return COMMON_ERRORS
