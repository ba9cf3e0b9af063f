from __future__ import annotations
import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from .. import llm, mock_data
from ..errors import ToolError
from ..settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/prose-practice", tags=["prose"])


class ProsePracticeRequest(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	passage: Optional[str] = None
	title: Optional[str] = None
	author: Optional[str] = None
	num_questions: int = Field(default=5, ge=1, le=20, alias="numQuestions")


@router.post("")
async def prose_practice(req: ProsePracticeRequest):
	if not req.passage:
		raise ToolError(400, "Invalid request. Passage text is required.")
	if settings.use_mock_data:
		return mock_data.prose_questions(req.passage, req.num_questions)
	try:
		return await llm.generate_prose_questions(
			req.passage,
			title=req.title,
			author=req.author,
			num_questions=req.num_questions,
		)
	except Exception:
		logger.exception("Error in prose practice API")
		raise ToolError(500, "Failed to generate practice questions")
