from __future__ import annotations
import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from .. import llm, mock_data
from ..errors import ToolError
from ..settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/essay-grader", tags=["essay"])


class EssayGraderRequest(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	essay: Optional[str] = None
	prompt: Optional[str] = None
	essay_type: str = Field(default="Literary Analysis", alias="essayType")


@router.post("")
async def essay_grader(req: EssayGraderRequest):
	if not req.essay:
		raise ToolError(400, "Invalid request. Essay text is required.")
	if settings.use_mock_data:
		return mock_data.essay_grade(req.essay)
	try:
		return await llm.grade_essay(req.essay, prompt=req.prompt, essay_type=req.essay_type)
	except Exception:
		logger.exception("Error in essay grader API")
		raise ToolError(500, "Failed to grade essay")
