from __future__ import annotations
import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from .. import llm, mock_data
from ..errors import ToolError
from ..settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/story-analyzer", tags=["story"])


class StoryAnalyzerRequest(BaseModel):
	text: Optional[str] = None


@router.post("")
async def story_analyzer(req: StoryAnalyzerRequest):
	if not req.text:
		raise ToolError(400, "Invalid request. Text is required.")
	if settings.use_mock_data:
		return mock_data.story_analysis(req.text)
	try:
		return await llm.analyze_story(req.text)
	except Exception:
		logger.exception("Error in story analyzer API")
		raise ToolError(500, "Failed to analyze story")
