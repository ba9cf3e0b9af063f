from __future__ import annotations
import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from .. import llm, mock_data
from ..errors import ToolError
from ..settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/poem-analysis", tags=["poetry"])


class PoemAnalysisRequest(BaseModel):
	poem: Optional[str] = None
	title: Optional[str] = None
	author: Optional[str] = None


@router.post("")
async def poem_analysis(req: PoemAnalysisRequest):
	if not req.poem:
		raise ToolError(400, "Invalid request. Poem text is required.")
	if settings.use_mock_data:
		return mock_data.poem_analysis(req.title)
	try:
		return await llm.analyze_poem(req.poem, title=req.title, author=req.author)
	except Exception:
		logger.exception("Error in poem analysis API")
		raise ToolError(500, "Failed to analyze poem")
