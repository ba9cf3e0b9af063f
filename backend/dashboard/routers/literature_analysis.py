from __future__ import annotations
import logging
from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from .. import llm, mock_data
from ..errors import ToolError
from ..settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/literature-analysis", tags=["literature"])


class LiteratureAnalysisRequest(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	text: Optional[str] = None
	title: Optional[str] = None
	author: Optional[str] = None
	analysis_types: Optional[List[str]] = Field(default=None, alias="analysisTypes")


@router.post("")
async def literature_analysis(req: LiteratureAnalysisRequest):
	if not req.text or not req.analysis_types:
		raise ToolError(400, "Text and at least one analysis type are required")
	if settings.use_mock_data:
		return mock_data.literature_analysis(req.analysis_types, req.title, req.author)
	try:
		return await llm.analyze_literature(
			req.text,
			req.analysis_types,
			title=req.title,
			author=req.author,
		)
	except Exception:
		logger.exception("Error in literature analysis API")
		raise ToolError(500, "Failed to analyze literature")


@router.get("/types")
def analysis_types():
	return {"analysisTypes": list(llm.ANALYSIS_TYPES)}
