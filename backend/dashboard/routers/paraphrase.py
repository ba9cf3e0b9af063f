from __future__ import annotations
import logging
from typing import Literal, Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from .. import llm, mock_data
from ..errors import ToolError
from ..settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/paraphrase", tags=["paraphrase"])


class ParaphraseOptions(BaseModel):
	"""Paraphraser settings; the defaults are what the form starts with."""

	model_config = ConfigDict(populate_by_name=True)

	style: Literal["academic", "simplified", "creative", "formal"] = "academic"
	complexity: int = Field(default=7, ge=1, le=10)
	length_preference: Literal["shorter", "similar", "longer"] = Field(default="similar", alias="lengthPreference")
	keep_structure: bool = Field(default=True, alias="keepStructure")
	vocabulary_level: Literal["basic", "intermediate", "advanced"] = Field(default="advanced", alias="vocabularyLevel")


class ParaphraseRequest(ParaphraseOptions):
	text: Optional[str] = None
	source_title: Optional[str] = Field(default=None, alias="sourceTitle")
	source_author: Optional[str] = Field(default=None, alias="sourceAuthor")
	# Required here even though the options model has a default
	style: Optional[Literal["academic", "simplified", "creative", "formal"]] = None


@router.post("")
async def paraphrase(req: ParaphraseRequest):
	if not req.text or not req.style:
		raise ToolError(400, "Text and style are required")
	if settings.use_mock_data:
		return mock_data.paraphrase(req.text, req.style)
	try:
		return await llm.paraphrase_text(
			req.text,
			style=req.style,
			complexity=req.complexity,
			length_preference=req.length_preference,
			keep_structure=req.keep_structure,
			vocabulary_level=req.vocabulary_level,
			source_title=req.source_title,
			source_author=req.source_author,
		)
	except Exception:
		logger.exception("Error in paraphrase API")
		raise ToolError(500, "Failed to paraphrase text")


@router.get("/options")
def default_options():
	return ParaphraseOptions().model_dump(by_alias=True)
