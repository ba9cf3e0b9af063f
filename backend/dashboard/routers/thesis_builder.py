from __future__ import annotations
import logging
from typing import List, Literal, Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from .. import llm, mock_data
from ..errors import ToolError
from ..settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/thesis-builder", tags=["thesis"])


ESSAY_TYPE_INFO = [
	{"id": "analytical", "label": "Analytical", "description": "Breaks down an idea into its component parts for examination"},
	{"id": "argumentative", "label": "Argumentative", "description": "Takes a position on a topic and defends it with evidence"},
	{"id": "expository", "label": "Expository", "description": "Explains a concept or process in a straightforward manner"},
]


class ThesisForm(BaseModel):
	"""Thesis builder form. A fresh instance is the reset state."""

	model_config = ConfigDict(populate_by_name=True)

	essay_type: Literal["analytical", "argumentative", "expository"] = Field(default="analytical", alias="essayType")
	topic: str = ""
	stance: str = ""
	reasons: List[str] = Field(default_factory=lambda: ["", "", ""])

	def validate_form(self) -> Optional[str]:
		if not self.topic.strip():
			return "Please enter a topic"
		if self.essay_type != "expository" and not self.stance.strip():
			return "Please enter your stance or main point"
		if self.essay_type == "argumentative" and not (self.reasons and self.reasons[0].strip()):
			return "Please enter at least one supporting reason"
		return None


class ThesisRequest(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	essay_type: Optional[str] = Field(default=None, alias="essayType")
	topic: Optional[str] = None
	stance: Optional[str] = None
	reasons: Optional[List[str]] = None


@router.post("")
async def thesis_builder(req: ThesisRequest):
	if not req.topic or not req.essay_type:
		raise ToolError(400, "Invalid request. Topic and essayType are required.")
	stance = req.stance or ""
	reasons = req.reasons or []
	if settings.use_mock_data:
		return {"thesis": mock_data.thesis(req.essay_type, req.topic, stance, reasons)}
	try:
		thesis = await llm.generate_thesis(req.essay_type, req.topic, stance, reasons)
	except Exception:
		logger.exception("Error in thesis builder API")
		raise ToolError(500, "Failed to generate thesis")
	return {"thesis": thesis}


@router.get("/form")
def initial_form():
	return {
		"form": ThesisForm().model_dump(by_alias=True),
		"essayTypes": ESSAY_TYPE_INFO,
	}


@router.post("/validate")
def validate_form(form: ThesisForm):
	return {"error": form.validate_form()}
