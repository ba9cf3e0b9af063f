from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class LLMError(RuntimeError):
	"""Raised by the LLM proxy functions when a completion cannot be produced or parsed."""


class ToolError(Exception):
	"""A failure that is reported to the caller as ``{"error": message}``."""

	def __init__(self, status_code: int, message: str) -> None:
		super().__init__(message)
		self.status_code = status_code
		self.message = message


async def _tool_error_handler(request: Request, exc: ToolError) -> JSONResponse:
	return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
	logger.debug("Rejected request body for %s: %s", request.url.path, exc.errors())
	return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def install_error_handlers(app: FastAPI) -> None:
	app.add_exception_handler(ToolError, _tool_error_handler)
	app.add_exception_handler(RequestValidationError, _validation_error_handler)
