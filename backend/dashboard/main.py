import logging

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from .errors import install_error_handlers
from .logging_config import setup_logging
from .settings import settings
from .routers import health, catalog
from .routers import grammar_fix
from .routers import story_analyzer
from .routers import thesis_builder
from .routers import literature_analysis
from .routers import paraphrase
from .routers import essay_grader
from .routers import poem_analysis
from .routers import prose_practice
from .routers import literary_terms
from .routers import citation_helper
from .routers import periodic_table
from .routers import binary_conversion
from .routers import algebraic_equations

logger = logging.getLogger(__name__)

app = FastAPI(title="Student Dashboard API")
install_error_handlers(app)
app.include_router(health.router)
app.include_router(catalog.router)
# LLM-backed tools
app.include_router(grammar_fix.router)
app.include_router(story_analyzer.router)
app.include_router(thesis_builder.router)
app.include_router(literature_analysis.router)
app.include_router(paraphrase.router)
app.include_router(essay_grader.router)
app.include_router(poem_analysis.router)
app.include_router(prose_practice.router)
# Locally computed tools
app.include_router(literary_terms.router)
app.include_router(citation_helper.router)
app.include_router(periodic_table.router)
app.include_router(binary_conversion.router)
app.include_router(algebraic_equations.router)

@app.get("/", include_in_schema=False)
async def redirect_root_to_docs():
	return RedirectResponse(url="/docs")

@app.get("/info")
def root():
	return {
		"status": "ok",
		"openai_configured": bool(settings.openai_api_key),
		"mock_data": settings.use_mock_data,
	}

@app.on_event("startup")
async def startup_event():
	setup_logging(settings.log_level)
	if settings.use_mock_data:
		logger.info("Mock data mode is on; AI tools return example results")
	elif not settings.openai_api_key:
		logger.warning("OPENAI_API_KEY is not set; AI tools will answer with 500")
