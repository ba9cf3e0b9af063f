from fastapi import APIRouter

from ..errors import ToolError

router = APIRouter(prefix="/catalog", tags=["catalog"])

# Navigation data for the dashboard: subjects, their courses and the tools that are implemented
CATALOG = {
	"subjects": [
		{
			"id": "english",
			"title": "ELA",
			"courses": [
				{"title": "English 9", "path": "/english/english-9"},
				{"title": "English 10", "path": "/english/english-10"},
				{"title": "English 11", "path": "/english/english-11"},
				{"title": "English 9-12", "path": "/english/english-9-12"},
				{"title": "AP Literature", "path": "/english/ap-literature"},
			],
			"tools": [
				{"title": "Grammar Fix", "description": "Find and correct grammar, spelling and punctuation errors", "endpoint": "/api/grammar-fix", "ai": True},
				{"title": "Story Analyzer", "description": "Themes, tone, structure, characters and literary devices", "endpoint": "/api/story-analyzer", "ai": True},
				{"title": "Thesis Builder", "description": "Turn a topic, stance and reasons into a thesis statement", "endpoint": "/api/thesis-builder", "ai": True},
				{"title": "Literary Terms", "description": "Flashcards and quizzes for literary devices and elements", "endpoint": "/english/literary-terms", "ai": False},
				{"title": "Citation Helper", "description": "MLA, APA and Chicago citations for websites, books and journals", "endpoint": "/english/citation-helper", "ai": False},
				{"title": "Literature Analysis", "description": "Themes, symbolism, characters, narrative and devices", "endpoint": "/api/literature-analysis", "ai": True},
				{"title": "Academic Paraphraser", "description": "Rewrite a passage in a chosen style and complexity", "endpoint": "/api/paraphrase", "ai": True},
				{"title": "Essay Grader", "description": "AP Literature 6-point rubric scoring with feedback", "endpoint": "/api/essay-grader", "ai": True},
				{"title": "Poem Analysis", "description": "Tone, poetic devices, themes and form", "endpoint": "/api/poem-analysis", "ai": True},
				{"title": "Prose Practice", "description": "AP-style multiple choice questions on a prose passage", "endpoint": "/api/prose-practice", "ai": True},
			],
		},
		{
			"id": "mathematics",
			"title": "Math",
			"courses": [
				{"title": "Algebra 1", "path": "/mathematics/algebra-1"},
				{"title": "Algebra 2", "path": "/mathematics/algebra-2"},
				{"title": "Geometry", "path": "/mathematics/geometry"},
				{"title": "Pre-Calculus", "path": "/mathematics/pre-calculus"},
				{"title": "Calculus", "path": "/mathematics/calculus"},
				{"title": "Statistics", "path": "/mathematics/statistics"},
			],
			"tools": [
				{"title": "Algebraic Equations", "description": "Solve linear equations of the form ax + b = c", "endpoint": "/tools/algebraic-equations/solve", "ai": False},
			],
		},
		{
			"id": "science",
			"title": "Science",
			"courses": [
				{"title": "Biology", "path": "/science/biology"},
				{"title": "Chemistry", "path": "/science/chemistry"},
				{"title": "Physics", "path": "/science/physics"},
				{"title": "Earth Science", "path": "/science/earth-science"},
			],
			"tools": [
				{"title": "Periodic Table", "description": "Browse elements by group, period and category", "endpoint": "/tools/periodic-table", "ai": False},
			],
		},
		{
			"id": "computer-science",
			"title": "Computer Science",
			"courses": [],
			"tools": [
				{"title": "Binary Conversion", "description": "Convert between decimal, binary, hex and octal", "endpoint": "/tools/binary-conversion", "ai": False},
			],
		},
		{
			"id": "history",
			"title": "History",
			"courses": [
				{"title": "World History", "path": "/history/world"},
				{"title": "US History", "path": "/history/us"},
				{"title": "Government", "path": "/history/government"},
			],
			"tools": [],
		},
		{
			"id": "languages",
			"title": "Language",
			"courses": [
				{"title": "Spanish 1", "path": "/languages/spanish-1"},
				{"title": "French 1", "path": "/languages/french-1"},
				{"title": "Latin", "path": "/languages/latin"},
			],
			"tools": [],
		},
	]
}


@router.get("")
def get_catalog():
	return CATALOG


@router.get("/{subject_id}")
def get_subject(subject_id: str):
	for subject in CATALOG["subjects"]:
		if subject["id"] == subject_id:
			return subject
	raise ToolError(404, f"Unknown subject: {subject_id}")
