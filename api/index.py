"""
FastAPI wrapper for the Arabic SEO analyzer - Vercel Serverless Function.

This module exposes the analysis engine as a REST API for the editor
front end.
"""

import tempfile
from pathlib import Path
from typing import Any, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from arabic_seo_analyzer import __version__
from arabic_seo_analyzer.analyzer import analyze
from arabic_seo_analyzer.assistant_prompt import PromptOptions, build_assistant_prompt
from arabic_seo_analyzer.config import DEFAULT_GOAL
from arabic_seo_analyzer.content_sources import DocumentLoadError, document_from_text, load_document
from arabic_seo_analyzer.document import document_to_plain_text
from arabic_seo_analyzer.keyword_loader import KeywordLoadError, load_keywords, parse_keyword_block
from arabic_seo_analyzer.models import Keywords

app = FastAPI(
    title="Arabic SEO Analyzer API",
    description="Keyword density, structure and repetition analysis for Arabic articles",
    version=__version__,
)

# Enable CORS for all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class KeywordsInput(BaseModel):
    """Keyword configuration input model."""
    primary: str = ""
    secondaries: list[str] = Field(default_factory=list, description="Secondary keywords; empty slots allowed")
    company: str = ""
    lsi: list[str] = Field(default_factory=list, description="LSI terms")

    def to_keywords(self) -> Keywords:
        return Keywords(
            primary=self.primary,
            secondaries=tuple(self.secondaries),
            company=self.company,
            lsi=tuple(self.lsi),
        )


class AnalyzeRequest(BaseModel):
    """Request model for document analysis.

    ``document`` is the editor JSON tree. When it is omitted the document is
    built from ``plain_text``.
    """
    document: Optional[dict[str, Any]] = None
    plain_text: Optional[str] = None
    keywords: KeywordsInput = Field(default_factory=KeywordsInput)
    goal: str = DEFAULT_GOAL.value


class PromptRequest(AnalyzeRequest):
    """Request model for building the assistant prompt."""
    command: str = ""
    target_keywords: bool = False
    keyword_criteria: bool = False
    structure_criteria: bool = False
    goal_criteria: bool = False
    editor_text: bool = True


class PromptResponse(BaseModel):
    prompt: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


def _resolve_document(request: AnalyzeRequest) -> tuple[Optional[dict], Optional[str]]:
    if request.document is None and request.plain_text:
        # Markdown markers are not article text; count words on the built document
        return document_from_text(request.plain_text), None
    return request.document, request.plain_text


@app.get("/")
async def root():
    return {"name": "Arabic SEO Analyzer API", "docs": "/docs"}


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.post("/api/analyze")
async def analyze_document(request: AnalyzeRequest):
    """
    Analyze a document.

    Returns the full report: keyword analysis, structure checks,
    repeated phrases and summary counters.
    """
    document, plain_text = _resolve_document(request)
    result = analyze(document, plain_text, request.keywords.to_keywords(), request.goal)
    return result.to_dict()


@app.post("/api/analyze/file")
async def analyze_file(
    file: UploadFile = File(..., description="Document (.json, .docx, .txt or .md) to analyze"),
    keywords_file: Optional[UploadFile] = File(None, description="Keywords file (CSV, Excel or .txt)"),
    keywords_text: str = Form("", description="Pasted keyword block"),
    goal: str = Form(DEFAULT_GOAL.value),
):
    """
    Analyze an uploaded document.

    Keywords come from an uploaded keyword file or a pasted keyword block.
    """
    with tempfile.TemporaryDirectory() as tmp_dir:
        doc_path = Path(tmp_dir) / f"document{Path(file.filename or '').suffix.lower()}"
        doc_path.write_bytes(await file.read())
        try:
            document = load_document(doc_path)
        except DocumentLoadError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e

        keywords = parse_keyword_block(keywords_text)
        if keywords_file is not None and keywords_file.filename:
            kw_path = Path(tmp_dir) / f"keywords{Path(keywords_file.filename).suffix.lower()}"
            kw_path.write_bytes(await keywords_file.read())
            try:
                keywords = load_keywords(kw_path)
            except KeywordLoadError as e:
                raise HTTPException(status_code=400, detail=str(e)) from e

    result = analyze(document, keywords=keywords, goal=goal)
    return {"keywords": keywords.to_dict(), "analysis": result.to_dict()}


@app.post("/api/prompt", response_model=PromptResponse)
async def assistant_prompt(request: PromptRequest):
    """Build the AI assistant prompt for a document and its current analysis."""
    document, plain_text = _resolve_document(request)
    if plain_text is None:
        plain_text = document_to_plain_text(document)
    keywords = request.keywords.to_keywords()
    result = analyze(document, plain_text, keywords, request.goal)
    options = PromptOptions(
        manual_command=True,
        target_keywords=request.target_keywords,
        keyword_criteria=request.keyword_criteria,
        structure_criteria=request.structure_criteria,
        goal_criteria=request.goal_criteria,
        editor_text=request.editor_text,
    )
    prompt = build_assistant_prompt(request.command, result, keywords, plain_text, options, request.goal)
    if not prompt:
        raise HTTPException(status_code=400, detail="Nothing selected to build a prompt from")
    return PromptResponse(prompt=prompt)
