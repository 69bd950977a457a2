"""Core pipeline logic for Easy Onboard."""

from .parser import parse, parse_file, ParseError
from .projector import project
from .pipeline import GuideOrchestrator, Stage, load_guide
from .ingestion import fetch_document, parse_document, project_sections
from .renderer import render_guide, create_jinja_env, RenderError

__all__ = [
    "parse",
    "parse_file",
    "ParseError",
    "project",
    "GuideOrchestrator",
    "Stage",
    "load_guide",
    "fetch_document",
    "parse_document",
    "project_sections",
    "render_guide",
    "create_jinja_env",
    "RenderError",
]
