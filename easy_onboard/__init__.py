"""Easy Onboard - organization onboarding guides from a YAML document."""

from .core import parse, project, ParseError, GuideOrchestrator, load_guide, render_guide
from .services import FetchError, HttpDocumentSource, FileDocumentSource

__all__ = [
    "parse",
    "project",
    "ParseError",
    "FetchError",
    "GuideOrchestrator",
    "load_guide",
    "render_guide",
    "HttpDocumentSource",
    "FileDocumentSource",
]
