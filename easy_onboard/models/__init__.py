"""Pydantic models for Easy Onboard."""

from .document import (
    Task,
    Checklist,
    AccessItem,
    InternalSite,
    Organization,
    Project,
    Role,
    OnboardingDocument,
)
from .section import Section, SectionKind
from .state import GuideState, GuideStatus, PipelineStage
from .config import AppConfig, SourceConfig, RenderConfig

__all__ = [
    "Task",
    "Checklist",
    "AccessItem",
    "InternalSite",
    "Organization",
    "Project",
    "Role",
    "OnboardingDocument",
    "Section",
    "SectionKind",
    "GuideState",
    "GuideStatus",
    "PipelineStage",
    "AppConfig",
    "SourceConfig",
    "RenderConfig",
]
