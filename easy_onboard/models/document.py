"""Pydantic models for the onboarding document.

The YAML keys written by guide authors (``task``, ``item``, ``role``) are
mapped onto clearer attribute names through field aliases; only the YAML
keys are accepted as input. Every model is frozen: a document is built once
per fetch and never mutated afterwards.
"""

from datetime import date
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional, Tuple


def _empty_if_null(value: Any) -> Any:
    """YAML turns ``checklists:`` with no value into None; treat it as empty."""
    return () if value is None else value


def _as_text(value: Any) -> Any:
    # Hand-written YAML often yields numbers for names like "2024 Cohort".
    # Bools are left alone: the loader keeps yes/no as the text the author wrote.
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    return value


class DocumentModel(BaseModel):
    """Shared configuration for all document entities."""
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )


class Linkable(DocumentModel):
    """An entry rendered as a hyperlink when ``link`` is set, plain text otherwise.

    Subclasses expose the entry's display string as ``text``.
    """
    link: Optional[str] = Field(
        default=None,
        description="Optional URL; empty strings are treated as absent"
    )

    @field_validator("link", mode="before")
    @classmethod
    def _blank_link_is_absent(cls, value: Any) -> Any:
        if value is None:
            return None
        value = _as_text(value)
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def has_link(self) -> bool:
        return self.link is not None


class Task(Linkable):
    """One actionable onboarding step."""
    description: str = Field(alias="task", description="What the newcomer has to do")

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value: Any) -> Any:
        return _as_text(value)

    @property
    def text(self) -> str:
        return self.description


class AccessItem(Linkable):
    """A system or permission the newcomer needs to request."""
    label: str = Field(alias="item")

    @field_validator("label", mode="before")
    @classmethod
    def _coerce_label(cls, value: Any) -> Any:
        return _as_text(value)

    @property
    def text(self) -> str:
        return self.label


class InternalSite(Linkable):
    """A reference site; only organizations list these."""
    label: str = Field(alias="item")

    @field_validator("label", mode="before")
    @classmethod
    def _coerce_label(cls, value: Any) -> Any:
        return _as_text(value)

    @property
    def text(self) -> str:
        return self.label


class Checklist(DocumentModel):
    """A titled, ordered list of tasks."""
    title: str
    tasks: Tuple[Task, ...] = ()

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> Any:
        return _as_text(value)

    @field_validator("tasks", mode="before")
    @classmethod
    def _tasks_default(cls, value: Any) -> Any:
        return _empty_if_null(value)


class Organization(DocumentModel):
    """Organization-wide onboarding content. At most one per document."""
    checklists: Tuple[Checklist, ...] = ()
    access: Tuple[AccessItem, ...] = ()
    internal_sites: Tuple[InternalSite, ...] = ()

    @field_validator("checklists", "access", "internal_sites", mode="before")
    @classmethod
    def _sequences_default(cls, value: Any) -> Any:
        return _empty_if_null(value)


class Project(DocumentModel):
    name: str
    checklists: Tuple[Checklist, ...] = ()
    access: Tuple[AccessItem, ...] = ()

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> Any:
        return _as_text(value)

    @field_validator("checklists", "access", mode="before")
    @classmethod
    def _sequences_default(cls, value: Any) -> Any:
        return _empty_if_null(value)


class Role(DocumentModel):
    name: str = Field(alias="role")
    checklists: Tuple[Checklist, ...] = ()
    access: Tuple[AccessItem, ...] = ()

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> Any:
        return _as_text(value)

    @field_validator("checklists", "access", mode="before")
    @classmethod
    def _sequences_default(cls, value: Any) -> Any:
        return _empty_if_null(value)


class OnboardingDocument(DocumentModel):
    """Root of the onboarding guide (the value under the ``onboarding`` key)."""
    page_header: Optional[str] = None
    page_title: Optional[str] = None
    organization: Optional[Organization] = None
    projects: Tuple[Project, ...] = ()
    roles: Tuple[Role, ...] = ()

    @field_validator("page_header", "page_title", mode="before")
    @classmethod
    def _coerce_page_text(cls, value: Any) -> Any:
        return _as_text(value)

    @field_validator("projects", "roles", mode="before")
    @classmethod
    def _sequences_default(cls, value: Any) -> Any:
        return _empty_if_null(value)

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to render besides the page header/title."""
        return self.organization is None and not self.projects and not self.roles
