from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Tuple

from .document import AccessItem, Checklist, InternalSite


class SectionKind(str, Enum):
    """Which block of the document a section was projected from."""
    ORGANIZATION = "Organization"
    PROJECT = "Project"
    ROLE = "Role"


class Section(BaseModel):
    """Render-ready view of one organization, project, or role block.

    Every section has the same shape regardless of its kind, so a renderer
    needs one routine per sub-block (checklists, access, internal sites)
    rather than one per entity kind. Only the organization section ever
    carries internal sites.
    """
    model_config = ConfigDict(frozen=True)

    kind: SectionKind
    title: str
    checklists: Tuple[Checklist, ...] = ()
    access: Tuple[AccessItem, ...] = ()
    internal_sites: Tuple[InternalSite, ...] = Field(
        default=(),
        description="Populated for the organization section only"
    )

    @property
    def heading(self) -> str:
        """Display heading, e.g. ``Project: Billing`` or ``Organization``."""
        if self.kind is SectionKind.ORGANIZATION:
            return self.title
        return f"{self.kind.value}: {self.title}"

    @property
    def is_empty(self) -> bool:
        return not (self.checklists or self.access or self.internal_sites)
