from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional

from .document import OnboardingDocument
from .section import Section


class GuideStatus(str, Enum):
    """User-visible outcome of loading the guide."""
    PENDING = "pending"
    READY = "ready"
    FETCH_FAILED = "fetch_failed"
    MALFORMED = "malformed"


class GuideState(BaseModel):
    """Central state object passed through the guide pipeline.

    Accumulates data as it flows through FETCH → PARSE → PROJECT. A new
    state is created for every load; nothing here is shared between loads.
    """
    # === Input Stage ===
    source: str = Field(
        default="",
        description="Human-readable description of where the guide came from"
    )
    raw_text: Optional[str] = Field(
        default=None,
        description="Fetched YAML text"
    )

    # === Parse Stage ===
    document: Optional[OnboardingDocument] = None

    # === Project Stage ===
    sections: List[Section] = Field(default_factory=list)

    # === Outcome ===
    status: GuideStatus = GuideStatus.PENDING
    error_title: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status in (GuideStatus.FETCH_FAILED, GuideStatus.MALFORMED)


class PipelineStage(BaseModel):
    """Tracks the current stage of the pipeline for state machine logic."""
    current: str = "IDLE"
    completed: List[str] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
