"""Pipeline stages - fetch, parse and project the onboarding guide."""

import logging

from ..models import GuideState, GuideStatus
from ..services import DocumentSource
from .parser import parse
from .projector import project

logger = logging.getLogger(__name__)


async def fetch_document(
    state: GuideState,
    source: DocumentSource
) -> GuideState:
    """FETCH stage: Retrieve the raw YAML and store it on the state.

    Raises:
        FetchError: If the source cannot deliver the text.
    """
    logger.info(f"Fetching onboarding data from: {source.describe()}")

    raw_text = await source.fetch_text()
    logger.info(f"Fetched {len(raw_text)} characters")

    return state.model_copy(update={
        "source": source.describe(),
        "raw_text": raw_text,
    })


async def parse_document(
    state: GuideState,
    source: DocumentSource
) -> GuideState:
    """PARSE stage: Turn raw_text into an OnboardingDocument.

    Raises:
        ParseError: If the text is malformed.
    """
    document = parse(state.raw_text or "")
    logger.info(
        f"Parsed document: {len(document.projects)} projects, "
        f"{len(document.roles)} roles"
    )
    return state.model_copy(update={"document": document})


async def project_sections(
    state: GuideState,
    source: DocumentSource
) -> GuideState:
    """PROJECT stage: Flatten the document into sections and mark the guide ready."""
    sections = project(state.document) if state.document is not None else []
    logger.info(f"Projected {len(sections)} sections")

    return state.model_copy(update={
        "sections": sections,
        "status": GuideStatus.READY,
    })
