"""Guide Orchestrator - fetch, parse and project in a fixed order.

Implements a small state machine so every load walks the same stages and
failures land in a well-defined user-visible state.
"""

from enum import Enum, auto
from typing import Awaitable, Callable, Dict, Optional
import logging

from ..models import GuideState, GuideStatus, PipelineStage
from ..services import DocumentSource, FetchError
from .ingestion import fetch_document, parse_document, project_sections
from .parser import ParseError

logger = logging.getLogger(__name__)


FETCH_FAILED_TITLE = "Error fetching data"
FETCH_FAILED_MESSAGE = "Failed to fetch onboarding data"
MALFORMED_TITLE = "Error reading data"
MALFORMED_MESSAGE = "Onboarding data is malformed"


class Stage(Enum):
    """Pipeline stages in execution order."""
    IDLE = auto()
    FETCH = auto()
    PARSE = auto()
    PROJECT = auto()
    COMPLETE = auto()
    ERROR = auto()


# Type alias for stage handlers
StageHandler = Callable[[GuideState, DocumentSource], Awaitable[GuideState]]


class GuideOrchestrator:
    """State machine orchestrator for loading an onboarding guide.

    Manages the flow: IDLE → FETCH → PARSE → PROJECT → COMPLETE

    FetchError and ParseError stop the pipeline and are recorded on the
    returned state as FETCH_FAILED / MALFORMED. Anything else propagates.

    Usage:
        async with HttpDocumentSource(config.source) as source:
            state = await GuideOrchestrator(source).run()
    """

    # Stage transition map: current -> next
    TRANSITIONS: Dict[Stage, Stage] = {
        Stage.IDLE: Stage.FETCH,
        Stage.FETCH: Stage.PARSE,
        Stage.PARSE: Stage.PROJECT,
        Stage.PROJECT: Stage.COMPLETE,
    }

    # Stage handlers
    HANDLERS: Dict[Stage, StageHandler] = {
        Stage.FETCH: fetch_document,
        Stage.PARSE: parse_document,
        Stage.PROJECT: project_sections,
    }

    def __init__(self, source: DocumentSource):
        self.source = source
        self._current_stage = Stage.IDLE
        self._pipeline_state = PipelineStage()

    @property
    def current_stage(self) -> Stage:
        return self._current_stage

    @property
    def pipeline_state(self) -> PipelineStage:
        return self._pipeline_state

    async def _execute_stage(self, state: GuideState) -> GuideState:
        """Execute the handler for the current stage."""
        handler = self.HANDLERS.get(self._current_stage)

        if handler is None:
            logger.debug(f"No handler for stage {self._current_stage.name}, skipping")
            return state

        logger.debug(f"Executing stage: {self._current_stage.name}")

        try:
            updated_state = await handler(state, self.source)
            self._pipeline_state.completed.append(self._current_stage.name)
            return updated_state

        except Exception as e:
            logger.error(f"Stage {self._current_stage.name} failed: {e}")
            self._pipeline_state.errors.append(f"{self._current_stage.name}: {str(e)}")
            self._current_stage = Stage.ERROR
            raise

    def _transition(self) -> None:
        """Transition to the next stage."""
        next_stage = self.TRANSITIONS.get(self._current_stage)

        if next_stage is None:
            logger.warning(f"No transition defined from {self._current_stage.name}")
            return

        logger.debug(f"Transitioning: {self._current_stage.name} → {next_stage.name}")
        self._current_stage = next_stage
        self._pipeline_state.current = next_stage.name

    async def run(self, initial_state: Optional[GuideState] = None) -> GuideState:
        """Execute the full pipeline from IDLE to COMPLETE.

        Returns:
            GuideState with status READY and sections populated, or with
            status FETCH_FAILED / MALFORMED and an error title and message.
        """
        state = initial_state or GuideState(source=self.source.describe())
        self._current_stage = Stage.IDLE
        self._pipeline_state = PipelineStage(current="IDLE")

        logger.info("Loading onboarding guide")

        try:
            while self._current_stage not in (Stage.COMPLETE, Stage.ERROR):
                self._transition()
                state = await self._execute_stage(state)
        except FetchError as e:
            return state.model_copy(update={
                "status": GuideStatus.FETCH_FAILED,
                "error_title": FETCH_FAILED_TITLE,
                "error_message": f"{FETCH_FAILED_MESSAGE}: {e}",
            })
        except ParseError as e:
            return state.model_copy(update={
                "status": GuideStatus.MALFORMED,
                "error_title": MALFORMED_TITLE,
                "error_message": f"{MALFORMED_MESSAGE}: {e}",
            })

        logger.info(f"Guide ready with {len(state.sections)} sections")
        return state

    async def run_stage(
        self,
        stage: Stage,
        state: GuideState
    ) -> GuideState:
        """Execute a single stage (for testing or manual control)."""
        self._current_stage = stage
        return await self._execute_stage(state)


async def load_guide(source: DocumentSource) -> GuideState:
    """Convenience wrapper: run a fresh orchestrator against ``source``."""
    return await GuideOrchestrator(source).run()
