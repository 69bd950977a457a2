import httpx
import pytest

from easy_onboard.core import GuideOrchestrator, Stage, load_guide
from easy_onboard.models import GuideState, GuideStatus, SectionKind, SourceConfig
from easy_onboard.services import FileDocumentSource, HttpDocumentSource


class StaticSource:
    def __init__(self, text: str):
        self.text = text

    async def fetch_text(self) -> str:
        return self.text

    def describe(self) -> str:
        return "static"


@pytest.mark.asyncio
async def test_pipeline_ready(sample_guide):
    orchestrator = GuideOrchestrator(StaticSource(sample_guide))
    state = await orchestrator.run()

    assert state.status is GuideStatus.READY
    assert state.document.page_title == "Welcome to Acme"
    assert len(state.sections) == 5
    assert orchestrator.current_stage is Stage.COMPLETE
    assert orchestrator.pipeline_state.completed == ["FETCH", "PARSE", "PROJECT"]


@pytest.mark.asyncio
async def test_pipeline_malformed():
    orchestrator = GuideOrchestrator(StaticSource("onboarding:\n  projects:\n    - access: []\n"))
    state = await orchestrator.run()

    assert state.status is GuideStatus.MALFORMED
    assert state.failed
    assert state.sections == []
    assert "name" in state.error_message
    assert orchestrator.current_stage is Stage.ERROR


@pytest.mark.asyncio
async def test_pipeline_fetch_failed():
    transport = httpx.MockTransport(lambda request: httpx.Response(500))
    config = SourceConfig(url="https://guides.acme.test/x.yml", max_attempts=1)

    async with HttpDocumentSource(config, transport=transport) as source:
        state = await load_guide(source)

    assert state.status is GuideStatus.FETCH_FAILED
    assert state.error_message.startswith("Failed to fetch onboarding data")
    assert state.document is None


@pytest.mark.asyncio
async def test_pipeline_from_file(guide_file):
    async with FileDocumentSource(guide_file) as source:
        state = await load_guide(source)

    assert state.source == str(guide_file)
    assert state.sections[0].kind is SectionKind.ORGANIZATION


@pytest.mark.asyncio
async def test_run_single_stage(sample_guide):
    orchestrator = GuideOrchestrator(StaticSource(sample_guide))
    state = await orchestrator.run_stage(Stage.PARSE, GuideState(raw_text=sample_guide))

    assert state.document is not None
    assert state.sections == []


@pytest.mark.asyncio
async def test_each_load_gets_a_fresh_document(sample_guide):
    source = StaticSource(sample_guide)
    first = await load_guide(source)
    second = await load_guide(source)

    assert first.document == second.document
    assert first.document is not second.document
