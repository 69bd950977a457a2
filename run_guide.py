"""Fetch the onboarding guide and print it.

Usage:
    python run_guide.py                 # fetch from ONBOARDING_SOURCE__URL
    python run_guide.py onboarding.yml  # preview a local file
"""

import asyncio
import logging
import sys
from dotenv import load_dotenv

load_dotenv()

from easy_onboard.models import AppConfig, GuideStatus
from easy_onboard.services import HttpDocumentSource, FileDocumentSource
from easy_onboard.core import GuideOrchestrator, render_guide


async def run_guide() -> int:
    config = AppConfig()

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if len(sys.argv) > 1:
        source = FileDocumentSource(sys.argv[1])
    else:
        source = HttpDocumentSource(config.source)

    async with source:
        state = await GuideOrchestrator(source).run()

    print(render_guide(state, config.render))
    return 0 if state.status == GuideStatus.READY else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(run_guide()))
