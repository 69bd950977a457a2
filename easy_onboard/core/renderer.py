"""Render stage - Jinja2 templates for the onboarding guide page."""

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..models import GuideState, RenderConfig

logger = logging.getLogger(__name__)


TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

TEMPLATES = {
    "markdown": "guide.md.j2",
    "html": "guide.html.j2",
}

LINK_SCHEMES = ("http", "https", "mailto")


class RenderError(Exception):
    """Raised when the guide template cannot be rendered."""
    pass


def escape_markdown(text: str) -> str:
    """Escape characters that would break Markdown link and list syntax."""
    if not isinstance(text, str):
        text = str(text)
    for char in ("\\", "[", "]", "*", "_", "`"):
        text = text.replace(char, "\\" + char)
    return text


def safe_url(link: Optional[str]) -> Optional[str]:
    """Return the link if its scheme is http, https or mailto, else None.

    Entries whose link is dropped here render as plain text.
    """
    if not link:
        return None
    link = link.strip()
    try:
        scheme = urlsplit(link).scheme.lower()
    except ValueError:
        return None
    return link if scheme in LINK_SCHEMES else None


def create_jinja_env(template_dir: Path = TEMPLATE_DIR) -> Environment:
    """Create a Jinja2 environment; HTML templates are autoescaped."""
    env = Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=select_autoescape(enabled_extensions=("html", "html.j2")),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["escape_markdown"] = escape_markdown
    env.filters["safe_url"] = safe_url
    return env


def render_guide(
    state: GuideState,
    config: Optional[RenderConfig] = None,
    env: Optional[Environment] = None,
) -> str:
    """Render a loaded guide (or its failure state) as Markdown or HTML.

    Items with a link become hyperlinks; items without one are plain text.
    Empty blocks are left out.
    """
    config = config or RenderConfig()
    env = env or create_jinja_env()

    document = state.document
    context = {
        "page_header": (document.page_header if document else None) or config.default_page_header,
        "page_title": (document.page_title if document else None) or config.default_page_title,
        "sections": state.sections,
        "failed": state.failed,
        "error_title": state.error_title,
        "error_message": state.error_message,
    }

    try:
        template = env.get_template(TEMPLATES[config.format])
        output = template.render(**context)
    except Exception as e:
        raise RenderError(f"Failed to render guide as {config.format}: {e}") from e

    logger.debug(f"Rendered {len(state.sections)} sections as {config.format}")
    return output
