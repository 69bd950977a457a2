"""Parse stage - YAML text into a typed OnboardingDocument.

Guides are hand-written, so only gross problems are rejected: text that is
not YAML at all, a missing top-level ``onboarding`` key, or a present entity
lacking its required field. Missing optional sections simply come out empty.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Sequence, Union

import yaml
from pydantic import ValidationError

from ..models import OnboardingDocument

logger = logging.getLogger(__name__)


ROOT_KEY = "onboarding"

# Container key in the YAML tree -> entity held by that key
LITERAL_TAGS = ("tag:yaml.org,2002:bool", "tag:yaml.org,2002:timestamp")


class GuideLoader(yaml.SafeLoader):
    """SafeLoader that keeps yes/no/on/off and dates as the text the author wrote."""


GuideLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in LITERAL_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}

ENTITY_BY_KEY = {
    "organization": "Organization",
    "projects": "Project",
    "roles": "Role",
    "checklists": "Checklist",
    "tasks": "Task",
    "access": "AccessItem",
    "internal_sites": "InternalSite",
}


class ParseError(Exception):
    """Raised when the onboarding text is malformed.

    ``entity``, ``field`` and ``location`` are set when the failure is a
    problem with a specific entry rather than with the YAML as a whole.
    """

    def __init__(
        self,
        message: str,
        *,
        entity: Optional[str] = None,
        field: Optional[str] = None,
        location: Optional[str] = None,
    ):
        super().__init__(message)
        self.entity = entity
        self.field = field
        self.location = location


def _format_location(loc: Sequence[Union[str, int]]) -> str:
    parts = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            parts.append(f".{part}" if parts else str(part))
    return "".join(parts)


def _entity_for(loc: Sequence[Union[str, int]]) -> str:
    """Name the entity owning the last element of a pydantic error location."""
    for part in reversed(loc[:-1]):
        if isinstance(part, str) and part in ENTITY_BY_KEY:
            return ENTITY_BY_KEY[part]
    return "OnboardingDocument"


def _translate(error: ValidationError) -> ParseError:
    first = error.errors()[0]
    loc = tuple(first["loc"])
    # Tuple validation appends the item index; entity errors end in a field name
    field = next((p for p in reversed(loc) if isinstance(p, str)), ROOT_KEY)
    owner = loc[: loc.index(field) + 1] if field in loc else loc
    entity = _entity_for(owner)
    location = _format_location(loc) or ROOT_KEY

    if loc and isinstance(loc[-1], int):
        # The list entry itself is not a mapping, e.g. ``- just a string``
        entity = ENTITY_BY_KEY.get(field, entity)
        message = f"{entity} entry is malformed (at {location}): {first['msg']}"
    elif first["type"] == "missing":
        message = f"{entity} missing '{field}' (at {location})"
    else:
        message = f"{entity} has invalid '{field}' (at {location}): {first['msg']}"

    count = error.error_count()
    if count > 1:
        message += f" and {count - 1} more problem(s)"
    return ParseError(message, entity=entity, field=field, location=location)


def _load_yaml(raw: str) -> Any:
    try:
        return yaml.load(raw, Loader=GuideLoader)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        where = f" at line {mark.line + 1}, column {mark.column + 1}" if mark else ""
        raise ParseError(f"Onboarding data is not valid YAML{where}: {e}") from e


def parse(raw: str) -> OnboardingDocument:
    """Parse raw YAML text into an OnboardingDocument.

    Args:
        raw: The full document text, wrapped in a top-level ``onboarding`` key.

    Returns:
        A fresh, immutable OnboardingDocument.

    Raises:
        ParseError: If the text is not YAML, has no ``onboarding`` mapping,
            or a present entity lacks a required field.
    """
    tree = _load_yaml(raw)

    if not isinstance(tree, dict):
        raise ParseError(
            f"Onboarding data must be a mapping with an '{ROOT_KEY}' key, "
            f"got {type(tree).__name__}"
        )
    if ROOT_KEY not in tree:
        raise ParseError(f"Onboarding data is missing the '{ROOT_KEY}' key", field=ROOT_KEY)

    body = tree[ROOT_KEY]
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise ParseError(
            f"'{ROOT_KEY}' must be a mapping, got {type(body).__name__}",
            entity="OnboardingDocument",
            location=ROOT_KEY,
        )

    try:
        document = OnboardingDocument.model_validate(body)
    except ValidationError as e:
        raise _translate(e) from e

    logger.debug(
        f"Parsed onboarding document: organization={document.organization is not None}, "
        f"{len(document.projects)} projects, {len(document.roles)} roles"
    )
    return document


def parse_file(path: Union[str, Path]) -> OnboardingDocument:
    """Parse a local onboarding YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Onboarding file not found: {path}")

    return parse(path.read_text(encoding="utf-8"))
