"""Project stage - flatten an OnboardingDocument into ordered sections."""

import logging
from typing import List

from ..models import OnboardingDocument, Section, SectionKind

logger = logging.getLogger(__name__)


ORGANIZATION_TITLE = "Organization"


def project(doc: OnboardingDocument) -> List[Section]:
    """Project a document into render-ready sections.

    Order: the organization (if present), then each project, then each
    role, all in declaration order. Sub-items are copied as-is; nothing is
    filtered or reordered.
    """
    sections: List[Section] = []

    if doc.organization is not None:
        org = doc.organization
        sections.append(Section(
            kind=SectionKind.ORGANIZATION,
            title=ORGANIZATION_TITLE,
            checklists=org.checklists,
            access=org.access,
            internal_sites=org.internal_sites,
        ))

    for proj in doc.projects:
        sections.append(Section(
            kind=SectionKind.PROJECT,
            title=proj.name,
            checklists=proj.checklists,
            access=proj.access,
        ))

    for role in doc.roles:
        sections.append(Section(
            kind=SectionKind.ROLE,
            title=role.name,
            checklists=role.checklists,
            access=role.access,
        ))

    logger.debug(f"Projected {len(sections)} sections")
    return sections
