"""
Education extraction from raw resume text.

Produces at most one entry: first line of the section is the school, the
second the degree, the next two become details.
"""

import logging
from typing import List

from cvstudio.core.schemas import EducationEntry
from cvstudio.core.section_locator import EDUCATION_LABELS, find_section
from cvstudio.core.text_normalization import StarterPicker, enhance_bullet, pick_first

logger = logging.getLogger(__name__)


def parse_education(text: str, pick: StarterPicker = pick_first) -> List[EducationEntry]:
    section = find_section(text, EDUCATION_LABELS)
    if not section:
        return []

    lines = [ln.strip() for ln in section.splitlines() if ln.strip()]
    if not lines:
        return []

    entry = EducationEntry(
        school=lines[0],
        degree=lines[1] if len(lines) > 1 else "",
        details=[enhance_bullet(ln, pick) for ln in lines[2:4]],
    )
    logger.debug("Education entry extracted: school=%r", entry.school)
    return [entry]
