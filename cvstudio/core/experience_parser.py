"""
Experience extraction from raw resume text.

Each qualifying line of the experience section becomes one entry:
- "Software Engineer at Acme Corp" -> role / company
- "Acme Corp - Software Engineer"  -> company / role
- anything else                    -> role only
Bullets come from the long sentences of the whole section, and every entry
of one pass gets the same bullets (the section is not split per job).
"""

import logging
from typing import List

from cvstudio.core.schemas import ExperienceEntry
from cvstudio.core.section_locator import EXPERIENCE_LABELS, find_section
from cvstudio.core.text_normalization import StarterPicker, enhance_bullet, extract_sentences, pick_first

logger = logging.getLogger(__name__)

MAX_ENTRIES = 3
MAX_BULLETS = 3
MIN_LINE_LENGTH = 6


def split_role_company(line: str) -> tuple[str, str]:
    """Return (role, company) for a single experience line."""
    if " at " in line:
        parts = line.split(" at ")
        return parts[0].strip(), parts[1].strip()
    if " - " in line:
        parts = line.split(" - ")
        return parts[1].strip(), parts[0].strip()
    return line, ""


def parse_experience(text: str, pick: StarterPicker = pick_first) -> List[ExperienceEntry]:
    section = find_section(text, EXPERIENCE_LABELS)
    if not section:
        return []

    lines = [ln.strip() for ln in section.splitlines() if ln.strip()]
    bullets = [enhance_bullet(s, pick) for s in extract_sentences(section, MAX_BULLETS)]

    entries: List[ExperienceEntry] = []
    for line in lines:
        if len(entries) >= MAX_ENTRIES:
            break
        if len(line) < MIN_LINE_LENGTH:
            continue
        role, company = split_role_company(line)
        entries.append(ExperienceEntry(role=role, company=company, bullets=list(bullets)))

    logger.debug("Experience entries extracted: %d", len(entries))
    return entries
