"""Skill extraction from raw resume text."""

import logging
import re
from typing import Iterable, List

from cvstudio.core.section_locator import cut_at_section_heading

logger = logging.getLogger(__name__)

SKILL_BLOCK_RE = re.compile(r"skills?\s*[:\n]([\s\S]{0,400})", re.IGNORECASE)
BLOCK_SPLIT_RE = re.compile(r"\n|,|•")
FREE_SPLIT_RE = re.compile(r",|\n")

# One or two short tokens: "Python", "C++", "Node.js", "Machine Learning"
FREE_TOKEN_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+#.\-]*(?: [A-Za-z0-9+#.\-]+)?$")
FREE_TOKEN_MAX_LEN = 31

MAX_LABELED_SKILLS = 12
MAX_FREE_SKILLS = 8


def _dedupe(items: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def parse_skills(text: str) -> List[str]:
    """
    Extract skills.

    1) Labeled block: text after "Skills:" / "Skills\\n" (400 chars max, stopping
       at the next section title), split on newlines, commas and bullets.
    2) Otherwise, short comma/line fragments anywhere in the document.
    """
    if not text:
        return []

    m = SKILL_BLOCK_RE.search(text)
    if m:
        block = cut_at_section_heading(m.group(1))
        parts = [p.strip() for p in BLOCK_SPLIT_RE.split(block)]
        skills = _dedupe(p for p in parts if len(p) > 1)[:MAX_LABELED_SKILLS]
        logger.debug("Skills from labeled block: %d", len(skills))
        return skills

    candidates = [p.strip() for p in FREE_SPLIT_RE.split(text)]
    skills = _dedupe(
        c for c in candidates
        if 1 < len(c) <= FREE_TOKEN_MAX_LEN and FREE_TOKEN_RE.match(c)
    )[:MAX_FREE_SKILLS]
    logger.debug("Skills from free tokens: %d", len(skills))
    return skills
