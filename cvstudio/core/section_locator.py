"""
Locate named sections inside raw resume text.

There is no grammar: a section starts right after the earliest occurrence of
one of its labels and runs until the next line that looks like a heading.
"""

import logging
import re
from typing import Iterable, Optional, Tuple

logger = logging.getLogger(__name__)

EXPERIENCE_LABELS = ("experience", "work experience", "employment")
EDUCATION_LABELS = ("education",)

# A short capitalised letters-only line between two newlines. Deliberately loose:
# it also fires on one-word lines inside a section ("Python") and misses titles
# with punctuation ("Projects & Awards"). Extraction fixtures depend on this.
NEXT_HEADING_RE = re.compile(r"\n\s*[A-Z][A-Za-z ]{3,20}\s*\n")

# Whole-line section titles, used where a block must stop at a real heading
# rather than at any short line.
SECTION_HEADINGS = {
    "summary",
    "profile",
    "professional summary",
    "about me",
    "experience",
    "work experience",
    "professional experience",
    "employment",
    "employment history",
    "work history",
    "education",
    "academic background",
    "projects",
    "personal projects",
    "certifications",
    "certificates",
    "licenses",
    "languages",
    "awards",
    "publications",
    "research",
    "interests",
    "references",
    "volunteering",
    "volunteer experience",
}

SECTION_HEADING_LINE_RE = re.compile(r"^\s*[A-Za-z][A-Za-z &]*:?\s*$")


def find_label(text: str, labels: Iterable[str]) -> Optional[Tuple[int, str]]:
    """
    Return (offset, label) for the earliest label found in `text`, or None.

    Matching is a case-insensitive substring search. On an offset tie the
    label listed first wins.
    """
    lower = text.lower()
    best: Optional[Tuple[int, str]] = None
    for label in labels:
        idx = lower.find(label)
        if idx != -1 and (best is None or idx < best[0]):
            best = (idx, label)
    return best


def find_section(text: str, labels: Iterable[str]) -> str:
    """
    Return the trimmed body of the section introduced by one of `labels`.

    Empty string when no label occurs in the text.
    """
    if not text:
        return ""
    labels = tuple(labels)
    found = find_label(text, labels)
    if found is None:
        logger.debug("No section found for labels %s", labels)
        return ""

    start, label = found
    after = text[start + len(label):]
    m = NEXT_HEADING_RE.search(after)
    if m:
        return after[:m.start()].strip()
    return after.strip()


def is_section_heading(line: str) -> bool:
    """True if the whole line is a known section title ("Experience", "EDUCATION:")."""
    if not SECTION_HEADING_LINE_RE.match(line):
        return False
    key = re.sub(r"\s+", " ", line.strip().rstrip(":")).lower()
    return key in SECTION_HEADINGS


def cut_at_section_heading(block: str) -> str:
    """Truncate `block` before the first line that is a known section title."""
    lines = block.split("\n")
    for i, line in enumerate(lines):
        # The first line is the remainder of the label line itself
        if i > 0 and is_section_heading(line):
            return "\n".join(lines[:i])
    return block
