"""Contact details from the top of a resume: email, phone, links, name."""

import re
from typing import Dict

from cvstudio.core.section_locator import is_section_heading

EMAIL_RE = re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.IGNORECASE)
PHONE_RE = re.compile(r"(?:\+?\d{1,3}[-.\s]?)?(?:\(\d{3}\)|\d{3})[-.\s]?\d{3}[-.\s]?\d{4}\b")
URL_RE = re.compile(r"\b(?:https?://|www\.)[^\s)>\]]+", re.IGNORECASE)
LINKEDIN_RE = re.compile(r"\b(?:https?://)?(?:www\.)?linkedin\.com/[^\s)>\]]+", re.IGNORECASE)
NAME_RE = re.compile(r"[A-Za-z][A-Za-z.'-]*(?: [A-Za-z][A-Za-z.'-]*){1,3}")

NAME_SEARCH_LINES = 5

# Words that mark a job title line ("Software Engineer at Acme"), never a name
ROLE_WORDS = {
    "at", "engineer", "developer", "manager", "designer", "analyst", "consultant",
    "architect", "scientist", "specialist", "director", "intern", "lead", "head",
    "officer", "administrator", "coordinator", "assistant", "associate",
    "founder", "president", "student", "teacher", "nurse", "accountant",
}


def _looks_like_name(line: str) -> bool:
    t = " ".join(line.split())
    if not t or len(t) > 60:
        return False
    if is_section_heading(t):
        return False
    if any(word.lower() in ROLE_WORDS for word in t.split()):
        return False
    return bool(NAME_RE.fullmatch(t))


def parse_contact(text: str) -> Dict[str, str]:
    """
    Return the contact fields found in `text`, keyed like ContactInfo.

    Fields that cannot be found are left out.
    """
    found: Dict[str, str] = {}
    if not text:
        return found

    m = EMAIL_RE.search(text)
    if m:
        found["email"] = m.group(0)

    m = PHONE_RE.search(text)
    if m:
        found["phone"] = m.group(0).strip()

    m = LINKEDIN_RE.search(text)
    if m:
        found["linkedin"] = m.group(0).rstrip(".,;")

    for m in URL_RE.finditer(text):
        url = m.group(0).rstrip(".,;")
        if "linkedin.com" not in url.lower():
            found["website"] = url
            break

    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    for line in lines[:NAME_SEARCH_LINES]:
        if _looks_like_name(line):
            found["full_name"] = " ".join(line.split())
            break

    return found
