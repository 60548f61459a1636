"""
Red flags: rule-based completeness checks for a profile.

Rules run in a fixed order and each contributes at most one message, so the
same profile and job field always give the same list:

  1. missing full name
  2. no email and no phone
  3. summary missing or under 60 characters
  4. no experience bullet contains a number
  5. a gap of more than 6 months between consecutive roles
  6. must-have Skills / Projects / Education for the job field are empty

Dates that do not parse are ignored, never reported.
"""

import re
from datetime import date
from typing import List, Mapping, Optional, Tuple

from cvstudio.core.date_parser import parse_date
from cvstudio.core.schemas import ExperienceEntry, Profile, SectionGuidance

SUMMARY_MIN_LENGTH = 60
GAP_MAX_MONTHS = 6
DAYS_PER_MONTH = 30

DIGIT_RE = re.compile(r"\d")

MISSING_NAME = "Missing full name in the header."
MISSING_CONTACT = "Add at least one direct contact method (email or phone)."
SHORT_SUMMARY = "Summary is short. Add scope, domain, and impact in 2-3 lines."
NO_METRICS = "No metrics detected. Add quantified impact in experience bullets."
EMPLOYMENT_GAP = "Detected a gap longer than 6 months between roles. Consider adding explanation or projects."


class RedFlagAnalyzer:
    """Evaluates a profile against the rules above and a job-field guidance table."""

    def __init__(self, guidance: Mapping[str, SectionGuidance]):
        self.guidance = guidance

    def analyze(self, profile: Profile, job_field: str, today: Optional[date] = None) -> List[str]:
        flags: List[str] = []

        if not profile.contact.full_name:
            flags.append(MISSING_NAME)
        if not profile.contact.email and not profile.contact.phone:
            flags.append(MISSING_CONTACT)
        if self.summary_is_short(profile.summary):
            flags.append(SHORT_SUMMARY)
        if not self.has_metrics(profile.experiences):
            flags.append(NO_METRICS)
        if self.has_employment_gap(profile.experiences, today=today):
            flags.append(EMPLOYMENT_GAP)

        flags.extend(self.missing_must_haves(profile, job_field))
        return flags

    @staticmethod
    def summary_is_short(summary: str) -> bool:
        return not summary or len(summary) < SUMMARY_MIN_LENGTH

    @staticmethod
    def has_metrics(experiences: List[ExperienceEntry]) -> bool:
        """True if any non-blank experience bullet contains a digit."""
        return any(
            DIGIT_RE.search(bullet)
            for exp in experiences
            for bullet in exp.bullets
            if bullet
        )

    @staticmethod
    def has_employment_gap(experiences: List[ExperienceEntry], today: Optional[date] = None) -> bool:
        """
        Sort roles with a parseable start date and look for a gap of more than
        6 months (days / 30, not rounded) between one role's end and the next
        role's start. Pairs where the earlier role has no parseable end are
        skipped.
        """
        dated: List[Tuple[date, Optional[date]]] = []
        for exp in experiences:
            start = parse_date(exp.start, today=today)
            if start is None:
                continue
            dated.append((start, parse_date(exp.end, today=today)))

        if len(dated) < 2:
            return False

        dated.sort(key=lambda pair: pair[0])
        for (_, prev_end), (next_start, _) in zip(dated, dated[1:]):
            if prev_end is None:
                continue
            gap_months = (next_start - prev_end).days / DAYS_PER_MONTH
            if gap_months > GAP_MAX_MONTHS:
                return True
        return False

    def missing_must_haves(self, profile: Profile, job_field: str) -> List[str]:
        """
        Field-specific warnings for empty must-have sections.

        Only Skills, Projects and Education are checked; other must-have names
        in the guidance table have no matching profile collection rule.
        """
        guidance = self.guidance.get(job_field)
        if guidance is None:
            return []

        flags: List[str] = []
        for section in guidance.must:
            if section == "Skills" and all(not s for s in profile.skills):
                flags.append(f"{job_field} roles typically need a strong Skills section.")
            if section == "Projects" and all(not p.name for p in profile.projects):
                flags.append(f"{job_field} roles often expect Projects or Portfolio highlights.")
            if section == "Education" and all(not e.school for e in profile.education):
                flags.append(f"{job_field} roles usually require Education details.")
        return flags
