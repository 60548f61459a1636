"""
Merging extraction results into a profile, and the on-demand improve action.

prefill_from_text() fills gaps and never overwrites what the user entered.
A field counts as a gap when it is empty, or:
- summary: shorter than 50 characters
- experiences: first entry has no role
- education: first entry has no school
"""

import logging

from cvstudio.core.contact_parser import parse_contact
from cvstudio.core.education_parser import parse_education
from cvstudio.core.experience_parser import parse_experience
from cvstudio.core.schemas import Profile
from cvstudio.core.skills_parser import parse_skills
from cvstudio.core.text_normalization import (
    StarterPicker,
    enhance_bullet,
    extract_sentences,
    normalize_summary,
    pick_first,
)

logger = logging.getLogger(__name__)

SUMMARY_PREFILL_MIN_LENGTH = 50
SUMMARY_SENTENCES = 2


def summary_is_gap(profile: Profile) -> bool:
    return not profile.summary or len(profile.summary) < SUMMARY_PREFILL_MIN_LENGTH


def skills_are_gap(profile: Profile) -> bool:
    return not profile.skills or all(not s for s in profile.skills)


def experiences_are_gap(profile: Profile) -> bool:
    return not profile.experiences or not profile.experiences[0].role


def education_is_gap(profile: Profile) -> bool:
    return not profile.education or not profile.education[0].school


def prefill_from_text(profile: Profile, text: str, pick: StarterPicker = pick_first) -> Profile:
    """Return a copy of `profile` with empty fields filled from `text`."""
    if not text:
        return profile

    updates = {}

    contact_found = parse_contact(text)
    contact_updates = {
        key: value
        for key, value in contact_found.items()
        if not getattr(profile.contact, key)
    }
    if contact_updates:
        updates["contact"] = profile.contact.model_copy(update=contact_updates)

    if summary_is_gap(profile):
        summary = " ".join(extract_sentences(text, SUMMARY_SENTENCES))
        if summary:
            updates["summary"] = summary

    if skills_are_gap(profile):
        skills = parse_skills(text)
        if skills:
            updates["skills"] = skills

    if experiences_are_gap(profile):
        experiences = parse_experience(text, pick)
        if experiences:
            updates["experiences"] = experiences

    if education_is_gap(profile):
        education = parse_education(text, pick)
        if education:
            updates["education"] = education

    logger.debug("Prefill updated fields: %s", sorted(updates))
    return profile.model_copy(update=updates, deep=True)


def improve_profile(profile: Profile, pick: StarterPicker = pick_first) -> Profile:
    """
    Polish the profile's wording: summary, skills, experience and project bullets.

    Blank bullets stay blank; entry ids and everything else are kept.
    """
    experiences = [
        exp.model_copy(update={"bullets": [enhance_bullet(b, pick) for b in exp.bullets]})
        for exp in profile.experiences
    ]
    projects = [
        proj.model_copy(update={"bullets": [enhance_bullet(b, pick) for b in proj.bullets]})
        for proj in profile.projects
    ]
    return profile.model_copy(deep=True, update={
        "summary": normalize_summary(profile.summary),
        "skills": [s.strip() for s in profile.skills if s and s.strip()],
        "experiences": experiences,
        "projects": projects,
    })
