"""Tests for prefilling a profile from text and the improve action."""

from cvstudio.core.profile_merge import improve_profile, prefill_from_text
from cvstudio.core.schemas import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    Profile,
    ProjectEntry,
)
from cvstudio.core.text_normalization import SUMMARY_CLOSING

SCENARIO = "Skills: Python, Go, Leadership\nExperience\nSoftware Engineer at Acme Corp"

RICH_TEXT = """Jane Doe
jane@example.com
Seasoned platform engineer who has spent a decade scaling payment infrastructure.
She enjoys mentoring and writing clear design documents for large teams.
Skills: Kotlin, Terraform
Experience
Platform Engineer at Stripe, 2019
Education
University of Toronto, 2014
"""

LONG_SUMMARY = "Engineering leader with twelve years of shipping developer tools and platforms."


def test_scenario_fills_skills_and_experience():
    profile = prefill_from_text(Profile(), SCENARIO)
    assert profile.skills == ["Python", "Go", "Leadership"]
    assert len(profile.experiences) == 1
    assert profile.experiences[0].role == "Software Engineer"
    assert profile.experiences[0].company == "Acme Corp"
    # Nothing to fill from: stays as created
    assert profile.summary == ""
    assert len(profile.education) == 1
    assert profile.education[0].school == ""


def test_empty_text_returns_profile_unchanged():
    profile = Profile()
    assert prefill_from_text(profile, "") is profile


def test_user_content_never_overwritten():
    original = Profile(
        contact=ContactInfo(email="me@mine.org"),
        summary=LONG_SUMMARY,
        skills=["Rust"],
        experiences=[ExperienceEntry(role="CTO", company="Own Startup")],
        education=[EducationEntry(school="MIT")],
    )
    merged = prefill_from_text(original, RICH_TEXT)

    assert merged.contact.email == "me@mine.org"
    assert merged.summary == LONG_SUMMARY
    assert merged.skills == ["Rust"]
    assert merged.experiences == original.experiences
    assert merged.education == original.education
    # Gaps are still filled
    assert merged.contact.full_name == "Jane Doe"


def test_gaps_filled_from_text():
    merged = prefill_from_text(Profile(summary="Engineer."), RICH_TEXT)
    # Sentence splitting is naive: the email's dot ends a fragment too
    assert "Seasoned platform engineer who has spent a decade" in merged.summary
    assert merged.summary.endswith("design documents for large teams.")
    assert merged.skills == ["Kotlin", "Terraform"]
    assert merged.experiences[0].role == "Platform Engineer"
    assert merged.experiences[0].company == "Stripe, 2019"
    assert merged.education[0].school == "University of Toronto, 2014"
    assert merged.contact.email == "jane@example.com"


def test_short_summary_kept_when_text_has_no_sentences():
    merged = prefill_from_text(Profile(summary="Engineer."), SCENARIO)
    assert merged.summary == "Engineer."


def test_blank_first_experience_counts_as_gap():
    profile = Profile(experiences=[ExperienceEntry(role=""), ExperienceEntry(role="Intern")])
    merged = prefill_from_text(profile, SCENARIO)
    assert [e.role for e in merged.experiences] == ["Software Engineer"]


def test_input_profile_not_mutated():
    profile = Profile()
    before = profile.model_dump()
    prefill_from_text(profile, RICH_TEXT)
    assert profile.model_dump() == before


def test_improve_profile():
    profile = Profile(
        summary="  Backend   engineer ",
        skills=[" Python ", "", "  "],
        experiences=[ExperienceEntry(role="Dev", bullets=["cut costs by 20%", ""])],
        projects=[ProjectEntry(name="CLI", bullets=["- wrote a parser"])],
        education=[EducationEntry(school="MIT", details=["thesis on parsers"])],
    )
    improved = improve_profile(profile)

    assert improved.summary == f"Backend engineer {SUMMARY_CLOSING}"
    assert improved.skills == ["Python"]
    assert improved.experiences[0].bullets == ["Delivered cut costs by 20%", ""]
    assert improved.projects[0].bullets == ["Delivered wrote a parser."]
    assert improved.education[0].details == ["thesis on parsers"]
    assert improved.experiences[0].id == profile.experiences[0].id


def test_improve_profile_is_idempotent():
    profile = Profile(
        summary="Engineer.",
        experiences=[ExperienceEntry(bullets=["- shipped v2", "grew revenue 3x"])],
    )
    once = improve_profile(profile)
    assert improve_profile(once) == once
