"""Tests for experience extraction from raw resume text."""

from cvstudio.core.experience_parser import parse_experience, split_role_company
from cvstudio.core.text_normalization import STARTERS, RoundRobinStarterPicker


def test_role_at_company():
    text = "Skills: Python, Go, Leadership\nExperience\nSoftware Engineer at Acme Corp"
    entries = parse_experience(text)
    assert len(entries) == 1
    assert entries[0].role == "Software Engineer"
    assert entries[0].company == "Acme Corp"
    assert entries[0].location == ""
    assert entries[0].start == ""
    assert entries[0].bullets == []


def test_company_dash_role():
    entries = parse_experience("Experience\nAcme Corp - Staff Engineer")
    assert entries[0].company == "Acme Corp"
    assert entries[0].role == "Staff Engineer"


def test_plain_line_is_role_only():
    entries = parse_experience("Work Experience\nFreelance consulting, 2019")
    assert entries[0].role == "Freelance consulting, 2019"
    assert entries[0].company == ""


def test_split_keeps_only_second_piece():
    assert split_role_company("Lead at Foo at Bar") == ("Lead", "Foo")
    assert split_role_company("Foo - Lead - Remote") == ("Lead", "Foo")


def test_short_lines_skipped_and_three_entries_max():
    text = (
        "Experience\n"
        "Dev\n"
        "Engineer at Company 1\n"
        "Engineer at Company 2\n"
        "Engineer at Company 3\n"
        "Engineer at Company 4\n"
    )
    entries = parse_experience(text)
    assert [e.company for e in entries] == ["Company 1", "Company 2", "Company 3"]


def test_entries_get_unique_ids():
    text = "Experience\nEngineer at Company 1\nEngineer at Company 2"
    entries = parse_experience(text)
    assert len({e.id for e in entries}) == 2


def test_every_entry_shares_section_bullets():
    """Known limitation: bullets come from the whole section, not per job."""
    text = (
        "Experience\n"
        "Engineer at Company 1\n"
        "Engineer at Company 2\n"
        "Rebuilt the billing pipeline and cut monthly costs by 30 percent. "
        "Mentored four junior engineers across two product teams."
    )
    entries = parse_experience(text, RoundRobinStarterPicker())
    assert len(entries) == 3
    first = entries[0].bullets
    assert len(first) == 2
    assert all(e.bullets == first for e in entries)
    assert entries[1].bullets is not first
    # Bullets are rewritten once per pass, so the starters do not rotate per entry
    assert first[0].startswith(STARTERS[0] + " ")
    assert first[1] == "Led Mentored four junior engineers across two product teams."


def test_no_experience_section_returns_empty():
    assert parse_experience("Jane Doe\nSkills: Python") == []
    assert parse_experience("") == []
    assert parse_experience("Experience") == []
