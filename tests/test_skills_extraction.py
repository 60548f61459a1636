"""Tests for skills extraction."""

from cvstudio.core.skills_parser import parse_skills


def test_inline_skills_stop_at_next_section():
    text = "Skills: Python, Go, Leadership\nExperience\nSoftware Engineer at Acme Corp"
    assert parse_skills(text) == ["Python", "Go", "Leadership"]


def test_skills_section_with_bullets():
    text = "Jane Doe\nSkills\n• Python\n• SQL\n• Docker"
    assert parse_skills(text) == ["Python", "SQL", "Docker"]


def test_skills_header_with_colon_on_own_line():
    text = "Technical Skills:\nPython\nJavaScript\nEducation\nState University"
    assert parse_skills(text) == ["Python", "JavaScript"]


def test_skills_deduplicated_in_first_seen_order():
    assert parse_skills("Skills: Python, SQL, Python, Go, SQL") == ["Python", "SQL", "Go"]


def test_single_character_fragments_dropped():
    assert parse_skills("Skills: C, R, Go") == ["Go"]


def test_labeled_skills_capped_at_twelve():
    text = "Skills: " + ", ".join(f"Tool{i}" for i in range(15))
    skills = parse_skills(text)
    assert len(skills) == 12
    assert skills[0] == "Tool0"
    assert skills[-1] == "Tool11"


def test_labeled_block_limited_to_400_characters():
    text = "Skills: Python, " + ("x" * 420) + ", Rust"
    assert "Rust" not in parse_skills(text)


def test_free_tokens_when_no_skills_label():
    text = (
        "Jane Doe\n"
        "Python, Docker, Kubernetes\n"
        "I built many large distributed systems over the last ten years."
    )
    assert parse_skills(text) == ["Jane Doe", "Python", "Docker", "Kubernetes"]


def test_free_tokens_allow_symbols_and_digits():
    assert parse_skills("Python3, C++, C#, Node.js") == ["Python3", "C++", "C#", "Node.js"]


def test_free_tokens_reject_long_phrases():
    assert parse_skills("Senior Software Engineer\nPython") == ["Python"]


def test_free_tokens_capped_at_eight():
    text = ", ".join(f"Lang{chr(65 + i)}" for i in range(10))
    skills = parse_skills(text)
    assert len(skills) == 8
    assert skills[0] == "LangA"


def test_no_match_returns_empty():
    assert parse_skills("") == []
    assert parse_skills("1234, 5678\n!!!") == []
