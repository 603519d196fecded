"""Comprehensive tests for skills extraction."""

from resume_profile.core.rules import DEFAULT_RULES
from resume_profile.core.skills_extractor import extract_skills, split_skill_line


def test_category_labels_are_stripped():
    """Category prefixes are removed and order is kept across lines."""
    section = "Frontend: React, CSS\nBackend: Node, Go"
    assert extract_skills(section) == ["React", "CSS", "Node", "Go"]


def test_category_label_case_insensitive():
    assert split_skill_line("languages: Java, Kotlin") == ["Java", "Kotlin"]


def test_all_separators():
    assert split_skill_line("Python | Go • SQL · Rust - Docker") == ["Python", "Go", "SQL", "Rust", "Docker"]


def test_colon_splits_unknown_labels():
    """Only the fixed vocabulary is stripped; other labels split on the colon."""
    assert split_skill_line("Databases: MySQL, Redis") == ["Databases", "MySQL", "Redis"]


def test_short_tokens_dropped():
    assert split_skill_line("C, R, Go") == ["Go"]


def test_bare_category_tokens_dropped():
    assert split_skill_line("Tools, Git") == ["Git"]
    assert split_skill_line("Git, tools") == ["Git"]
    assert split_skill_line("Technologies") == []


def test_skills_deduplication_is_exact():
    """Duplicates are removed under exact string equality only."""
    section = "Python, Go\nPython, python"
    assert extract_skills(section) == ["Python", "Go", "python"]


def test_skills_capped():
    section = ", ".join(f"Skill{i}" for i in range(30))
    skills = extract_skills(section)
    assert len(skills) == 20
    assert skills == [f"Skill{i}" for i in range(20)]


def test_custom_cap():
    rules = DEFAULT_RULES.model_copy(update={"max_skills": 2})
    assert extract_skills("Go, Rust, Zig", rules) == ["Go", "Rust"]


def test_empty_section():
    assert extract_skills("") == []
    assert extract_skills("\n\n") == []
