"""Tests for project extraction: title rules, descriptions, tech stack and the stop keyword."""

import pytest

from resume_profile.core.project_parser import (
    is_section_stop,
    matching_title_rule,
    parse_projects,
)


# ===== TITLE RULES =====

@pytest.mark.parametrize(
    "line,rule",
    [
        ("WEATHER APP", "all_caps"),
        ("Weather Dashboard", "title_case"),
        ("my portfolio website", "project_suffix"),
        ("capstone project for class", "project_keyword"),
    ],
)
def test_title_rules(line, rule):
    assert matching_title_rule(line) == rule


@pytest.mark.parametrize(
    "line",
    [
        "• Weather App",  # bullet
        "- Weather App",
        "Tech Stack: React",  # label
        "Duration: 3 months",
        "App",  # too short
        "2020 Weather App",  # leading year
        "plain lowercase words",
        "X" * 100,  # too long
    ],
)
def test_non_titles(line):
    assert matching_title_rule(line) is None


def test_section_stop_keywords():
    assert is_section_stop("EDUCATION")
    assert is_section_stop("Experience:")
    assert not is_section_stop("Experience Tracker App")


# ===== ENTRY PARSING =====

def test_projects_with_descriptions_and_labels():
    section = """Weather Dashboard
• Built live forecasts from public APIs
Tech Stack: React, Node
CHAT APPLICATION
- Real-time messaging with websockets
Technologies: Python, Flask"""
    projects = parse_projects(section)
    assert [p.name for p in projects] == ["Weather Dashboard", "CHAT APPLICATION"]
    assert projects[0].bullets == ["Built live forecasts from public APIs"]
    assert projects[0].tech_stack == "React, Node"
    assert projects[1].bullets == ["Real-time messaging with websockets"]
    assert projects[1].tech_stack == "Python, Flask"


def test_bulleted_label_sets_tech_stack():
    projects = parse_projects("Budget Tracker\n• Tech Stack: Django, MySQL")
    assert projects[0].tech_stack == "Django, MySQL"
    assert projects[0].bullets == []


def test_label_overwrites_tech_stack():
    projects = parse_projects("Budget Tracker\nTools: Git\nTech Stack: Go")
    assert projects[0].tech_stack == "Go"


def test_known_technology_lines_append_to_tech_stack():
    projects = parse_projects("Budget Tracker\nnode, vue\npython")
    assert projects[0].tech_stack == "node, vue, python"


def test_bare_label_bullet_not_a_description():
    projects = parse_projects("Budget Tracker\n• Technologies used across the stack")
    assert projects[0].bullets == []


def test_stop_keyword_ends_parsing():
    section = """Inventory System
• Tracks stock levels in real time
EDUCATION
Library App"""
    projects = parse_projects(section)
    assert [p.name for p in projects] == ["Inventory System"]
    assert projects[0].bullets == ["Tracks stock levels in real time"]


def test_lines_before_first_title_ignored():
    projects = parse_projects("built during my spare time\nWeather App")
    assert len(projects) == 1
    assert projects[0].name == "Weather App"
    assert projects[0].bullets == []


def test_empty_section():
    assert parse_projects("") == []
