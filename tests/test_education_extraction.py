"""
Tests for education entry extraction.

Covers the degree trigger and the school/year/location fill order.
"""

import pytest

from resume_profile.core.education_parser import (
    has_degree_keyword,
    is_institution_line,
    parse_education,
)


# ===== DEGREE KEYWORD TESTS =====

@pytest.mark.parametrize(
    "line",
    [
        "B.Tech in Computer Science",
        "B.E. Mechanical",
        "B.S. in Engineering",
        "M.Tech (Data Science)",
        "M.S. Statistics",
        "Bachelor of Arts",
        "Master of Business Administration",
        "Diploma in Design",
        "bachelor of commerce",
    ],
)
def test_degree_keywords_detected(line):
    assert has_degree_keyword(line)


def test_non_degree_lines():
    assert not has_degree_keyword("State University")
    assert not has_degree_keyword("Austin, TX")


def test_institution_keywords():
    assert is_institution_line("Indian Institute of Technology")
    assert is_institution_line("city college")
    assert not is_institution_line("Austin")


# ===== ENTRY PARSING TESTS =====

def test_full_entry():
    section = """B.Tech in Computer Science
Indian Institute of Technology
2016 - 2020
Delhi"""
    entries = parse_education(section)
    assert len(entries) == 1
    edu = entries[0]
    assert edu.degree == "B.Tech in Computer Science"
    assert edu.school == "Indian Institute of Technology"
    assert edu.year == "2016"
    assert edu.location == "Delhi"


def test_multiple_entries_in_order():
    section = """Master of Science
State University
2022
Bachelor of Arts
City College
2018"""
    entries = parse_education(section)
    assert [e.degree for e in entries] == ["Master of Science", "Bachelor of Arts"]
    assert [e.school for e in entries] == ["State University", "City College"]
    assert [e.year for e in entries] == ["2022", "2018"]


def test_location_before_year():
    """A short capitalized line without a year fills location; the year still comes later."""
    entries = parse_education("Diploma in Design\nParis\n2015")
    assert entries[0].location == "Paris"
    assert entries[0].year == "2015"
    assert entries[0].school == ""


def test_year_set_once():
    entries = parse_education("B.S. Physics\n2010\n2012")
    assert entries[0].year == "2010"
    assert entries[0].location == ""


def test_long_line_not_location():
    entries = parse_education("B.S. Physics\nGraduated with honors and distinction")
    assert entries[0].location == ""


def test_lines_before_degree_ignored():
    entries = parse_education("Stanford University\nB.S. Physics")
    assert len(entries) == 1
    assert entries[0].school == ""


def test_degree_only_entry_still_emitted():
    entries = parse_education("B.S. Physics\nM.S. Physics")
    assert [e.degree for e in entries] == ["B.S. Physics", "M.S. Physics"]


def test_empty_section():
    assert parse_education("") == []
