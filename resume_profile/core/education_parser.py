"""
Education parsing module for detecting and extracting education entries from resumes.

A degree line opens an entry. Following lines fill school, year and location,
each at most once, in that order of precedence.
"""

import logging
import re
from typing import List

from resume_profile.core.rules import DEFAULT_RULES, ParserRules, contains_any_re
from resume_profile.core.schemas import EducationEntry
from resume_profile.core.state_machine import EntryStateMachine
from resume_profile.core.text_normalization import normalize_lines

logger = logging.getLogger(__name__)


YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
CAPITALIZED_WORD_RE = re.compile(r"[A-Z][a-z]+")


def has_degree_keyword(line: str, rules: ParserRules = DEFAULT_RULES) -> bool:
    """
    Check if text contains degree keywords (B.Tech, M.S, Bachelor, ...).

    Case-insensitive: "bachelor of arts" and "B.TECH" both qualify.
    """
    return bool(contains_any_re(rules.degree_keywords).search(line))


def is_institution_line(line: str, rules: ParserRules = DEFAULT_RULES) -> bool:
    return bool(contains_any_re(rules.institution_keywords).search(line))


def looks_like_location(line: str, rules: ParserRules = DEFAULT_RULES) -> bool:
    return len(line) < rules.location_max_length and bool(CAPITALIZED_WORD_RE.search(line))


def _fill_field(entry: EducationEntry, line: str, rules: ParserRules) -> None:
    """Assign the line to the first unset field whose rule accepts it."""
    if not entry.school and is_institution_line(line, rules):
        entry.school = line
        return
    if not entry.year:
        m = YEAR_RE.search(line)
        if m:
            entry.year = m.group(0)
            return
    if not entry.location and looks_like_location(line, rules):
        entry.location = line


def parse_education(section: str, rules: ParserRules = DEFAULT_RULES) -> List[EducationEntry]:
    """Parse the education section into entries in source order."""
    machine: EntryStateMachine[EducationEntry] = EntryStateMachine(
        "education", lambda e: bool(e.degree)
    )

    for line in normalize_lines(section):
        if has_degree_keyword(line, rules):
            logger.debug(f"Degree line: '{line}'")
            machine.start(EducationEntry(degree=line))
            continue

        entry = machine.current
        if entry is not None:
            _fill_field(entry, line, rules)

    return machine.finish()
