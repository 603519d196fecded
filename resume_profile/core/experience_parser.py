"""
Experience parsing module.

Entries start on a job-title line ("Software Engineer  Acme Corp | 01/2020 - Present")
and collect bullets and, when the title line had none, a company line.
"""

import logging
import re
from functools import lru_cache
from typing import List, Tuple

from resume_profile.core.rules import DEFAULT_RULES, ParserRules, alternation
from resume_profile.core.schemas import ExperienceEntry
from resume_profile.core.state_machine import EntryStateMachine
from resume_profile.core.text_normalization import (
    collapse_whitespace,
    is_bullet_line,
    normalize_lines,
    strip_bullet,
)

logger = logging.getLogger(__name__)


PERIOD_RE = re.compile(r"\d{1,2}/\d{4}\s*[–\-]\s*(?:present|current|\d{1,2}/\d{4})", re.IGNORECASE)
FIELD_SPLIT_RE = re.compile(r"\s{2,}|\|")
# Header remnants (dates, "Present") that must not become bullets
DATE_REMNANT_RE = re.compile(r"present|current|\d{4}", re.IGNORECASE)
COMPANY_RE = re.compile(r"[A-Z][a-zA-Z\s&]+")


@lru_cache(maxsize=128)
def job_title_re(role_nouns: Tuple[str, ...]) -> re.Pattern:
    return re.compile(
        rf"[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\s*(?:{alternation(role_nouns)})\b",
        re.IGNORECASE,
    )


def is_job_title_line(line: str, rules: ParserRules = DEFAULT_RULES) -> bool:
    return bool(job_title_re(rules.role_nouns).search(line))


def parse_title_line(line: str) -> ExperienceEntry:
    """
    Build a fresh entry from a job-title line.

    Examples:
    - "Software Engineer  Acme Corp" → title="Software Engineer", company="Acme Corp"
    - "Web Developer | Initech 01/2019 - 12/2020" → period="01/2019 - 12/2020"
    - "Data Engineer" → title only
    """
    entry = ExperienceEntry()
    remainder = line
    m = PERIOD_RE.search(line)
    if m:
        entry.period = m.group(0)
        remainder = line.replace(m.group(0), "", 1)

    parts = [p.strip() for p in FIELD_SPLIT_RE.split(remainder.strip()) if p.strip()]
    if len(parts) >= 2:
        entry.title = parts[0]
        entry.company = collapse_whitespace(" ".join(parts[1:]))
    elif parts:
        entry.title = parts[0]
    return entry


def _has_identity(entry: ExperienceEntry) -> bool:
    return bool(entry.title or entry.company)


def parse_experience(section: str, rules: ParserRules = DEFAULT_RULES) -> List[ExperienceEntry]:
    """Parse the experience section into entries in source order."""
    machine: EntryStateMachine[ExperienceEntry] = EntryStateMachine("experience", _has_identity)

    for line in normalize_lines(section):
        if is_job_title_line(line, rules):
            logger.debug(f"Job title line: '{line}'")
            machine.start(parse_title_line(line))
            continue

        entry = machine.current
        if entry is None:
            continue

        if is_bullet_line(line, rules.bullet_glyphs) or len(line) > rules.bullet_min_length:
            bullet = strip_bullet(line, rules.bullet_glyphs)
            if bullet and not DATE_REMNANT_RE.search(bullet):
                entry.bullets.append(bullet)
        elif not entry.company and COMPANY_RE.search(line):
            entry.company = line

    return machine.finish()
