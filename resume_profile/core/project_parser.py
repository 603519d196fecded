"""
Project parsing module.

Project titles have no fixed marker, so a title is recognized by shape: an
all-caps or Title Case line, a line ending in a project noun ("Weather App"),
or one that mentions Project/App/System/Platform. The title rules are an
ordered list so each can be tested on its own.
"""

import logging
import re
from functools import lru_cache
from typing import Callable, List, Optional, Tuple

from resume_profile.core.rules import DEFAULT_RULES, ParserRules, alternation, contains_any_re
from resume_profile.core.schemas import ProjectEntry
from resume_profile.core.state_machine import EntryStateMachine
from resume_profile.core.text_normalization import is_bullet_line, normalize_lines, strip_bullet

logger = logging.getLogger(__name__)


TITLE_MIN_LENGTH = 4
TITLE_MAX_LENGTH = 99
TITLE_CASE_RE = re.compile(r"[A-Z][a-zA-Z\s&]+")
LEADING_YEAR_RE = re.compile(r"^\d{4}")


@lru_cache(maxsize=128)
def _label_prefix_re(labels: Tuple[str, ...]) -> re.Pattern:
    return re.compile(rf"^(?:{alternation(labels)})\b:?", re.IGNORECASE)


@lru_cache(maxsize=128)
def _tech_stack_label_re(labels: Tuple[str, ...]) -> re.Pattern:
    return re.compile(rf"^(?:{alternation(labels)})\s*:\s*(.*)$", re.IGNORECASE)


@lru_cache(maxsize=128)
def _suffix_re(suffixes: Tuple[str, ...]) -> re.Pattern:
    return re.compile(rf"\b(?:{alternation(suffixes)})$", re.IGNORECASE)


@lru_cache(maxsize=128)
def _keyword_re(keywords: Tuple[str, ...]) -> re.Pattern:
    return re.compile(rf"\b(?:{alternation(keywords)})\b", re.IGNORECASE)


@lru_cache(maxsize=128)
def _stop_re(keywords: Tuple[str, ...]) -> re.Pattern:
    return re.compile(rf"^(?:{alternation(keywords)})\s*:?$", re.IGNORECASE)


# ===== TITLE RULES =====
# A candidate line (right length, not a bullet/label/year) is a title if any rule accepts it.

def _all_caps(line: str, rules: ParserRules) -> bool:
    return line.isupper()


def _title_case(line: str, rules: ParserRules) -> bool:
    return bool(TITLE_CASE_RE.fullmatch(line))


def _project_suffix(line: str, rules: ParserRules) -> bool:
    return bool(_suffix_re(rules.project_suffixes).search(line))


def _project_keyword(line: str, rules: ParserRules) -> bool:
    return bool(_keyword_re(rules.project_keywords).search(line))


PROJECT_TITLE_RULES: List[Tuple[str, Callable[[str, ParserRules], bool]]] = [
    ("all_caps", _all_caps),
    ("title_case", _title_case),
    ("project_suffix", _project_suffix),
    ("project_keyword", _project_keyword),
]


def matching_title_rule(line: str, rules: ParserRules = DEFAULT_RULES) -> Optional[str]:
    """
    Name of the first title rule that accepts the line, or None.

    Lines outside 4-99 characters, bullet lines, "Technologies:"-style labels
    and lines starting with a year are never titles.
    """
    if not (TITLE_MIN_LENGTH <= len(line) <= TITLE_MAX_LENGTH):
        return None
    if is_bullet_line(line, rules.bullet_glyphs):
        return None
    if _label_prefix_re(rules.project_labels).match(line):
        return None
    if LEADING_YEAR_RE.match(line):
        return None
    for rule_name, rule in PROJECT_TITLE_RULES:
        if rule(line, rules):
            return rule_name
    return None


def is_section_stop(line: str, rules: ParserRules = DEFAULT_RULES) -> bool:
    """A line that is itself a top-level heading (EDUCATION, SKILLS, ...)."""
    return bool(_stop_re(rules.project_stop_keywords).match(line))


def _append_tech(entry: ProjectEntry, tech: str) -> None:
    entry.tech_stack = f"{entry.tech_stack}, {tech}" if entry.tech_stack else tech


def parse_projects(section: str, rules: ParserRules = DEFAULT_RULES) -> List[ProjectEntry]:
    """Parse the projects section into entries in source order."""
    machine: EntryStateMachine[ProjectEntry] = EntryStateMachine("project", lambda e: bool(e.name))

    for line in normalize_lines(section):
        if is_section_stop(line, rules):
            logger.debug(f"Section keyword '{line}' ends project parsing")
            break

        rule_name = matching_title_rule(line, rules)
        if rule_name:
            logger.debug(f"Project title '{line}' (rule: {rule_name})")
            machine.start(ProjectEntry(name=line))
            continue

        entry = machine.current
        if entry is None:
            continue

        cleaned = strip_bullet(line, rules.bullet_glyphs)
        label = _tech_stack_label_re(rules.tech_stack_labels).match(cleaned)
        if label:
            entry.tech_stack = label.group(1).strip()
        elif is_bullet_line(line, rules.bullet_glyphs) or len(line) > rules.project_description_min_length:
            if cleaned and not _label_prefix_re(rules.tech_stack_labels).match(cleaned):
                entry.bullets.append(cleaned)
        elif contains_any_re(rules.tech_vocabulary).search(line):
            _append_tech(entry, line)

    return machine.finish()
