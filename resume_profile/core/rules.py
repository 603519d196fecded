"""
Rule tables for resume extraction.

Every vocabulary the parsers match against lives here as data so that a
stricter or looser parser is a different ``ParserRules`` instance, not a
different code path. Defaults reproduce the canonical rule set; callers can
override any table:

    rules = DEFAULT_RULES.model_copy(update={"max_skills": 30})
    profile = parse_resume_text(text, rules=rules)

Tuples are used throughout so rule sets stay hashable and derived regexes can
be cached with a bounded ``lru_cache``.
"""

import re
from functools import lru_cache
from typing import Tuple

from pydantic import BaseModel, ConfigDict


# ===== SECTION HEADERS =====
# Ordered by priority: the first synonym found in the text wins.

SKILLS_HEADERS = ("SKILLS", "TECHNICAL SKILLS")
EXPERIENCE_HEADERS = ("EXPERIENCE", "WORK EXPERIENCE", "WORK HISTORY")
EDUCATION_HEADERS = ("EDUCATION", "ACADEMIC BACKGROUND")
PROJECTS_HEADERS = ("PROJECTS", "PERSONAL PROJECTS", "PROJECT EXPERIENCE")

# Any of these ends the span of the section before it
SECTION_TERMINATORS = (
    "EXPERIENCE",
    "EDUCATION",
    "PROJECTS",
    "SKILLS",
    "CERTIFICATIONS",
    "AWARDS",
    "CONTACT",
    "REFERENCES",
)

# ===== SKILLS =====

SKILL_CATEGORY_LABELS = ("Frontend", "Backend", "Languages", "Tools", "Technologies")
SKILL_SEPARATORS = (",", "|", "•", "●", "◦", "-", "·")

# ===== EXPERIENCE =====

ROLE_NOUNS = ("Developer", "Engineer", "Specialist", "Manager", "Intern")

# ===== EDUCATION =====

DEGREE_KEYWORDS = ("B.Tech", "B.E", "B.S", "M.Tech", "M.S", "Bachelor", "Master", "Diploma")
INSTITUTION_KEYWORDS = ("University", "College", "Institute", "School", "Academy")

# ===== PROJECTS =====

PROJECT_SUFFIXES = ("App", "Application", "System", "Platform", "Website", "Tool", "Dashboard", "API")
PROJECT_KEYWORDS = ("Project", "App", "System", "Platform")
PROJECT_LABELS = ("Technologies", "Tech Stack", "Tools", "Skills", "Duration")
TECH_STACK_LABELS = ("Tech Stack", "Technologies", "Tools")
TECH_VOCABULARY = (
    "React", "Node", "JavaScript", "TypeScript", "Python", "Java", "MongoDB", "MySQL",
    "PostgreSQL", "Express", "Vue", "Angular", "Django", "Flask", "Spring",
)
PROJECT_STOP_KEYWORDS = ("EDUCATION", "EXPERIENCE", "SKILLS", "CERTIFICATIONS", "AWARDS", "CONTACT")

# ===== CONTACT =====

NAME_BLOCKLIST = ("@", "github", "linkedin")
PORTFOLIO_LABELS = ("portfolio", "website")

BULLET_GLYPHS = ("•", "-", "●", "·", "◦")


class ParserRules(BaseModel):
    """Complete, immutable configuration for one parse."""
    model_config = ConfigDict(frozen=True)

    skills_headers: Tuple[str, ...] = SKILLS_HEADERS
    experience_headers: Tuple[str, ...] = EXPERIENCE_HEADERS
    education_headers: Tuple[str, ...] = EDUCATION_HEADERS
    projects_headers: Tuple[str, ...] = PROJECTS_HEADERS
    section_terminators: Tuple[str, ...] = SECTION_TERMINATORS
    max_section_lines: int = 50

    skill_category_labels: Tuple[str, ...] = SKILL_CATEGORY_LABELS
    skill_separators: Tuple[str, ...] = SKILL_SEPARATORS
    max_skills: int = 20

    role_nouns: Tuple[str, ...] = ROLE_NOUNS
    bullet_min_length: int = 20  # experience lines longer than this are bullets

    degree_keywords: Tuple[str, ...] = DEGREE_KEYWORDS
    institution_keywords: Tuple[str, ...] = INSTITUTION_KEYWORDS
    location_max_length: int = 30

    project_suffixes: Tuple[str, ...] = PROJECT_SUFFIXES
    project_keywords: Tuple[str, ...] = PROJECT_KEYWORDS
    project_labels: Tuple[str, ...] = PROJECT_LABELS
    tech_stack_labels: Tuple[str, ...] = TECH_STACK_LABELS
    tech_vocabulary: Tuple[str, ...] = TECH_VOCABULARY
    project_stop_keywords: Tuple[str, ...] = PROJECT_STOP_KEYWORDS
    project_description_min_length: int = 10

    name_blocklist: Tuple[str, ...] = NAME_BLOCKLIST
    portfolio_labels: Tuple[str, ...] = PORTFOLIO_LABELS
    bullet_glyphs: Tuple[str, ...] = BULLET_GLYPHS


DEFAULT_RULES = ParserRules()


@lru_cache(maxsize=128)
def alternation(words: Tuple[str, ...]) -> str:
    """Regex alternation of literal words, longest first so 'Application' beats 'App'."""
    ordered = sorted(words, key=len, reverse=True)
    return "|".join(re.escape(w) for w in ordered)


@lru_cache(maxsize=128)
def contains_any_re(words: Tuple[str, ...]) -> re.Pattern:
    """Case-insensitive 'line mentions one of these' matcher."""
    return re.compile(f"(?:{alternation(words)})", re.IGNORECASE)


@lru_cache(maxsize=128)
def glyph_class(glyphs: Tuple[str, ...]) -> str:
    """Character class for single-character glyphs/separators."""
    return "[" + "".join(re.escape(g) for g in glyphs) + "]"
