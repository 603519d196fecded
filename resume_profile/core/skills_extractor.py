"""
Skills extraction from the located skills section.

Lines like "Frontend: React, CSS" lose their category label; the remainder is
split on list separators and every surviving token is kept once, in the order
first seen.
"""

import logging
import re
from functools import lru_cache
from typing import Dict, List, Tuple

from resume_profile.core.rules import DEFAULT_RULES, ParserRules, alternation, glyph_class
from resume_profile.core.text_normalization import normalize_lines

logger = logging.getLogger(__name__)

MIN_SKILL_LENGTH = 2


@lru_cache(maxsize=128)
def _category_prefix_re(labels: Tuple[str, ...]) -> re.Pattern:
    return re.compile(rf"^(?:{alternation(labels)})\b[:\s]*", re.IGNORECASE)


@lru_cache(maxsize=128)
def _separator_re(separators: Tuple[str, ...]) -> re.Pattern:
    return re.compile(rf"{glyph_class(separators)}|:\s*")


def split_skill_line(line: str, rules: ParserRules = DEFAULT_RULES) -> List[str]:
    """
    Tokenize one skills line.

    Examples:
    - "Frontend: React, CSS" → ["React", "CSS"]
    - "Python | Go • SQL" → ["Python", "Go", "SQL"]
    - "Tools" → []
    """
    labels = {label.lower() for label in rules.skill_category_labels}
    body = _category_prefix_re(rules.skill_category_labels).sub("", line.strip())
    tokens = []
    for raw in _separator_re(rules.skill_separators).split(body):
        token = raw.strip()
        if len(token) < MIN_SKILL_LENGTH or token.lower() in labels:
            continue
        tokens.append(token)
    return tokens


def extract_skills(section: str, rules: ParserRules = DEFAULT_RULES) -> List[str]:
    """Ordered, exact-string-deduplicated skills capped at ``rules.max_skills``."""
    # dict keeps insertion order and rejects repeats
    seen: Dict[str, None] = {}
    for line in normalize_lines(section):
        for token in split_skill_line(line, rules):
            seen.setdefault(token, None)

    skills = list(seen)[: rules.max_skills]
    logger.debug(f"Extracted {len(skills)} skills ({len(seen)} distinct before cap)")
    return skills
