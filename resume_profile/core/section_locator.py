"""
Section location over the raw text.

Headers are found by case-insensitive substring search, not by line shape, so a
section still resolves when the extractor glued its header onto other text.
"""

import logging
import re
from functools import lru_cache
from typing import Dict, Optional, Sequence, Tuple

from resume_profile.core.rules import DEFAULT_RULES, ParserRules

logger = logging.getLogger(__name__)


@lru_cache(maxsize=128)
def _keyword_re(keyword: str) -> re.Pattern:
    return re.compile(re.escape(keyword), re.IGNORECASE)


def _find_header(headers: Sequence[str], text: str) -> Optional[Tuple[str, re.Match]]:
    """Return the first synonym, in priority order, that occurs and its match."""
    for header in headers:
        m = _keyword_re(header).search(text)
        if m:
            return header, m
    return None


def _section_end(header: str, text: str, start: int, terminators: Sequence[str]) -> int:
    """Earliest terminator at or after start; the header's own keyword never ends its section."""
    end = len(text)
    for keyword in terminators:
        if keyword.lower() == header.lower():
            continue
        m = _keyword_re(keyword).search(text, start)
        if m and m.start() < end:
            end = m.start()
    return end


def locate_section(headers: Sequence[str], text: str, rules: ParserRules = DEFAULT_RULES) -> str:
    """
    Locate the span of a section within raw text.

    Args:
        headers: Header synonyms in priority order (first found wins)
        text: Raw extracted text
        rules: Terminator catalog and line cap

    Returns:
        Trimmed section body (at most ``rules.max_section_lines`` lines), or ''
        when none of the headers occurs.
    """
    if not text:
        return ""
    found = _find_header(headers, text)
    if found is None:
        return ""

    header, m = found
    start = m.end()
    end = _section_end(header, text, start, rules.section_terminators)
    content = text[start:end].strip()
    logger.debug(f"Section '{header}' located at [{start}:{end}]")
    return "\n".join(content.split("\n")[: rules.max_section_lines])


def locate_all_sections(text: str, rules: ParserRules = DEFAULT_RULES) -> Dict[str, str]:
    """Spans for every section kind the profile parsers consume."""
    return {
        "skills": locate_section(rules.skills_headers, text, rules),
        "experience": locate_section(rules.experience_headers, text, rules),
        "education": locate_section(rules.education_headers, text, rules),
        "projects": locate_section(rules.projects_headers, text, rules),
    }
