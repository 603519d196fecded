"""
Contact extraction: email, phone, name and profile links.

Each field is resolved by an ordered list of named rules evaluated against the
raw text (or the normalized lines, for the name). The first rule that matches
wins, so the priority policy can be read straight off the rule lists below.
"""

import logging
import re
from typing import Callable, List, NamedTuple, Optional, Tuple

from resume_profile.core.rules import DEFAULT_RULES, ParserRules, alternation
from resume_profile.core.schemas import ContactInfo, ProfileLinks, RawDocument

logger = logging.getLogger(__name__)


EMAIL_RE = re.compile(r"[\w.%+-]+@[\w.-]+\.[A-Za-z]{2,}")
# Optional country code, optional parenthesized area code, separators - . space
PHONE_RE = re.compile(r"(?<!\d)(?:\+?\d{1,3}[-. \t]?)?\(?\d{3}\)?[-. \t]?\d{3}[-. \t]?\d{4}(?!\d)")
CAPITALIZED_WORDS_RE = re.compile(r"[A-Z][a-z]+(?:\s+[A-Z][a-z]+)+")
URL_TAIL = r"[^\s|,;)>\]]+"
LINKEDIN_RE = re.compile(rf"(?:https?://)?(?:www\.)?linkedin\.com/{URL_TAIL}", re.IGNORECASE)
GITHUB_RE = re.compile(rf"(?:https?://)?(?:www\.)?github\.com/{URL_TAIL}", re.IGNORECASE)

LINK_LABELS = ("linkedin", "github")

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 49


class ContactRule(NamedTuple):
    """A named single-shot pattern; ``group`` selects the returned substring."""
    name: str
    pattern: re.Pattern
    group: int = 0


def labeled_line_re(labels: Tuple[str, ...], skip: Tuple[str, ...] = ()) -> re.Pattern:
    """
    Match a line carrying one of ``labels`` and capture its last token.

    A last token that is itself one of ``skip`` (another link label) is not
    a value, so the rule does not match.

    Examples:
    - "Portfolio: https://jane.dev" → "https://jane.dev"
    - "LinkedIn  in/janedoe" → "in/janedoe"
    - "Jane Doe | LinkedIn | GitHub" → no match
    """
    not_a_label = rf"(?!(?:{alternation(skip)})\W*$)" if skip else ""
    return re.compile(
        rf"\b(?:{alternation(labels)})\b[^\n]*?[: \t][ \t]*{not_a_label}(\S+)[ \t]*$",
        re.IGNORECASE | re.MULTILINE,
    )


EMAIL_RULES = [ContactRule("email", EMAIL_RE)]
PHONE_RULES = [ContactRule("north_american_phone", PHONE_RE)]


def link_rules(rules: ParserRules = DEFAULT_RULES) -> dict:
    """Per link kind, the ordered rules tried against the raw text."""
    link_labels = LINK_LABELS + rules.portfolio_labels
    return {
        "linkedin": [
            ContactRule("linkedin_domain", LINKEDIN_RE),
            ContactRule("linkedin_label", labeled_line_re(("linkedin",), link_labels), 1),
        ],
        "github": [
            ContactRule("github_domain", GITHUB_RE),
            ContactRule("github_label", labeled_line_re(("github",), link_labels), 1),
        ],
        "portfolio": [
            ContactRule("portfolio_label", labeled_line_re(rules.portfolio_labels, link_labels), 1),
        ],
    }


def first_match(rules: List[ContactRule], text: str) -> str:
    """Apply rules in order; return the first match or ''."""
    for rule in rules:
        m = rule.pattern.search(text)
        if m and m.group(rule.group):
            logger.debug(f"Contact rule '{rule.name}' matched: '{m.group(rule.group)}'")
            return m.group(rule.group).strip()
    return ""


def extract_email(text: str) -> str:
    return first_match(EMAIL_RULES, text)


def extract_phone(text: str) -> str:
    return first_match(PHONE_RULES, text)


# ===== NAME =====

def looks_like_name(line: str, rules: ParserRules = DEFAULT_RULES) -> bool:
    """
    Name-line predicate.

    A line qualifies when it is 3-49 characters long, is either fully
    upper-case or a run of two or more Capitalized words, and mentions none of
    the blocklisted contact markers (@, github, linkedin).
    """
    if not (NAME_MIN_LENGTH <= len(line) <= NAME_MAX_LENGTH):
        return False
    if not (line.isupper() or CAPITALIZED_WORDS_RE.fullmatch(line)):
        return False
    lowered = line.lower()
    return not any(marker in lowered for marker in rules.name_blocklist)


def _name_from_pattern(lines: List[str], rules: ParserRules) -> Optional[str]:
    return next((ln for ln in lines if looks_like_name(ln, rules)), None)


def _name_from_first_line(lines: List[str], rules: ParserRules) -> Optional[str]:
    return lines[0] if lines else None


# Specific pattern beats positional default
NAME_RULES: List[Tuple[str, Callable[[List[str], ParserRules], Optional[str]]]] = [
    ("name_pattern", _name_from_pattern),
    ("first_line", _name_from_first_line),
]


def extract_name(lines: List[str], rules: ParserRules = DEFAULT_RULES) -> str:
    for rule_name, rule in NAME_RULES:
        name = rule(lines, rules)
        if name:
            logger.debug(f"Name rule '{rule_name}' matched: '{name}'")
            return name
    return ""


def extract_links(text: str, rules: ParserRules = DEFAULT_RULES) -> ProfileLinks:
    found = {kind: first_match(kind_rules, text) for kind, kind_rules in link_rules(rules).items()}
    return ProfileLinks(**found)


def extract_contact_info(document: RawDocument, rules: ParserRules = DEFAULT_RULES) -> ContactInfo:
    return ContactInfo(
        name=extract_name(document.lines, rules),
        email=extract_email(document.text),
        phone=extract_phone(document.text),
        links=extract_links(document.text, rules),
    )
