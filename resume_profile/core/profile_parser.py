"""
Profile assembly: raw text in, ResumeProfile out.

The pipeline is a pure function of (text, summary, rules). Nothing is cached
between calls and every stage allocates its own output.
"""

import logging
from typing import Optional

from resume_profile.core.contact_extractor import extract_contact_info
from resume_profile.core.education_parser import parse_education
from resume_profile.core.experience_parser import parse_experience
from resume_profile.core.project_parser import parse_projects
from resume_profile.core.rules import DEFAULT_RULES, ParserRules
from resume_profile.core.schemas import RawDocument, ResumeProfile
from resume_profile.core.section_locator import locate_all_sections
from resume_profile.core.skills_extractor import extract_skills
from resume_profile.core.text_normalization import build_document

logger = logging.getLogger(__name__)


def parse_document(
    document: RawDocument,
    summary: str = "",
    rules: ParserRules = DEFAULT_RULES,
) -> ResumeProfile:
    sections = locate_all_sections(document.text, rules)
    profile = ResumeProfile(
        info=extract_contact_info(document, rules),
        skills=extract_skills(sections["skills"], rules),
        experience=parse_experience(sections["experience"], rules),
        education=parse_education(sections["education"], rules),
        projects=parse_projects(sections["projects"], rules),
        summary=summary or "",
    )
    logger.debug(
        f"Parsed profile: {len(profile.skills)} skills, {len(profile.experience)} experience, "
        f"{len(profile.education)} education, {len(profile.projects)} projects"
    )
    return profile


def parse_resume_text(
    text: str,
    summary: Optional[str] = None,
    rules: Optional[ParserRules] = None,
) -> ResumeProfile:
    """
    Parse extracted resume text into a structured profile.

    Args:
        text: Plain text from the extraction service (may be empty)
        summary: Summary from an already-edited profile, kept as-is on re-parse
        rules: Rule tables; defaults to DEFAULT_RULES

    Returns:
        ResumeProfile with '' / [] for anything that did not match
    """
    return parse_document(build_document(text or ""), summary or "", rules or DEFAULT_RULES)
