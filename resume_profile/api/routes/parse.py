import logging

from fastapi import APIRouter, UploadFile, File, Form, HTTPException

from resume_profile.core.docx_extractor import decode_plain_text, extract_docx_text
from resume_profile.core.errors import TextExtractionError
from resume_profile.core.pdf_extractor import extract_pdf_text
from resume_profile.core.profile_parser import parse_resume_text
from resume_profile.core.schemas import ParseTextRequest, ResumeProfile

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])

DOCX_CONTENT_TYPES = {"application/vnd.openxmlformats-officedocument.wordprocessingml.document"}
TEXT_CONTENT_TYPES = {"text/plain", "text/markdown"}

PROFILE_EXAMPLE = {
    "info": {
        "name": "JOHN SMITH",
        "email": "john@example.com",
        "phone": "(555) 123-4567",
        "links": {"linkedin": "linkedin.com/in/johnsmith", "github": "github.com/jsmith", "portfolio": ""},
    },
    "skills": ["Python", "Go", "SQL"],
    "experience": [
        {
            "title": "Software Engineer",
            "company": "Acme Corp",
            "period": "01/2020 - Present",
            "desc": ["Built internal tools."],
        }
    ],
    "education": [
        {"degree": "B.S. Computer Science", "school": "State University", "year": "2019", "location": "Austin"}
    ],
    "projects": [
        {"name": "Weather Dashboard", "description": ["Live forecasts from public APIs."], "techStack": "React, Node"}
    ],
    "summary": "",
}


def _extract_text(raw: bytes, filename: str, content_type: str) -> str:
    # DOCX
    if filename.endswith(".docx") or content_type in DOCX_CONTENT_TYPES:
        return extract_docx_text(raw)
    # PDF
    if filename.endswith(".pdf") or content_type == "application/pdf":
        return extract_pdf_text(raw)
    # Text
    if content_type in TEXT_CONTENT_TYPES or filename.endswith((".txt", ".md")):
        return decode_plain_text(raw)
    raise HTTPException(status_code=415, detail=f"Unsupported content type: {content_type or filename}")


@router.post(
    "/parse",
    response_model=ResumeProfile,
    summary="Parse Resume File",
    description="Extract a structured candidate profile from a resume file (PDF, DOCX, or TXT).",
    responses={
        200: {"description": "Successfully parsed resume", "content": {"application/json": {"example": PROFILE_EXAMPLE}}},
        400: {"description": "Empty file uploaded"},
        415: {"description": "Unsupported file format"},
        422: {"description": "Text could not be extracted from the document"},
    },
)
async def parse_resume(
    file: UploadFile = File(..., description="Resume file (PDF, DOCX, or TXT format)"),
    summary: str = Form("", description="Existing summary to keep when re-parsing an edited profile"),
):
    """
    Parse a resume file and extract candidate information.

    **Supported formats:**
    - PDF (.pdf) - Text-layer extraction only, OCR not supported
    - DOCX (.docx)
    - TXT / Markdown (.txt, .md)

    Fields that cannot be matched come back as empty strings or empty lists.
    """
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")

    filename = (file.filename or "").lower()
    content_type = (file.content_type or "").lower()

    try:
        text = _extract_text(raw, filename, content_type)
    except TextExtractionError as exc:
        logger.warning(f"Text extraction failed for '{filename}': {exc}")
        raise HTTPException(status_code=422, detail=str(exc))

    return parse_resume_text(text, summary=summary)


@router.post(
    "/parse/text",
    response_model=ResumeProfile,
    summary="Parse Resume Text",
    description="Extract a structured candidate profile from already-extracted plain text.",
)
def parse_resume_plain_text(request: ParseTextRequest):
    return parse_resume_text(request.text, summary=request.summary)
