from io import BytesIO
import logging

from docx import Document

from resume_profile.core.errors import TextExtractionError

logger = logging.getLogger(__name__)


def extract_docx_text(docx_bytes: bytes) -> str:
    """
    Deterministically extract non-empty paragraph text from a DOCX, one paragraph per line.
    """
    try:
        doc = Document(BytesIO(docx_bytes))
    except Exception as exc:
        logger.warning(f"DOCX extraction error: {exc}")
        raise TextExtractionError("Failed to extract text from DOCX") from exc

    lines = [(p.text or "").strip() for p in doc.paragraphs]
    text = "\n".join(t for t in lines if t)
    if not text:
        raise TextExtractionError("DOCX contains no text.")
    return text


def decode_plain_text(raw: bytes) -> str:
    return raw.decode("utf-8-sig", errors="replace")
