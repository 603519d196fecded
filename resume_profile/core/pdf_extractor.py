from io import BytesIO
import logging
import re

import pdfplumber

from resume_profile.core.errors import TextExtractionError

logger = logging.getLogger(__name__)

# Unmapped glyphs surface as "(cid:123)"
CID_RE = re.compile(r"\(cid:\d+\)")


def extract_pdf_text(pdf_bytes: bytes) -> str:
    """
    Extract page-ordered text from a PDF.

    Each page's text-layer content is followed by a newline and the whole
    result is trimmed. OCR is not attempted: scanned PDFs yield no text and
    raise TextExtractionError like unreadable files do.
    """
    try:
        with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
            pages = [(page.extract_text() or "") for page in pdf.pages]
    except Exception as exc:
        logger.warning(f"PDF extraction error: {exc}")
        raise TextExtractionError("Failed to extract text from PDF") from exc

    text = CID_RE.sub("", "".join(f"{page}\n" for page in pages)).strip()
    if not text:
        raise TextExtractionError("PDF appears to have no extractable text. OCR is not supported.")
    return text
