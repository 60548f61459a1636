"""
Uploaded file -> raw text.

TXT/MD are decoded as UTF-8, PDF goes through pdfplumber's text layer (no
OCR), DOCX through python-docx paragraphs. Unsupported types give "".
Corrupt files raise whatever the underlying library raises; callers decide
how to report it.
"""

import logging
import re
import warnings
from io import BytesIO
from typing import Literal, Optional

import pdfplumber
from docx import Document

# pdfminer is noisy about malformed but readable PDFs
logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", category=UserWarning, module="pdfminer")

DocumentKind = Literal["txt", "pdf", "docx"]

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_CONTENT_TYPES = {"text/plain", "text/markdown"}

_CID_RE = re.compile(r"\(cid:\d+\)")


def detect_kind(filename: Optional[str], content_type: Optional[str]) -> Optional[DocumentKind]:
    name = (filename or "").lower()
    ctype = (content_type or "").lower()
    if ctype in TEXT_CONTENT_TYPES or name.endswith((".txt", ".md")):
        return "txt"
    if ctype == "application/pdf" or name.endswith(".pdf"):
        return "pdf"
    if ctype == DOCX_CONTENT_TYPE or name.endswith(".docx"):
        return "docx"
    return None


def is_supported(filename: Optional[str], content_type: Optional[str]) -> bool:
    return detect_kind(filename, content_type) is not None


def extract_pdf_text(pdf_bytes: bytes) -> str:
    with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return _CID_RE.sub("", "\n".join(pages))


def extract_docx_text(docx_bytes: bytes) -> str:
    doc = Document(BytesIO(docx_bytes))
    return "\n".join(p.text or "" for p in doc.paragraphs)


def extract_text(raw: bytes, filename: Optional[str] = None, content_type: Optional[str] = None) -> str:
    kind = detect_kind(filename, content_type)
    if kind == "txt":
        return raw.decode("utf-8", errors="replace")
    if kind == "pdf":
        return extract_pdf_text(raw)
    if kind == "docx":
        return extract_docx_text(raw)
    return ""
