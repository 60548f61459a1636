"""
Upload ingestion: decode files, accumulate their text, prefill the profile.

This is the recovery boundary for extraction. Whatever goes wrong while
decoding or parsing ends up as a status message on the session; previously
accumulated state is never lost.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from cvstudio.core.document_extractor import extract_text
from cvstudio.core.field_guidance import resolve_job_field
from cvstudio.core.profile_merge import prefill_from_text
from cvstudio.core.red_flags import RedFlagAnalyzer
from cvstudio.core.schemas import ParseResponse, Profile, SessionState, UploadRecord
from cvstudio.core.text_normalization import StarterPicker, pick_first

logger = logging.getLogger(__name__)

CV_PARSED = "CV parsed. Content prefilled where possible."
CV_FAILED = "Unable to parse that CV file. Try a TXT export."
SUPPORTING_PARSED = "Supporting documents parsed. Updated suggestions applied."
SUPPORTING_FAILED = "Unable to parse one or more supporting files. Try TXT exports."

Decoder = Callable[[bytes, Optional[str], Optional[str]], str]


@dataclass
class UploadedFile:
    filename: Optional[str]
    content_type: Optional[str]
    raw: bytes


def _record(upload: UploadedFile) -> UploadRecord:
    return UploadRecord(name=upload.filename or "", content_type=upload.content_type)


def ingest_cv(
    session: SessionState,
    upload: UploadedFile,
    pick: StarterPicker = pick_first,
    decode: Decoder = extract_text,
) -> SessionState:
    """The CV replaces the accumulated source text and prefills the profile."""
    try:
        text = decode(upload.raw, upload.filename, upload.content_type)
        if not text.strip():
            logger.warning("CV upload %r produced no text", upload.filename)
            return session.model_copy(update={"status": CV_FAILED})
        profile = prefill_from_text(session.profile, text, pick)
    except Exception:
        logger.warning("Failed to parse CV upload %r", upload.filename, exc_info=True)
        return session.model_copy(update={"status": CV_FAILED})

    return session.model_copy(update={
        "profile": profile,
        "source_text": text,
        "cv": _record(upload),
        "status": CV_PARSED,
    })


def ingest_supporting(
    session: SessionState,
    uploads: Iterable[UploadedFile],
    pick: StarterPicker = pick_first,
    decode: Decoder = extract_text,
    max_bytes: Optional[int] = None,
) -> SessionState:
    """
    Decode supporting documents one at a time, in upload order.

    Each readable file is appended to the source text; unreadable ones, and
    ones larger than `max_bytes`, are skipped. The profile is prefilled once
    from the combined text.
    """
    combined = session.source_text
    records: List[UploadRecord] = []
    failed = False

    for upload in uploads:
        if max_bytes is not None and len(upload.raw) > max_bytes:
            logger.warning("Supporting upload %r exceeds %d bytes", upload.filename, max_bytes)
            failed = True
            continue
        try:
            text = decode(upload.raw, upload.filename, upload.content_type)
        except Exception:
            logger.warning("Failed to parse supporting upload %r", upload.filename, exc_info=True)
            failed = True
            continue
        if not text.strip():
            logger.warning("Supporting upload %r produced no text", upload.filename)
            failed = True
            continue
        combined += f"\n{text}"
        records.append(_record(upload))

    profile = session.profile
    try:
        profile = prefill_from_text(session.profile, combined, pick)
    except Exception:
        logger.warning("Prefill from supporting documents failed", exc_info=True)
        failed = True

    return session.model_copy(update={
        "profile": profile,
        "source_text": combined,
        "supporting": [*session.supporting, *records],
        "status": SUPPORTING_FAILED if failed else SUPPORTING_PARSED,
    })


def parse_document(
    text: str,
    analyzer: RedFlagAnalyzer,
    job_field: Optional[str] = None,
    pick: StarterPicker = pick_first,
) -> ParseResponse:
    """Stateless extraction into an empty profile, with red flags."""
    warnings: List[str] = []
    profile = Profile()
    status = CV_PARSED
    try:
        profile = prefill_from_text(profile, text, pick)
    except Exception:
        logger.warning("Prefill of uploaded document failed", exc_info=True)
        warnings.append("Extraction failed; returning an empty profile.")
        status = CV_FAILED

    field = resolve_job_field(job_field)
    if field not in analyzer.guidance:
        warnings.append(f"Unknown job field '{field}'; field-specific checks skipped.")

    return ParseResponse(
        profile=profile,
        red_flags=analyzer.analyze(profile, field),
        status=status,
        warnings=warnings,
    )
