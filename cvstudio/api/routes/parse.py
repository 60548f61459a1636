import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile

from cvstudio.api.deps import get_analyzer, get_starter_picker
from cvstudio.core.config import settings
from cvstudio.core.document_extractor import extract_text, is_supported
from cvstudio.core.field_guidance import JOB_FIELDS, load_field_guidance, load_templates, resolve_job_field
from cvstudio.core.pipeline import parse_document
from cvstudio.core.profile_merge import improve_profile
from cvstudio.core.red_flags import RedFlagAnalyzer
from cvstudio.core.schemas import (
    ParseResponse,
    Profile,
    RedFlagRequest,
    RedFlagResponse,
    TemplateOption,
)
from cvstudio.core.text_normalization import StarterPicker

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])


async def read_upload(file: UploadFile) -> bytes:
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="File is too large.")
    return raw


@router.post(
    "/parse",
    response_model=ParseResponse,
    summary="Parse CV",
    description="Extract a structured profile from a CV file (TXT, PDF or DOCX) and list its red flags for a job field.",
    responses={
        400: {"description": "Empty file uploaded"},
        413: {"description": "File is too large"},
        415: {"description": "Unsupported file format"},
        422: {"description": "File has no extractable text"},
    },
)
async def parse_cv(
    file: UploadFile = File(..., description="CV file (TXT, PDF or DOCX)"),
    job_field: Optional[str] = Query(None, description="Job field used for must-have section checks"),
    analyzer: RedFlagAnalyzer = Depends(get_analyzer),
    pick: StarterPicker = Depends(get_starter_picker),
):
    """
    Parse a CV into an empty profile.

    **Returns:**
    - **profile**: extracted contact, summary, skills, experience and education
    - **red_flags**: completeness warnings for `job_field` (default General)
    - **status** / **warnings**: what happened during extraction
    """
    raw = await read_upload(file)
    if not is_supported(file.filename, file.content_type):
        raise HTTPException(status_code=415, detail=f"Unsupported content type: {file.content_type}")

    try:
        text = extract_text(raw, file.filename, file.content_type)
    except Exception as exc:
        logger.warning("Failed to decode upload %r", file.filename, exc_info=True)
        raise HTTPException(status_code=422, detail="Could not parse that file. Try a TXT export.") from exc
    if not text.strip():
        raise HTTPException(
            status_code=422,
            detail="File appears to have no extractable text. OCR is not supported.",
        )

    return parse_document(text, analyzer, job_field=job_field, pick=pick)


@router.post("/improve", response_model=Profile, summary="Polish summary and bullets")
def improve(profile: Profile, pick: StarterPicker = Depends(get_starter_picker)):
    return improve_profile(profile, pick)


@router.post("/red-flags", response_model=RedFlagResponse, summary="List profile red flags")
def red_flags(request: RedFlagRequest, analyzer: RedFlagAnalyzer = Depends(get_analyzer)):
    job_field = resolve_job_field(request.job_field)
    return RedFlagResponse(job_field=job_field, red_flags=analyzer.analyze(request.profile, job_field))


@router.get("/job-fields", tags=["config"])
def job_fields():
    guidance = load_field_guidance()
    return {
        "default": resolve_job_field(None),
        "fields": [
            {"name": name, "must": list(guidance[name].must), "good": list(guidance[name].good)}
            for name in JOB_FIELDS
        ],
    }


@router.get("/templates", response_model=List[TemplateOption], tags=["config"])
def templates():
    return list(load_templates())
