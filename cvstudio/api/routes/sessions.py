from typing import Any, Dict, List

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from cvstudio.api.deps import get_analyzer, get_starter_picker, get_store
from cvstudio.api.routes.parse import read_upload
from cvstudio.core import profile_editor
from cvstudio.core.config import settings
from cvstudio.core.field_guidance import resolve_job_field, resolve_template
from cvstudio.core.pipeline import UploadedFile, ingest_cv, ingest_supporting
from cvstudio.core.profile_editor import ProfileEditError
from cvstudio.core.profile_merge import improve_profile
from cvstudio.core.red_flags import RedFlagAnalyzer
from cvstudio.core.schemas import (
    ImageUpdate,
    ItemValue,
    JobFieldUpdate,
    Profile,
    RedFlagResponse,
    SessionState,
    SummaryUpdate,
    TemplateUpdate,
)
from cvstudio.core.session_store import SessionStore
from cvstudio.core.text_normalization import StarterPicker

router = APIRouter(prefix="/sessions", tags=["sessions"])

IMPROVED = "Improvement applied. Review the tone and metrics."
CLEARED = "Local data cleared."


def _load(store: SessionStore, session_id: str) -> SessionState:
    session = store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    return session


def _edit(store: SessionStore, session_id: str, edit, *args: Any) -> SessionState:
    """Apply a profile_editor function and save, mapping edit errors to HTTP."""
    session = _load(store, session_id)
    try:
        profile = edit(session.profile, *args)
    except ProfileEditError as exc:
        raise HTTPException(status_code=404 if exc.not_found else 422, detail=str(exc))
    return store.save(session.model_copy(update={"profile": profile}))


# ============================================================================
# Lifecycle
# ============================================================================

@router.post("", response_model=SessionState, status_code=201)
def create_session(store: SessionStore = Depends(get_store)):
    return store.create(job_field=resolve_job_field(None))


@router.get("/{session_id}", response_model=SessionState)
def get_session(session_id: str, store: SessionStore = Depends(get_store)):
    return _load(store, session_id)


@router.delete("/{session_id}", status_code=204)
def delete_session(session_id: str, store: SessionStore = Depends(get_store)):
    if not store.delete(session_id):
        raise HTTPException(status_code=404, detail="Session not found.")


@router.post("/{session_id}/reset", response_model=SessionState)
def reset_session(session_id: str, store: SessionStore = Depends(get_store)):
    _load(store, session_id)
    fresh = SessionState(
        id=session_id,
        profile=profile_editor.reset_profile(),
        job_field=resolve_job_field(None),
        status=CLEARED,
    )
    return store.save(fresh)


# ============================================================================
# Uploads and analysis
# ============================================================================

@router.post("/{session_id}/cv", response_model=SessionState)
async def upload_cv(
    session_id: str,
    file: UploadFile = File(..., description="CV file (TXT, PDF or DOCX)"),
    store: SessionStore = Depends(get_store),
    pick: StarterPicker = Depends(get_starter_picker),
):
    session = _load(store, session_id)
    raw = await read_upload(file)
    upload = UploadedFile(filename=file.filename, content_type=file.content_type, raw=raw)
    return store.save(ingest_cv(session, upload, pick))


@router.post("/{session_id}/supporting", response_model=SessionState)
async def upload_supporting(
    session_id: str,
    files: List[UploadFile] = File(..., description="Supporting documents, parsed in order"),
    store: SessionStore = Depends(get_store),
    pick: StarterPicker = Depends(get_starter_picker),
):
    session = _load(store, session_id)
    # Empty and oversize files are skipped one by one in ingest_supporting
    uploads = [
        UploadedFile(filename=f.filename, content_type=f.content_type, raw=await f.read())
        for f in files
    ]
    return store.save(ingest_supporting(session, uploads, pick, max_bytes=settings.max_upload_bytes))


@router.post("/{session_id}/improve", response_model=SessionState)
def improve_session(
    session_id: str,
    store: SessionStore = Depends(get_store),
    pick: StarterPicker = Depends(get_starter_picker),
):
    session = _load(store, session_id)
    profile = improve_profile(session.profile, pick)
    return store.save(session.model_copy(update={"profile": profile, "status": IMPROVED}))


@router.get("/{session_id}/red-flags", response_model=RedFlagResponse)
def session_red_flags(
    session_id: str,
    store: SessionStore = Depends(get_store),
    analyzer: RedFlagAnalyzer = Depends(get_analyzer),
):
    session = _load(store, session_id)
    return RedFlagResponse(job_field=session.job_field, red_flags=analyzer.analyze(session.profile, session.job_field))


@router.put("/{session_id}/job-field", response_model=SessionState)
def set_job_field(session_id: str, body: JobFieldUpdate, store: SessionStore = Depends(get_store)):
    session = _load(store, session_id)
    return store.save(session.model_copy(update={"job_field": resolve_job_field(body.job_field)}))


@router.put("/{session_id}/template", response_model=SessionState)
def set_template(session_id: str, body: TemplateUpdate, store: SessionStore = Depends(get_store)):
    session = _load(store, session_id)
    return store.save(session.model_copy(update={"template_id": resolve_template(body.template_id).id}))


# ============================================================================
# Profile edits
# ============================================================================

@router.put("/{session_id}/profile", response_model=SessionState)
def replace_profile(session_id: str, profile: Profile, store: SessionStore = Depends(get_store)):
    session = _load(store, session_id)
    return store.save(session.model_copy(update={"profile": profile}))


@router.patch("/{session_id}/contact", response_model=SessionState)
def patch_contact(session_id: str, changes: Dict[str, str], store: SessionStore = Depends(get_store)):
    return _edit(store, session_id, profile_editor.update_contact, changes)


@router.put("/{session_id}/summary", response_model=SessionState)
def put_summary(session_id: str, body: SummaryUpdate, store: SessionStore = Depends(get_store)):
    return _edit(store, session_id, profile_editor.set_summary, body.summary)


@router.put("/{session_id}/image", response_model=SessionState)
def put_image(session_id: str, body: ImageUpdate, store: SessionStore = Depends(get_store)):
    return _edit(store, session_id, profile_editor.set_image, body.image_data_url)


@router.post("/{session_id}/skills", response_model=SessionState)
def post_skill(session_id: str, body: ItemValue, store: SessionStore = Depends(get_store)):
    return _edit(store, session_id, profile_editor.add_skill, body.value)


@router.put("/{session_id}/skills/{index}", response_model=SessionState)
def put_skill(session_id: str, index: int, body: ItemValue, store: SessionStore = Depends(get_store)):
    return _edit(store, session_id, profile_editor.update_skill, index, body.value)


@router.delete("/{session_id}/skills/{index}", response_model=SessionState)
def delete_skill(session_id: str, index: int, store: SessionStore = Depends(get_store)):
    return _edit(store, session_id, profile_editor.remove_skill, index)


@router.post("/{session_id}/entries/{collection}", response_model=SessionState)
def post_entry(session_id: str, collection: str, store: SessionStore = Depends(get_store)):
    return _edit(store, session_id, profile_editor.add_entry, collection)


@router.patch("/{session_id}/entries/{collection}/{entry_id}", response_model=SessionState)
def patch_entry(
    session_id: str,
    collection: str,
    entry_id: str,
    changes: Dict[str, Any],
    store: SessionStore = Depends(get_store),
):
    return _edit(store, session_id, profile_editor.update_entry, collection, entry_id, changes)


@router.delete("/{session_id}/entries/{collection}/{entry_id}", response_model=SessionState)
def delete_entry(session_id: str, collection: str, entry_id: str, store: SessionStore = Depends(get_store)):
    return _edit(store, session_id, profile_editor.remove_entry, collection, entry_id)


@router.post("/{session_id}/entries/{collection}/{entry_id}/items", response_model=SessionState)
def post_item(
    session_id: str,
    collection: str,
    entry_id: str,
    body: ItemValue,
    store: SessionStore = Depends(get_store),
):
    return _edit(store, session_id, profile_editor.add_item, collection, entry_id, body.value)


@router.put("/{session_id}/entries/{collection}/{entry_id}/items/{index}", response_model=SessionState)
def put_item(
    session_id: str,
    collection: str,
    entry_id: str,
    index: int,
    body: ItemValue,
    store: SessionStore = Depends(get_store),
):
    return _edit(store, session_id, profile_editor.update_item, collection, entry_id, index, body.value)


@router.delete("/{session_id}/entries/{collection}/{entry_id}/items/{index}", response_model=SessionState)
def delete_item(
    session_id: str,
    collection: str,
    entry_id: str,
    index: int,
    store: SessionStore = Depends(get_store),
):
    return _edit(store, session_id, profile_editor.remove_item, collection, entry_id, index)
