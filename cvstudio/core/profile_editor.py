"""
Field-by-field edits of a Profile.

Every function returns a new Profile and leaves its input untouched. Entries
are addressed by their stable id, list items (skills, bullets, details) by
index.
"""

from typing import Any, Dict, List

from pydantic import ValidationError

from cvstudio.core.schemas import (
    CertificationEntry,
    ContactInfo,
    CustomSection,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    Profile,
    ProjectEntry,
)

ENTRY_TYPES = {
    "experiences": ExperienceEntry,
    "education": EducationEntry,
    "projects": ProjectEntry,
    "certifications": CertificationEntry,
    "languages": LanguageEntry,
    "custom_sections": CustomSection,
}

# Which list field inside an entry holds its line items
ITEM_FIELDS = {
    "experiences": "bullets",
    "education": "details",
    "projects": "bullets",
    "custom_sections": "items",
}


class ProfileEditError(ValueError):
    """Invalid edit. `not_found` distinguishes a missing target from a bad request."""

    def __init__(self, message: str, not_found: bool = False):
        super().__init__(message)
        self.not_found = not_found


def _entries(profile: Profile, collection: str) -> List[Any]:
    if collection not in ENTRY_TYPES:
        raise ProfileEditError(f"Unknown collection: {collection}")
    return getattr(profile, collection)


def _index_of(entries: List[Any], entry_id: str) -> int:
    for i, entry in enumerate(entries):
        if entry.id == entry_id:
            return i
    raise ProfileEditError(f"No entry with id {entry_id}", not_found=True)


def _check_index(items: List[str], index: int) -> None:
    if not 0 <= index < len(items):
        raise ProfileEditError(f"Index {index} out of range", not_found=True)


def _with(profile: Profile, **updates: Any) -> Profile:
    return profile.model_copy(update=updates, deep=True)


# ============================================================================
# Scalars
# ============================================================================

def update_contact(profile: Profile, changes: Dict[str, str]) -> Profile:
    unknown = set(changes) - set(ContactInfo.model_fields)
    if unknown:
        raise ProfileEditError(f"Unknown contact fields: {', '.join(sorted(unknown))}")
    try:
        contact = ContactInfo.model_validate({**profile.contact.model_dump(), **changes})
    except ValidationError as exc:
        raise ProfileEditError(f"Invalid contact: {exc.error_count()} error(s)") from exc
    return _with(profile, contact=contact)


def set_summary(profile: Profile, summary: str) -> Profile:
    return _with(profile, summary=summary)


def set_image(profile: Profile, image_data_url: str) -> Profile:
    return _with(profile, image_data_url=image_data_url)


def reset_profile() -> Profile:
    return Profile()


# ============================================================================
# Skills
# ============================================================================

def add_skill(profile: Profile, value: str = "") -> Profile:
    return _with(profile, skills=[*profile.skills, value])


def update_skill(profile: Profile, index: int, value: str) -> Profile:
    _check_index(profile.skills, index)
    skills = list(profile.skills)
    skills[index] = value
    return _with(profile, skills=skills)


def remove_skill(profile: Profile, index: int) -> Profile:
    _check_index(profile.skills, index)
    return _with(profile, skills=[s for i, s in enumerate(profile.skills) if i != index])


# ============================================================================
# Entries
# ============================================================================

def add_entry(profile: Profile, collection: str) -> Profile:
    """Append a blank entry with a fresh id."""
    entries = _entries(profile, collection)
    return _with(profile, **{collection: [*entries, ENTRY_TYPES[collection]()]})


def update_entry(profile: Profile, collection: str, entry_id: str, changes: Dict[str, Any]) -> Profile:
    entries = _entries(profile, collection)
    idx = _index_of(entries, entry_id)
    entry_type = ENTRY_TYPES[collection]

    if "id" in changes and changes["id"] != entry_id:
        raise ProfileEditError("Entry id cannot be changed")
    unknown = set(changes) - set(entry_type.model_fields)
    if unknown:
        raise ProfileEditError(f"Unknown {collection} fields: {', '.join(sorted(unknown))}")

    # Validate through the model so a bad type is rejected here, not on render
    try:
        merged = entry_type.model_validate({**entries[idx].model_dump(), **changes})
    except ValidationError as exc:
        raise ProfileEditError(f"Invalid {collection} entry: {exc.error_count()} error(s)") from exc
    updated = list(entries)
    updated[idx] = merged
    return _with(profile, **{collection: updated})


def remove_entry(profile: Profile, collection: str, entry_id: str) -> Profile:
    entries = _entries(profile, collection)
    _index_of(entries, entry_id)
    return _with(profile, **{collection: [e for e in entries if e.id != entry_id]})


# ============================================================================
# Items inside an entry
# ============================================================================

def _item_field(collection: str) -> str:
    if collection not in ITEM_FIELDS:
        raise ProfileEditError(f"{collection} entries have no item list")
    return ITEM_FIELDS[collection]


def _edit_items(profile: Profile, collection: str, entry_id: str, edit) -> Profile:
    field = _item_field(collection)
    entries = _entries(profile, collection)
    idx = _index_of(entries, entry_id)
    items = list(getattr(entries[idx], field))
    updated = list(entries)
    updated[idx] = entries[idx].model_copy(update={field: edit(items)})
    return _with(profile, **{collection: updated})


def add_item(profile: Profile, collection: str, entry_id: str, value: str = "") -> Profile:
    return _edit_items(profile, collection, entry_id, lambda items: [*items, value])


def update_item(profile: Profile, collection: str, entry_id: str, index: int, value: str) -> Profile:
    def edit(items: List[str]) -> List[str]:
        _check_index(items, index)
        items[index] = value
        return items

    return _edit_items(profile, collection, entry_id, edit)


def remove_item(profile: Profile, collection: str, entry_id: str, index: int) -> Profile:
    def edit(items: List[str]) -> List[str]:
        _check_index(items, index)
        return [item for i, item in enumerate(items) if i != index]

    return _edit_items(profile, collection, entry_id, edit)
