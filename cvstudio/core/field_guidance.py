"""
Static job-field guidance and template catalog.

Both tables are read-only and built once per process. The red flag analyzer
receives the guidance table explicitly instead of importing it.
"""

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from cvstudio.core.config import settings
from cvstudio.core.schemas import SectionGuidance, TemplateOption

DEFAULT_JOB_FIELD = "General"

_GUIDANCE = (
    ("General", ("Summary", "Experience", "Skills"), ("Projects", "Education", "Certifications")),
    ("Software Engineering", ("Skills", "Projects", "Experience"), ("Certifications", "Open Source", "Education")),
    ("Design", ("Portfolio Link", "Projects", "Experience"), ("Awards", "Tools", "Education")),
    ("Marketing", ("Experience", "Metrics", "Campaigns"), ("Certifications", "Tools", "Projects")),
    ("Sales", ("Experience", "Quota Attainment", "Metrics"), ("Territories", "Tools", "Certifications")),
    ("Finance", ("Experience", "Certifications", "Education"), ("Projects", "Technical Skills")),
    ("Healthcare", ("Licenses", "Experience", "Education"), ("Certifications", "Specializations")),
    ("Operations", ("Experience", "Process Improvements", "Metrics"), ("Tools", "Certifications")),
    ("Academia", ("Education", "Publications", "Research"), ("Teaching", "Grants", "Awards")),
)

_TEMPLATES = (
    ("classic", "Classic", "Two-column executive look", "two-left"),
    ("modern", "Modern", "Bold header and clean grid", "two-left"),
    ("minimal", "Minimal", "Monochrome with sharp typography", "two-left"),
    ("studio", "Studio", "Warm editorial with artisan tone", "two-left"),
    ("slate", "Slate", "Crisp corporate balance", "two-left"),
    ("coast", "Coast", "Fresh, light, and calm", "two-left"),
    ("reverse", "Reverse", "Right sidebar for detail-first roles", "two-right"),
    ("actor", "Actor", "Single-column, audition ready", "single"),
)

JOB_FIELDS: Tuple[str, ...] = tuple(name for name, _, _ in _GUIDANCE)


@lru_cache(maxsize=1)
def load_field_guidance() -> Mapping[str, SectionGuidance]:
    """Job field name -> must/good section names, in display order."""
    return MappingProxyType({
        name: SectionGuidance(must=must, good=good)
        for name, must, good in _GUIDANCE
    })


@lru_cache(maxsize=1)
def load_templates() -> Tuple[TemplateOption, ...]:
    return tuple(
        TemplateOption(id=tid, name=name, description=description, layout=layout)
        for tid, name, description, layout in _TEMPLATES
    )


def resolve_job_field(job_field: Optional[str]) -> str:
    """Blank selection means the configured default field. Unknown names pass through."""
    return job_field or settings.default_job_field or DEFAULT_JOB_FIELD


def resolve_template(template_id: Optional[str]) -> TemplateOption:
    templates = load_templates()
    for template in templates:
        if template.id == template_id:
            return template
    return templates[0]
