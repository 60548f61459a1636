from functools import lru_cache

from cvstudio.core.config import settings
from cvstudio.core.field_guidance import load_field_guidance
from cvstudio.core.red_flags import RedFlagAnalyzer
from cvstudio.core.session_store import SessionStore, get_session_store
from cvstudio.core.text_normalization import StarterPicker, build_starter_picker


@lru_cache(maxsize=1)
def get_analyzer() -> RedFlagAnalyzer:
    return RedFlagAnalyzer(load_field_guidance())


@lru_cache(maxsize=1)
def get_starter_picker() -> StarterPicker:
    return build_starter_picker(settings.starter_strategy, settings.starter_seed)


def get_store() -> SessionStore:
    return get_session_store()
