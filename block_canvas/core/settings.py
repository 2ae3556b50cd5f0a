"""
Configuration par variables d'environnement.

CANVAS_AUTOPLAY_SECONDS        intervalle d'autoplay du carrousel (défaut 5)
CANVAS_COUNTDOWN_TICK_SECONDS  rafraîchissement du compte à rebours (défaut 1)
CANVAS_FORM_SUBMIT_DELAY       durée simulée d'envoi d'un formulaire (défaut 1.5)
CANVAS_FAVICON_SERVICE         service de favicons, `{domain}` remplacé
"""
import os
from dataclasses import dataclass
from functools import lru_cache

_DEFAULT_FAVICON_SERVICE = "https://www.google.com/s2/favicons?domain={domain}&sz=64"


@dataclass(frozen=True)
class Settings:
    autoplay_seconds: float = 5.0
    countdown_tick_seconds: float = 1.0
    form_submit_delay: float = 1.5
    favicon_service: str = _DEFAULT_FAVICON_SERVICE


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} doit être un nombre, reçu {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} doit être > 0, reçu {raw!r}")
    return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Lit l'environnement une fois ; `get_settings.cache_clear()` pour relire."""
    return Settings(
        autoplay_seconds=_float_env("CANVAS_AUTOPLAY_SECONDS", 5.0),
        countdown_tick_seconds=_float_env("CANVAS_COUNTDOWN_TICK_SECONDS", 1.0),
        form_submit_delay=_float_env("CANVAS_FORM_SUBMIT_DELAY", 1.5),
        favicon_service=os.getenv("CANVAS_FAVICON_SERVICE", _DEFAULT_FAVICON_SERVICE),
    )
