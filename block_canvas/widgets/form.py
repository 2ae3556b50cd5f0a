"""
FormWidget — saisie et envoi simulé d'un formulaire.

    idle ──submit() valide──▶ submitting ──délai──▶ submitted ──reset()──▶ idle

Aucune donnée n'est envoyée ni écrite dans le bloc : les valeurs vivent ici
le temps de la session.
"""
import logging
import re
from typing import Dict, Optional

from ..blocks.form import FormView, form_fields, render_form
from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import Widget
from .timers import IntervalTimer

log = logging.getLogger(__name__)

IDLE, SUBMITTING, SUBMITTED = "idle", "submitting", "submitted"

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class FormWidget(Widget):
    block_type = "form"

    def __init__(self, block: Block, **kwargs):
        super().__init__(block, **kwargs)
        self.status = IDLE
        self.values: Dict[str, str] = {}
        self.errors: Dict[str, str] = {}
        self._timer = IntervalTimer(f"form-{block.id}", self.scheduler)

    def view(self) -> FormView:
        return FormView(status=self.status, values=dict(self.values), errors=dict(self.errors))

    def render(self, style: ResolvedStyle, theme: PageTheme) -> str:
        return render_form(self.block, style, theme, self.view())

    def unmount(self) -> None:
        with self._lock:
            self._timer.cancel()
            if self.status == SUBMITTING:
                self.status = IDLE
            super().unmount()

    def sync(self, block: Block) -> None:
        """Champs renommés ou supprimés : on oublie les valeurs orphelines."""
        with self._lock:
            super().sync(block)
            names = {f.name for f in form_fields(block)}
            self.values = {k: v for k, v in self.values.items() if k in names}
            self.errors = {k: v for k, v in self.errors.items() if k in names}

    # ── Saisie ──────────────────────────────────────────────────────────────

    def set_value(self, name: str, value: str) -> None:
        with self._lock:
            if self.status != IDLE:
                return
            self.values[name] = value
            self.errors.pop(name, None)

    def validate(self) -> Dict[str, str]:
        errors = {}
        for f in form_fields(self.block):
            value = (self.values.get(f.name) or "").strip()
            if f.required and not value:
                errors[f.name] = f"{f.label} is required"
            elif value and f.type == "email" and not _EMAIL.match(value):
                errors[f.name] = "Please enter a valid email address"
        return errors

    # ── Envoi ───────────────────────────────────────────────────────────────

    def submit(self, delay: Optional[float] = None) -> bool:
        """Valide puis passe en `submitting` ; False si des erreurs bloquent."""
        with self._lock:
            if self.status != IDLE:
                return False
            self.errors = self.validate()
            if self.errors:
                log.debug("Formulaire %s : %d champ(s) invalide(s)", self.block_id, len(self.errors))
                return False
            self.status = SUBMITTING
            delay = self.settings.form_submit_delay if delay is None else delay
            if delay <= 0:
                self.complete()
            else:
                self._timer.start_once(delay, self.complete)
            return True

    def complete(self) -> None:
        with self._lock:
            if self.status != SUBMITTING:
                return
            self._timer.cancel()
            self.status = SUBMITTED
            log.info("Formulaire %s envoyé (simulation)", self.block_id)

    def reset(self) -> None:
        with self._lock:
            self._timer.cancel()
            self.status = IDLE
            self.values = {}
            self.errors = {}
