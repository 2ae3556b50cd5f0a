"""
Tests widgets — clavier, timers APScheduler, compte à rebours, formulaire.
"""
import datetime as dt

import pytest
from apscheduler.triggers.date import DateTrigger
from apscheduler.triggers.interval import IntervalTrigger

from block_canvas.blocks.countdown import parse_target, time_remaining
from block_canvas.core.schemas import Block, PageTheme
from block_canvas.style.resolver import resolve
from block_canvas.widgets import KeyboardHub
from block_canvas.widgets.countdown import CountdownWidget
from block_canvas.widgets.form import IDLE, SUBMITTED, SUBMITTING, FormWidget
from block_canvas.widgets.timers import IntervalTimer

UTC = dt.timezone.utc


def _html(widget):
    theme = PageTheme()
    return widget.render(resolve(widget.block, theme), theme)


# ── KeyboardHub ─────────────────────────────────────────────────────────────

class TestKeyboard:
    def test_latest_listener_first(self):
        hub = KeyboardHub()
        calls = []
        hub.attach(lambda k: calls.append("first") or True)
        hub.attach(lambda k: calls.append("second") or True)
        assert hub.dispatch("Escape")
        assert calls == ["second"]

    def test_falls_through_unconsumed(self):
        hub = KeyboardHub()
        calls = []
        hub.attach(lambda k: calls.append("first") or True)
        hub.attach(lambda k: calls.append("second") or False)
        assert hub.dispatch("x")
        assert calls == ["second", "first"]

    def test_detach_idempotent(self):
        hub = KeyboardHub()
        token = hub.attach(lambda k: True)
        hub.detach(token)
        hub.detach(token)
        assert hub.listener_count == 0
        assert not hub.dispatch("Escape")


# ── IntervalTimer ───────────────────────────────────────────────────────────

class TestTimer:
    def test_start_and_cancel(self, scheduler):
        timer = IntervalTimer("t", scheduler)
        timer.start(2, lambda: None)
        assert timer.active
        job = scheduler.get_job(timer.job_id)
        assert isinstance(job.trigger, IntervalTrigger)
        timer.cancel()
        assert not timer.active
        assert scheduler.get_jobs() == []

    def test_restart_replaces_job(self, scheduler):
        timer = IntervalTimer("t", scheduler)
        first = timer.start(2, lambda: None)
        second = timer.start(2, lambda: None)
        assert first != second
        assert [j.id for j in scheduler.get_jobs()] == [second]

    def test_cancel_twice(self, scheduler):
        timer = IntervalTimer("t", scheduler)
        timer.start(1, lambda: None)
        timer.cancel()
        timer.cancel()
        assert timer.job_id is None

    def test_cancel_consumed_job(self, scheduler):
        timer = IntervalTimer("t", scheduler)
        job_id = timer.start_once(1, lambda: None)
        scheduler.remove_job(job_id)  # tir unique déjà exécuté
        timer.cancel()
        assert not timer.active

    def test_start_once_uses_date_trigger(self, scheduler):
        timer = IntervalTimer("t", scheduler)
        timer.start_once(1.5, lambda: None)
        assert isinstance(scheduler.get_job(timer.job_id).trigger, DateTrigger)


# ── Compte à rebours ────────────────────────────────────────────────────────

NOW = dt.datetime(2025, 1, 1, tzinfo=UTC)


class _Clock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


@pytest.mark.parametrize("raw,expected", [
    ("2025-01-02T00:00:00Z", dt.datetime(2025, 1, 2, tzinfo=UTC)),
    ("2025-01-02T00:00:00", dt.datetime(2025, 1, 2, tzinfo=UTC)),
    ("2025-01-02T02:00:00+02:00", dt.datetime(2025, 1, 2, tzinfo=UTC)),
    ("soon", None),
    ("", None),
    (None, None),
])
def test_parse_target(raw, expected):
    assert parse_target(raw) == expected


def test_time_remaining_breakdown():
    view = time_remaining(dt.datetime(2025, 1, 2, 1, 1, 1, tzinfo=UTC), NOW)
    assert (view.days, view.hours, view.minutes, view.seconds) == (1, 1, 1, 1)
    assert not view.expired


def test_time_remaining_past_is_expired():
    assert time_remaining(NOW - dt.timedelta(seconds=1), NOW).expired
    assert time_remaining(NOW, NOW).expired


class TestCountdownWidget:
    def _widget(self, widget_kwargs, target="2025-01-02T01:01:01Z", clock=None):
        block = Block(id="c1", type="countdown", content={"targetDate": target})
        return CountdownWidget(block, clock=clock or _Clock(NOW), **widget_kwargs)

    def test_mount_starts_ticking(self, widget_kwargs):
        w = self._widget(widget_kwargs)
        assert not w.ticking
        w.mount()
        assert w.ticking
        html = _html(w)
        assert html.count('<span class="countdown__value">01</span>') == 4

    def test_stops_once_expired(self, widget_kwargs, scheduler):
        clock = _Clock(NOW)
        w = self._widget(widget_kwargs, clock=clock)
        w.mount()
        clock.now = NOW + dt.timedelta(days=2)
        w.tick()
        assert w.view().expired
        assert not w.ticking
        assert scheduler.get_jobs() == []
        assert "The wait is over!" in _html(w)

    def test_unconfigured_never_ticks(self, widget_kwargs):
        w = self._widget(widget_kwargs, target="")
        w.mount()
        assert not w.ticking
        assert "Set a target date" in _html(w)

    def test_unmount_cancels(self, widget_kwargs, scheduler):
        w = self._widget(widget_kwargs)
        w.mount()
        w.unmount()
        assert scheduler.get_jobs() == []

    def test_sync_new_target(self, widget_kwargs):
        w = self._widget(widget_kwargs, target="")
        w.mount()
        w.sync(Block(id="c1", type="countdown", content={"targetDate": "2025-01-01T00:00:30Z"}))
        assert w.ticking
        assert w.view().seconds == 30


# ── Formulaire ──────────────────────────────────────────────────────────────

class TestFormWidget:
    @pytest.fixture
    def form(self, widget_kwargs):
        w = FormWidget(Block(id="f1", type="form", content={"formType": "contact"}), **widget_kwargs)
        w.mount()
        return w

    def _fill(self, form):
        form.set_value("Name", "Ada")
        form.set_value("Email", "ada@example.com")
        form.set_value("Message", "Bonjour")

    def test_required_fields(self, form):
        assert not form.submit()
        assert form.status == IDLE
        assert set(form.errors) == {"Name", "Email", "Message"}
        assert form.errors["Name"] == "Name is required"
        assert "Name is required" in _html(form)

    def test_invalid_email(self, form):
        self._fill(form)
        form.set_value("Email", "nope")
        assert not form.submit()
        assert form.errors == {"Email": "Please enter a valid email address"}

    def test_typing_clears_field_error(self, form):
        form.submit()
        form.set_value("Name", "Ada")
        assert "Name" not in form.errors

    def test_immediate_submit(self, form):
        self._fill(form)
        assert form.submit(delay=0)
        assert form.status == SUBMITTED
        assert "Message sent successfully!" in _html(form)

    def test_delayed_submit(self, form, scheduler):
        self._fill(form)
        assert form.submit()
        assert form.status == SUBMITTING
        assert "Sending…" in _html(form)
        assert len(scheduler.get_jobs()) == 1
        form.complete()
        assert form.status == SUBMITTED
        assert scheduler.get_jobs() == []

    def test_no_double_submit(self, form):
        self._fill(form)
        form.submit()
        assert not form.submit()

    def test_values_frozen_while_submitting(self, form):
        self._fill(form)
        form.submit()
        form.set_value("Name", "Grace")
        assert form.values["Name"] == "Ada"

    def test_unmount_while_submitting(self, form, scheduler):
        self._fill(form)
        form.submit()
        form.unmount()
        assert form.status == IDLE
        assert scheduler.get_jobs() == []

    def test_reset(self, form):
        self._fill(form)
        form.submit(delay=0)
        form.reset()
        assert form.status == IDLE
        assert form.values == {}

    def test_sync_drops_orphan_values(self, form):
        self._fill(form)
        form.sync(Block(id="f1", type="form", content={"fields": [{"type": "text", "label": "Name"}]}))
        assert form.values == {"Name": "Ada"}

    def test_custom_success_message(self, widget_kwargs):
        w = FormWidget(Block(id="f2", type="form", content={"formType": "newsletter", "successMessage": "Merci !"}), **widget_kwargs)
        w.set_value("Email Address", "a@b.co")
        w.submit(delay=0)
        assert "Merci !" in _html(w)
