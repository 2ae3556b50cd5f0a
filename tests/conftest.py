import pytest
from apscheduler.schedulers.background import BackgroundScheduler

from block_canvas.core.settings import Settings
from block_canvas.widgets import KeyboardHub


@pytest.fixture
def scheduler():
    """Scheduler non démarré : les jobs restent en attente, inspectables."""
    return BackgroundScheduler(timezone="UTC")


@pytest.fixture
def keyboard():
    return KeyboardHub()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def widget_kwargs(scheduler, keyboard, settings):
    return {"scheduler": scheduler, "keyboard": keyboard, "settings": settings}
