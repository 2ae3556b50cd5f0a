"""Widgets interactifs — état transitoire, jamais écrit dans les blocs."""
from .keyboard import KeyboardHub
from .timers import IntervalTimer, get_scheduler, stop_scheduler
from .base import Widget
from .gallery import GalleryWidget, Grid, CarouselBrowsing, LightboxOpen
from .countdown import CountdownWidget
from .form import FormWidget

# type de bloc → classe de widget
WIDGETS = {
    "gallery": GalleryWidget,
    "countdown": CountdownWidget,
    "form": FormWidget,
}

__all__ = [
    "KeyboardHub",
    "IntervalTimer", "get_scheduler", "stop_scheduler",
    "Widget",
    "GalleryWidget", "Grid", "CarouselBrowsing", "LightboxOpen",
    "CountdownWidget",
    "FormWidget",
    "WIDGETS",
]
