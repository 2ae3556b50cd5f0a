"""
Tests GalleryWidget — grille / carrousel / lightbox, clavier et autoplay.
"""
import pytest

from block_canvas.blocks.gallery import GalleryView, render_gallery
from block_canvas.core.schemas import Block, PageTheme
from block_canvas.style.resolver import resolve
from block_canvas.widgets.gallery import CarouselBrowsing, GalleryWidget, Grid, LightboxOpen

IMAGES = [
    {"url": "https://cdn.example.com/1.jpg", "caption": "Un"},
    {"url": "https://cdn.example.com/2.jpg"},
    {"url": "https://cdn.example.com/3.jpg"},
]


def _block(**content):
    return Block(id="g1", type="gallery", content={"images": IMAGES, **content})


def _html(widget):
    theme = PageTheme()
    return widget.render(resolve(widget.block, theme), theme)


@pytest.fixture
def grid(widget_kwargs):
    w = GalleryWidget(_block(), **widget_kwargs)
    w.mount()
    return w


@pytest.fixture
def carousel(widget_kwargs):
    w = GalleryWidget(_block(layout="carousel", autoplay=True), **widget_kwargs)
    w.mount()
    return w


# ── Lightbox ────────────────────────────────────────────────────────────────

class TestLightbox:
    def test_initial_grid(self, grid):
        assert grid.state == Grid()
        assert not grid.listening

    def test_click_opens(self, grid, keyboard):
        assert grid.click_image(1)
        assert grid.state == LightboxOpen(1, return_to=Grid())
        assert keyboard.listener_count == 1
        assert grid.view().lightbox_index == 1
        assert "2 / 3" in _html(grid)

    def test_arrows_wrap_around(self, grid, keyboard):
        grid.click_image(2)
        assert keyboard.dispatch("ArrowRight")
        assert grid.index == 0
        keyboard.dispatch("ArrowLeft")
        keyboard.dispatch("ArrowLeft")
        assert grid.index == 1

    def test_escape_restores_and_detaches(self, grid, keyboard):
        grid.click_image(0)
        assert keyboard.dispatch("Escape")
        assert grid.state == Grid()
        assert keyboard.listener_count == 0
        assert not keyboard.dispatch("ArrowRight")

    def test_other_keys_are_ignored(self, grid, keyboard):
        grid.click_image(0)
        assert not keyboard.dispatch("Enter")
        assert isinstance(grid.state, LightboxOpen)

    @pytest.mark.parametrize("index", [-1, 3, 99])
    def test_out_of_range_ignored(self, grid, index):
        assert not grid.click_image(index)
        assert grid.state == Grid()

    def test_disabled_lightbox(self, widget_kwargs):
        w = GalleryWidget(_block(enableLightbox=False), **widget_kwargs)
        assert not w.click_image(0)

    def test_linked_image_does_not_open(self, widget_kwargs):
        block = Block(id="g", type="gallery", content={"images": [{"url": "a.jpg", "link": "https://example.com"}]})
        w = GalleryWidget(block, **widget_kwargs)
        assert not w.click_image(0)
        assert 'href="https://example.com"' in _html(w)

    def test_unmount_closes_and_detaches(self, grid, keyboard):
        grid.click_image(0)
        grid.unmount()
        assert grid.state == Grid()
        assert keyboard.listener_count == 0


# ── Carrousel / autoplay ────────────────────────────────────────────────────

class TestCarousel:
    def test_initial_state(self, carousel, scheduler):
        assert carousel.state == CarouselBrowsing(0)
        assert carousel.autoplay_active
        assert len(scheduler.get_jobs()) == 1

    def test_tick_advances_and_wraps(self, carousel):
        for expected in (1, 2, 0):
            carousel.tick()
            assert carousel.index == expected

    def test_manual_navigation_rearms_timer(self, carousel, scheduler):
        before = scheduler.get_jobs()[0].id
        carousel.previous()
        assert carousel.index == 2
        jobs = scheduler.get_jobs()
        assert len(jobs) == 1
        assert jobs[0].id != before

    def test_lightbox_pauses_autoplay(self, carousel):
        carousel.click_image(0)
        assert carousel.state == LightboxOpen(0, return_to=CarouselBrowsing(0))
        assert not carousel.autoplay_active
        carousel.tick()
        assert carousel.index == 0
        carousel.close()
        assert carousel.state == CarouselBrowsing(0)
        assert carousel.autoplay_active

    def test_lightbox_from_carousel_keeps_position(self, carousel):
        carousel.next()
        carousel.click_image(1)
        carousel.next()
        carousel.close()
        assert carousel.state == CarouselBrowsing(1)

    def test_hidden_pauses_autoplay(self, carousel, scheduler):
        carousel.set_visible(False)
        assert not carousel.autoplay_active
        assert scheduler.get_jobs() == []
        carousel.set_visible(True)
        assert carousel.autoplay_active

    def test_unmount_cancels_timer(self, carousel, scheduler):
        carousel.unmount()
        assert scheduler.get_jobs() == []

    def test_no_autoplay_before_mount(self, widget_kwargs, scheduler):
        GalleryWidget(_block(layout="carousel", autoplay=True), **widget_kwargs)
        assert scheduler.get_jobs() == []

    def test_single_image_never_autoplays(self, widget_kwargs):
        block = Block(id="g", type="gallery", content={"images": IMAGES[:1], "layout": "carousel", "autoplay": True})
        w = GalleryWidget(block, **widget_kwargs)
        w.mount()
        assert not w.autoplay_active

    def test_render_current_slide(self, carousel):
        carousel.next()
        html = _html(carousel)
        assert 'data-index="1"' in html
        assert "carousel__dot--active" in html
        assert 'data-autoplay="true"' in html


# ── Synchronisation avec le store ───────────────────────────────────────────

class TestSync:
    def test_index_clamped_when_images_removed(self, carousel):
        carousel.next()
        carousel.next()
        carousel.sync(_block(layout="carousel", autoplay=True, images=IMAGES[:2]))
        assert carousel.state == CarouselBrowsing(1)

    def test_layout_change_resets(self, carousel, keyboard):
        carousel.click_image(0)
        carousel.sync(_block(layout="grid"))
        assert carousel.state == Grid()
        assert keyboard.listener_count == 0
        assert not carousel.autoplay_active

    def test_all_images_removed(self, carousel):
        carousel.sync(_block(layout="carousel", images=[]))
        assert carousel.state == Grid()
        assert not carousel.autoplay_active

    def test_images_added_to_empty_carousel(self, widget_kwargs):
        empty = Block(id="g1", type="gallery", content={"images": [], "layout": "carousel", "carouselAutoPlay": True})
        w = GalleryWidget(empty, **widget_kwargs)
        w.mount()
        assert w.state == Grid()
        w.sync(_block(layout="carousel", carouselAutoPlay=True))
        assert w.state == CarouselBrowsing(0)
        assert w.autoplay_active
        w.next()
        assert w.state == CarouselBrowsing(1)

    def test_autoplay_toggled_off_by_content(self, carousel, scheduler):
        carousel.sync(_block(layout="carousel", autoplay=False))
        assert not carousel.autoplay_active
        assert scheduler.get_jobs() == []
        carousel.sync(_block(layout="carousel", carouselAutoPlay=True))
        assert carousel.autoplay_active

    def test_carousel_autoplay_key_wins(self, widget_kwargs):
        w = GalleryWidget(_block(layout="carousel", autoplay=True, carouselAutoPlay=False), **widget_kwargs)
        w.mount()
        assert not w.autoplay_active


# ── Rendu sans widget ───────────────────────────────────────────────────────

def test_empty_gallery_placeholder():
    theme = PageTheme()
    block = Block(id="g", type="gallery", content={"images": []})
    assert "Gallery Block" in render_gallery(block, resolve(block, theme), theme)


def test_grid_columns_vars():
    theme = PageTheme()
    block = _block(columns=4, mobileColumns=2)
    html = render_gallery(block, resolve(block, theme), theme, GalleryView())
    assert "--bc-gallery-columns:4" in html
    assert "--bc-gallery-columns-mobile:2" in html
    assert html.count("gallery__tile--zoomable") == 3
