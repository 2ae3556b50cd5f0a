"""
Bloc gallery — grille, masonry ou carrousel, avec lightbox.

Le rendu est une fonction de (bloc, vue) : la vue (`GalleryView`) porte
l'index du carrousel et l'éventuelle image ouverte en lightbox. Elle vient du
GalleryWidget (état transitoire) et n'est jamais écrite dans le bloc.
"""
from dataclasses import dataclass
from typing import Optional

from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import class_attr, empty_placeholder, esc, img, items, number, style_attr

LAYOUTS = ("grid", "masonry", "carousel")
GAPS = {"tight": "0.25rem", "normal": "0.75rem", "loose": "1.5rem"}
ASPECTS = {"square": "1 / 1", "landscape": "16 / 9", "portrait": "3 / 4", "auto": None}
BADGE_COLORS = {"NEW": "#22c55e", "FEATURED": "#7c3aed", "SALE": "#ef4444", "HOT": "#f97316"}
FILTERS = {"grayscale": "grayscale(1)", "sepia": "sepia(1)", "blur": "blur(4px)"}


@dataclass(frozen=True)
class GalleryView:
    carousel_index: int = 0
    lightbox_index: Optional[int] = None
    autoplay: bool = False


def gallery_images(block: Block) -> list:
    return items(block.content, "images")


def gallery_layout(block: Block) -> str:
    layout = block.content.get("layout")
    return layout if layout in LAYOUTS else "grid"


def lightbox_enabled(block: Block) -> bool:
    return block.content.get("enableLightbox", True) is not False


def carousel_autoplay(block: Block) -> bool:
    """`carouselAutoPlay`, avec `autoplay` accepté comme ancien nom."""
    c = block.content
    return bool(c.get("carouselAutoPlay", c.get("autoplay")))


def _overlay(c: dict) -> str:
    opacity = number(c, "overlayOpacity", 0)
    if opacity <= 0:
        return ""
    alpha = f"{round(min(opacity, 100) / 100 * 255):02x}"
    color = c.get("overlayColor") or "#000000"
    return f'<span class="gallery__overlay"{style_attr(("background-color", color + alpha))}></span>'


def _tile(block: Block, index: int, image: dict) -> str:
    c = block.content
    alt = image.get("alt") or f"Gallery image {index + 1}"
    if not image.get("url"):
        body = f'<span class="gallery__empty-tile">Image {index + 1}</span>'
    else:
        filt = FILTERS.get(c.get("imageFilter"))
        body = img(
            image["url"],
            alt=alt,
            css_class=f"gallery__img gallery__img--{esc(c.get('hoverEffect') or 'zoom')}",
            style=style_attr(("filter", filt), ("object-fit", "contain" if c.get("aspectRatio") == "auto" else "cover")),
            lazy=c.get("lazyLoad", True) is not False,
        )
        body += _overlay(c)
        if image.get("badge"):
            body += (
                f'<span class="gallery__badge"{style_attr(("background", BADGE_COLORS.get(image["badge"], "#111827")))}>'
                f'{esc(image["badge"])}</span>'
            )
        if image.get("title"):
            caption = f"<p>{esc(image['caption'])}</p>" if image.get("caption") else ""
            body += f'<span class="gallery__title-overlay"><strong>{esc(image["title"])}</strong>{caption}</span>'
        elif c.get("showCaptions") and image.get("caption"):
            body += f'<span class="gallery__caption">{esc(image["caption"])}</span>'

    tile_style = style_attr(
        ("border-radius", f"{int(number(c, 'borderRadius', 8))}px"),
        ("aspect-ratio", ASPECTS.get(c.get("aspectRatio") or "square", "1 / 1")),
    )
    if image.get("link"):
        return (
            f'<a href="{esc(image["link"])}" target="_blank" rel="noopener noreferrer" '
            f'class="gallery__tile gallery__tile--link" data-index="{index}"{tile_style}>{body}</a>'
        )
    zoom = " gallery__tile--zoomable" if lightbox_enabled(block) else ""
    return f'<div class="gallery__tile{zoom}" data-index="{index}"{tile_style}>{body}</div>'


def _lightbox(block: Block, images: list, index: int) -> str:
    image = images[index]
    alt = image.get("alt") or f"Gallery image {index + 1}"
    caption = f'<p class="lightbox__caption">{esc(image.get("caption"))}</p>' if image.get("caption") else ""
    return f"""<div class="lightbox" role="dialog" aria-modal="true" data-index="{index}">
  <button class="lightbox__close" aria-label="Close">×</button>
  <button class="lightbox__prev" aria-label="Previous">‹</button>
  <figure class="lightbox__figure">{img(image.get("url"), alt=alt, css_class="lightbox__img", lazy=False)}{caption}</figure>
  <button class="lightbox__next" aria-label="Next">›</button>
  <span class="lightbox__counter">{index + 1} / {len(images)}</span>
</div>"""


def _carousel(block: Block, images: list, view: GalleryView) -> str:
    index = view.carousel_index % len(images)
    current = images[index]
    dots = "".join(
        f'<span class="carousel__dot{" carousel__dot--active" if i == index else ""}" data-index="{i}"></span>'
        for i in range(len(images))
    )
    controls = ""
    if len(images) > 1:
        controls = (
            '<button class="carousel__prev" aria-label="Previous">‹</button>'
            '<button class="carousel__next" aria-label="Next">›</button>'
            f'<div class="carousel__dots">{dots}</div>'
        )
    autoplay = ' data-autoplay="true"' if view.autoplay else ""
    return (
        f'<div class="gallery gallery--carousel" data-index="{index}"{autoplay}>'
        f'<div class="carousel__stage">{_tile(block, index, current)}</div>{controls}</div>'
    )


def render_gallery(block: Block, style: ResolvedStyle, theme: PageTheme, view: Optional[GalleryView] = None) -> str:
    view = view or GalleryView()
    images = gallery_images(block)
    if not images:
        return empty_placeholder("Gallery Block", "Add images to create your gallery")

    c = block.content
    layout = gallery_layout(block)
    if layout == "carousel":
        body = _carousel(block, images, view)
    else:
        columns = int(number(c, "columns", 3))
        columns = columns if columns in (2, 3, 4) else 3
        tiles = "".join(_tile(block, i, image) for i, image in enumerate(images))
        attrs = style_attr(
            ("--bc-gallery-columns", columns),
            ("--bc-gallery-columns-mobile", 2 if c.get("mobileColumns") == 2 else 1),
            ("--bc-gallery-columns-tablet", 3 if c.get("tabletColumns") == 3 else 2),
            ("gap", GAPS.get(c.get("gap") or "normal", GAPS["normal"])),
        )
        body = f"<div{class_attr('gallery', f'gallery--{layout}')}{attrs}>{tiles}</div>"

    if view.lightbox_index is not None and 0 <= view.lightbox_index < len(images):
        body += _lightbox(block, images, view.lightbox_index)
    return body
