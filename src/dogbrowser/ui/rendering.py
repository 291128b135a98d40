"""Pure rendering helpers: labels, selector options, cards, and background markup.

Nothing in this module performs I/O or touches Gradio, so every function can
be tested with plain values.
"""

import html
import random
from dataclasses import dataclass
from urllib.parse import urlparse

from .models import GALLERY_TITLE_PREFIX, PLACEHOLDER_LABEL, ImageCard


def breed_label(breed: str) -> str:
    """Build the display label for a breed identifier.

    Each ``/`` segment gets its first character upper-cased and the segments
    are joined by a space.

    >>> breed_label("bulldog/boston")
    'Bulldog Boston'
    """
    return " ".join(segment[:1].upper() + segment[1:] for segment in breed.split("/"))


def breed_options(breeds: list[str]) -> list[tuple[str, str]]:
    """Build (label, value) choices for the breed selector.

    The placeholder entry comes first and carries an empty value.
    """
    return [(PLACEHOLDER_LABEL, "")] + [(breed_label(breed), breed) for breed in breeds]


def gallery_title(breed: str) -> str:
    """Title shown above the gallery for a selected breed."""
    return f"{GALLERY_TITLE_PREFIX}{breed_label(breed)}"


def primary_breed(breed: str) -> str:
    """Return the part of a breed identifier before any ``/``."""
    return breed.split("/")[0]


def breed_from_image_url(image_url: str) -> str:
    """Infer a breed name from an image URL.

    The image service stores files under ``.../breeds/<breed>/<file>``, so the
    breed is the path segment directly before the filename.  Returns "" when
    the URL has no such segment.
    """
    segments = urlparse(image_url).path.split("/")
    if len(segments) < 2:
        return ""
    return segments[-2]


def build_cards(
    image_urls: list[str], favorites: list[str], breed: str | None = None
) -> list[ImageCard]:
    """Build one card per image URL, in order.

    Args:
        image_urls: Image URLs to render
        favorites: Current favourites list (for the card's favourite marker)
        breed: Breed context of the grid, None for the favourites grid

    Returns:
        List of ImageCard
    """
    favorite_set = set(favorites)
    return [
        ImageCard(image_url=url, breed=breed, is_favorite=url in favorite_set)
        for url in image_urls
    ]


# ============================================================================
# Background animation
# ============================================================================


@dataclass(frozen=True)
class FloatingImage:
    """Randomized animation parameters for one background image."""

    image_url: str
    left_pct: float  # final horizontal offset, percent of viewport width
    top_pct: float  # final vertical offset, percent of viewport height
    scale: float
    rotate_deg: float
    duration_s: float


def plan_background(image_urls: list[str], rng: random.Random | None = None) -> list[FloatingImage]:
    """Pick independent random animation parameters for each image.

    Args:
        image_urls: Background image URLs
        rng: Random source (defaults to a fresh ``random.Random``)

    Returns:
        One FloatingImage per URL
    """
    rng = rng or random.Random()
    return [
        FloatingImage(
            image_url=url,
            left_pct=round(rng.uniform(0, 85), 2),
            top_pct=round(rng.uniform(0, 80), 2),
            scale=round(rng.uniform(0.2, 0.6), 3),
            rotate_deg=round(rng.uniform(-30, 30), 2),
            duration_s=round(rng.uniform(10, 20), 2),
        )
        for url in image_urls
    ]


_BACKGROUND_CSS = """
#bg-dogs { position: fixed; inset: 0; overflow: hidden; pointer-events: none; z-index: 0; }
#bg-dogs .bg-dog-image {
    position: absolute; top: 0; left: 0; width: 150px; height: 150px;
    object-fit: cover; border-radius: 50%; opacity: 0;
}
"""


def render_background_html(floating: list[FloatingImage]) -> str:
    """Render floating images as HTML with one CSS keyframe set per image.

    Each image fades in to half opacity and back out while it drifts,
    scales, and rotates; the animation loops forever in alternating
    direction.
    """
    rules = [_BACKGROUND_CSS]
    images = []
    for index, item in enumerate(floating):
        name = f"bg-dog-float-{index}"
        rules.append(
            f"@keyframes {name} {{\n"
            f"  0% {{ transform: translate(0, 0) scale(0) rotate(0deg); opacity: 0; }}\n"
            f"  50% {{ opacity: 0.5; }}\n"
            f"  100% {{ transform: translate({item.left_pct}vw, {item.top_pct}vh) "
            f"scale({item.scale}) rotate({item.rotate_deg}deg); opacity: 0; }}\n"
            f"}}\n"
            f"#bg-dogs .bg-dog-image:nth-child({index + 1}) {{ "
            f"animation: {name} {item.duration_s}s cubic-bezier(0.37, 0, 0.63, 1) "
            f"infinite alternate; }}"
        )
        images.append(
            f'<img class="bg-dog-image" src="{html.escape(item.image_url, quote=True)}" alt="">'
        )

    css = "\n".join(rules)
    return f'<style>{css}</style><div id="bg-dogs">{"".join(images)}</div>'
