"""Gradio event handlers.

Handlers are thin adapters: they turn a Gradio event into a controller
dispatch and the controller's result into component updates.  Card data
crosses the Gradio boundary as plain dicts (``gr.State`` values must be
comparable for change detection), see :func:`cards_to_payload`.

Every handler takes the :class:`DogBrowserController` as its first argument;
``app.py`` binds it with ``functools.partial``.
"""

import logging
from dataclasses import asdict

import gradio as gr

from .controller import DogBrowserController
from .models import (
    LOADING_MESSAGE,
    NO_IMAGES_MESSAGE,
    AppState,
    Element,
    EventKind,
    ImageCard,
)
from .rendering import breed_options, gallery_title

logger = logging.getLogger(__name__)


def cards_to_payload(cards: list[ImageCard]) -> list[dict]:
    """Convert cards to dicts for storage in ``gr.State``."""
    return [asdict(card) for card in cards]


def card_from_payload(payload: dict) -> ImageCard:
    """Rebuild an ImageCard from its ``gr.State`` dict."""
    return ImageCard(
        image_url=payload["image_url"],
        breed=payload.get("breed"),
        is_favorite=bool(payload.get("is_favorite")),
    )


def _title_markdown(title: str) -> str:
    return f"### {title}" if title else ""


async def load_session(
    controller: DogBrowserController, state: AppState | None
) -> tuple[dict, str, list[dict], AppState]:
    """Run the startup tasks for a new browser session.

    Args:
        controller: Application controller
        state: Session state (None on first load)

    Returns:
        Tuple of (breed_dropdown_update, background_html, favorites_payload, state)
    """
    if state is None:
        logger.info("Creating new AppState")
        state = AppState()

    if not state.initialized:
        await controller.initialize(state)

    return (
        gr.update(choices=breed_options(state.breeds), value=""),
        state.background_html,
        cards_to_payload(state.favorite_cards),
        state,
    )


async def select_breed(controller: DogBrowserController, breed: str | None, state: AppState):
    """Handle a breed selector change.

    For a concrete breed, first switches to the gallery with a loading
    message, then fills the grid once images arrive.  A result superseded by
    a newer selection produces no second update.

    Yields:
        Tuples of (gallery_column_update, background_column_update,
        title_markdown, status_markdown, gallery_payload, state)
    """
    if breed:
        yield (
            gr.update(visible=True),
            gr.update(visible=False),
            _title_markdown(gallery_title(breed)),
            LOADING_MESSAGE,
            [],
            state,
        )

    selection = await controller.dispatch(
        state, Element.BREED_SELECT, EventKind.CHANGE, value=breed
    )
    if selection.stale:
        return

    if selection.breed is None:
        status = ""
    else:
        status = "" if selection.cards else NO_IMAGES_MESSAGE

    yield (
        gr.update(visible=state.gallery_visible),
        gr.update(visible=state.background_visible),
        _title_markdown(selection.title),
        status,
        cards_to_payload(selection.cards),
        state,
    )


async def play_card(controller: DogBrowserController, card: dict, state: AppState):
    """Play the pronunciation for a clicked card.

    Returns:
        Update for the audio player, or ``gr.skip()`` when no audio exists
        (a warning naming the breed is shown instead)
    """
    outcome = await controller.dispatch(
        state, Element.CARD, EventKind.CLICK, card=card_from_payload(card)
    )
    if outcome.found:
        return gr.update(value=outcome.audio_url)

    gr.Warning(outcome.notice, duration=None)
    return gr.skip()


async def toggle_card_favorite(
    controller: DogBrowserController, card: dict, state: AppState
) -> tuple[list[dict], list[dict], AppState]:
    """Toggle a card's favourite status.

    Returns:
        Tuple of (favorites_payload, gallery_payload, state)
    """
    is_favorite = await controller.dispatch(
        state, Element.FAVORITE_BUTTON, EventKind.CLICK, card=card_from_payload(card)
    )
    if is_favorite:
        gr.Info("Added to favorites")
    else:
        gr.Info("Removed from favorites")

    return (
        cards_to_payload(state.favorite_cards),
        cards_to_payload(state.gallery_cards),
        state,
    )
