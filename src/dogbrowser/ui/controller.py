"""Controller orchestrating the gateway, favourites store, and view state.

The controller owns no per-session data: every operation receives the
session's :class:`AppState` and updates it in place.  UI interactions are
routed through a single dispatch table mapping ``(Element, EventKind)`` to an
:class:`Action`, so the UI layer never decides on its own what a click means.

View-switch state machine
-------------------------
    IDLE --(select breed)--> GALLERY
    GALLERY --(select breed)--> GALLERY
    IDLE/GALLERY --(select placeholder)--> IDLE

Stale responses
---------------
Each selection bumps ``AppState.selection_serial``.  When images arrive for a
selection that is no longer the latest, the result is returned with
``stale=True`` and the state is left untouched.
"""

import asyncio
import logging
import random

from dogbrowser.core.config import DogBrowserConfig
from dogbrowser.core.favorites import FavoritesStore
from dogbrowser.core.gateway import RemoteGateway

from .models import (
    NO_PRONUNCIATION_TEMPLATE,
    Action,
    AppState,
    BreedSelection,
    Element,
    EventKind,
    ImageCard,
    PronunciationOutcome,
    ViewState,
)
from .rendering import (
    breed_from_image_url,
    build_cards,
    gallery_title,
    plan_background,
    primary_breed,
    render_background_html,
)

logger = logging.getLogger(__name__)


INTERACTIONS: dict[tuple[Element, EventKind], Action] = {
    (Element.BREED_SELECT, EventKind.CHANGE): Action.SELECT_BREED,
    (Element.CARD, EventKind.CLICK): Action.PLAY_PRONUNCIATION,
    (Element.FAVORITE_BUTTON, EventKind.CLICK): Action.TOGGLE_FAVORITE,
}


class UnknownInteraction(ValueError):
    """Raised when an (element, event) pair has no action."""


def resolve_action(element: Element, event: EventKind) -> Action:
    """Look up the action for a UI interaction.

    Raises:
        UnknownInteraction: If the pair is not in the dispatch table
    """
    try:
        return INTERACTIONS[(element, event)]
    except KeyError:
        raise UnknownInteraction(f"No action for {event.value} on {element.value}") from None


def pronunciation_word(card: ImageCard) -> str:
    """Word to look up when a card is clicked.

    Uses the card's breed context if it has one, otherwise the breed inferred
    from the image URL; only the primary breed segment is kept.
    """
    name = card.breed or breed_from_image_url(card.image_url)
    return primary_breed(name)


class DogBrowserController:
    """Coordinate remote fetches, favourites, and view transitions.

    Args:
        gateway: Remote data gateway
        favorites: Loaded favourites store
        image_count: Images fetched per breed selection
        background_breed: Breed used for the background animation
        background_count: Number of background images
        rng: Random source for the background animation
    """

    def __init__(
        self,
        gateway: RemoteGateway,
        favorites: FavoritesStore,
        *,
        image_count: int = 9,
        background_breed: str = "retriever/golden",
        background_count: int = 10,
        rng: random.Random | None = None,
    ):
        self.gateway = gateway
        self.favorites = favorites
        self.image_count = image_count
        self.background_breed = background_breed
        self.background_count = background_count
        self.rng = rng or random.Random()

    @classmethod
    def from_config(
        cls, cfg: DogBrowserConfig, gateway: RemoteGateway, favorites: FavoritesStore
    ) -> "DogBrowserController":
        """Build a controller using the gallery settings from ``cfg``."""
        return cls(
            gateway,
            favorites,
            image_count=cfg.default_image_count,
            background_breed=cfg.background_breed,
            background_count=cfg.background_image_count,
        )

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------

    async def initialize(self, state: AppState) -> AppState:
        """Run the three independent startup tasks concurrently.

        The background animation, the favourites grid, and the breed list
        touch disjoint parts of the state, so no ordering is imposed.
        """
        await asyncio.gather(
            self.start_background(state),
            self._render_favorites_task(state),
            self.load_breeds(state),
        )
        state.initialized = True
        logger.info(f"Session initialized: {state!r}")
        return state

    async def start_background(self, state: AppState) -> str:
        """Fetch background images and render the floating animation."""
        urls = await self.gateway.fetch_breed_images(self.background_breed, self.background_count)
        state.background_html = render_background_html(plan_background(urls, self.rng))
        return state.background_html

    async def load_breeds(self, state: AppState) -> list[str]:
        """Fetch the breed list for the selector."""
        state.breeds = await self.gateway.fetch_all_breeds()
        return state.breeds

    async def _render_favorites_task(self, state: AppState) -> list[ImageCard]:
        return self.render_favorites(state)

    def render_favorites(self, state: AppState) -> list[ImageCard]:
        """Rebuild the favourites grid from the store."""
        favorites = self.favorites.all()
        state.favorite_cards = build_cards(favorites, favorites)
        return state.favorite_cards

    # ------------------------------------------------------------------
    # Breed selection
    # ------------------------------------------------------------------

    def switch_view(self, state: AppState, breed: str | None) -> BreedSelection:
        """Apply the view transition for a selector change.

        The placeholder (empty or None) returns to the idle view; any breed
        shows the gallery with an empty grid until images are loaded.
        """
        state.selection_serial += 1
        state.gallery_cards = []

        if not breed:
            state.view = ViewState.IDLE
            state.selected_breed = None
            state.gallery_title = ""
            logger.debug("Placeholder selected, showing background")
            return BreedSelection(view=ViewState.IDLE, serial=state.selection_serial)

        state.view = ViewState.GALLERY
        state.selected_breed = breed
        state.gallery_title = gallery_title(breed)
        return BreedSelection(
            view=ViewState.GALLERY,
            breed=breed,
            title=state.gallery_title,
            serial=state.selection_serial,
        )

    async def load_gallery(self, state: AppState, selection: BreedSelection) -> BreedSelection:
        """Fetch images for a selection made by :meth:`switch_view`."""
        if selection.view is not ViewState.GALLERY or selection.breed is None:
            return selection

        urls = await self.gateway.fetch_breed_images(selection.breed, self.image_count)

        if state.selection_serial != selection.serial:
            logger.info(f"Discarding stale images for {selection.breed}")
            return BreedSelection(
                view=selection.view,
                breed=selection.breed,
                title=selection.title,
                serial=selection.serial,
                stale=True,
            )

        cards = build_cards(urls, self.favorites.all(), selection.breed)
        state.gallery_cards = cards
        logger.info(f"Showing {len(cards)} images for {selection.breed}")
        return BreedSelection(
            view=selection.view,
            breed=selection.breed,
            title=selection.title,
            cards=cards,
            serial=selection.serial,
        )

    async def select_breed(self, state: AppState, breed: str | None) -> BreedSelection:
        """Switch view for ``breed`` and, for a real breed, load its images."""
        return await self.load_gallery(state, self.switch_view(state, breed))

    # ------------------------------------------------------------------
    # Card interactions
    # ------------------------------------------------------------------

    def toggle_favorite(self, state: AppState, image_url: str) -> bool:
        """Toggle an image's favourite status and refresh both grids.

        Returns:
            True if the image is now a favourite
        """
        is_favorite = self.favorites.toggle(image_url)
        favorites = self.favorites.all()
        state.favorite_cards = build_cards(favorites, favorites)
        state.gallery_cards = build_cards(
            [card.image_url for card in state.gallery_cards], favorites, state.selected_breed
        )
        return is_favorite

    async def play_pronunciation(self, breed: str) -> PronunciationOutcome:
        """Resolve pronunciation audio for a bare breed name.

        Returns:
            Outcome carrying either the audio URL or a user-facing notice
        """
        audio_url = await self.gateway.fetch_pronunciation(breed) if breed else None
        if audio_url:
            return PronunciationOutcome(breed=breed, audio_url=audio_url)
        notice = NO_PRONUNCIATION_TEMPLATE.format(breed=breed)
        return PronunciationOutcome(breed=breed, notice=notice)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def dispatch(
        self,
        state: AppState,
        element: Element,
        event: EventKind,
        *,
        value: str | None = None,
        card: ImageCard | None = None,
    ) -> BreedSelection | PronunciationOutcome | bool:
        """Route a UI interaction to its action.

        Args:
            state: Session state
            element: Element that emitted the event
            event: Event kind
            value: New selector value (breed selection)
            card: Card the event belongs to (card and favourite clicks)

        Returns:
            BreedSelection, PronunciationOutcome, or the new favourite flag

        Raises:
            UnknownInteraction: For pairs with no action
            ValueError: If a card action is dispatched without a card
        """
        action = resolve_action(element, event)
        logger.debug(f"Dispatching {action.value} for {event.value} on {element.value}")

        if action is Action.SELECT_BREED:
            return await self.select_breed(state, value)

        if card is None:
            raise ValueError(f"{action.value} requires a card")

        if action is Action.TOGGLE_FAVORITE:
            return self.toggle_favorite(state, card.image_url)
        return await self.play_pronunciation(pronunciation_word(card))
