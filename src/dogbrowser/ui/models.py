"""Data models for the Dog Breed Browser UI state and view results."""

from dataclasses import dataclass, field
from enum import Enum


class ViewState(str, Enum):
    """The two mutually exclusive top-level views."""

    IDLE = "idle"  # background animation visible, gallery hidden
    GALLERY = "gallery"  # gallery visible, background hidden


class Element(str, Enum):
    """UI elements that emit interactions."""

    BREED_SELECT = "breed_select"
    CARD = "card"
    FAVORITE_BUTTON = "favorite_button"


class EventKind(str, Enum):
    """Kinds of UI events."""

    CHANGE = "change"
    CLICK = "click"


class Action(str, Enum):
    """Actions the controller performs in response to interactions."""

    SELECT_BREED = "select_breed"
    PLAY_PRONUNCIATION = "play_pronunciation"
    TOGGLE_FAVORITE = "toggle_favorite"


@dataclass(frozen=True)
class ImageCard:
    """One rendered image card.

    ``breed`` is the gallery's breed context; cards in the favourites grid
    have none and infer the breed from the image URL when clicked.
    """

    image_url: str
    breed: str | None = None
    is_favorite: bool = False


@dataclass(frozen=True)
class BreedSelection:
    """Result of selecting an entry in the breed selector.

    Attributes:
        view: View state after the selection
        breed: Selected breed identifier, None for the placeholder
        title: Gallery title ("" in the idle view)
        cards: Cards for the gallery grid
        serial: Value of AppState.selection_serial when the selection was made
        stale: True if a newer selection superseded this one while its
            images were in flight; the result must not be rendered
    """

    view: ViewState
    breed: str | None = None
    title: str = ""
    cards: list[ImageCard] = field(default_factory=list)
    serial: int = 0
    stale: bool = False


@dataclass(frozen=True)
class PronunciationOutcome:
    """Result of a pronunciation request.

    Exactly one of ``audio_url`` and ``notice`` is set.
    """

    breed: str
    audio_url: str | None = None
    notice: str | None = None

    @property
    def found(self) -> bool:
        return self.audio_url is not None


@dataclass
class AppState:
    """Session state for the Gradio UI.

    Each browser session gets its own AppState; the favourites list itself
    lives in the shared FavoritesStore.

    Attributes
    ----------
    view : ViewState
        Currently visible top-level view
    breeds : list[str]
        Breed identifiers shown in the selector
    selected_breed : str | None
        Breed currently shown in the gallery
    gallery_title : str
        Title above the gallery grid
    gallery_cards : list[ImageCard]
        Cards currently shown in the gallery grid
    favorite_cards : list[ImageCard]
        Cards currently shown in the favourites grid
    background_html : str
        Rendered background animation markup
    selection_serial : int
        Incremented on every breed selection; used to drop stale results
    initialized : bool
        Whether the startup tasks have run for this session
    """

    view: ViewState = ViewState.IDLE
    breeds: list[str] = field(default_factory=list)
    selected_breed: str | None = None
    gallery_title: str = ""
    gallery_cards: list[ImageCard] = field(default_factory=list)
    favorite_cards: list[ImageCard] = field(default_factory=list)
    background_html: str = ""
    selection_serial: int = 0
    initialized: bool = False

    @property
    def gallery_visible(self) -> bool:
        return self.view is ViewState.GALLERY

    @property
    def background_visible(self) -> bool:
        return self.view is ViewState.IDLE

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"AppState(view={self.view.value}, "
            f"breed={self.selected_breed}, "
            f"breeds={len(self.breeds)}, "
            f"favorites={len(self.favorite_cards)})"
        )


# UI text
PLACEHOLDER_LABEL = "Select a breed..."
GALLERY_TITLE_PREFIX = "Showing images for: "
LOADING_MESSAGE = "Fetching doggos..."
NO_FAVORITES_MESSAGE = "You have no favorite dogs yet!"
NO_IMAGES_MESSAGE = "No images found for this breed."
NO_PRONUNCIATION_TEMPLATE = 'Sorry, no pronunciation found for "{breed}".'
FAVORITE_ICON = "♥"
