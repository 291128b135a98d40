"""Gradio UI for the Dog Breed Browser."""

import logging
from functools import partial

import gradio as gr

from . import handlers
from .controller import DogBrowserController
from .models import FAVORITE_ICON, NO_FAVORITES_MESSAGE, PLACEHOLDER_LABEL, AppState

logger = logging.getLogger(__name__)


CUSTOM_CSS = """
#pronunciation-audio { display: none; }
.image-grid { flex-wrap: wrap; gap: 12px; }
.image-card { position: relative; max-width: 240px; cursor: pointer; }
.image-card .fav-button { position: absolute; right: 8px; bottom: 8px; min-width: 0; }
.image-card.is-favorite .fav-button { color: #e0245e; }
"""


def _render_card_grid(
    cards: list[dict],
    controller: DogBrowserController,
    ui_state: gr.State,
    audio: gr.Audio,
    favorites_state: gr.State,
    gallery_state: gr.State,
) -> None:
    """Create one image + favourite button per card and wire its events.

    Clicking the image plays the pronunciation; clicking the button only
    toggles the favourite.
    """
    with gr.Row(elem_classes="image-grid"):
        for card in cards:
            card_classes = ["image-card", "is-favorite"] if card["is_favorite"] else ["image-card"]
            with gr.Column(min_width=200, elem_classes=card_classes):
                image = gr.Image(
                    value=card["image_url"],
                    show_label=False,
                    interactive=False,
                    height=220,
                    show_download_button=False,
                )
                favorite_button = gr.Button(
                    FAVORITE_ICON,
                    size="sm",
                    variant="primary" if card["is_favorite"] else "secondary",
                    elem_classes="fav-button",
                )

            image.select(
                fn=partial(handlers.play_card, controller, card),
                inputs=[ui_state],
                outputs=[audio],
                concurrency_limit=None,
            )
            favorite_button.click(
                fn=partial(handlers.toggle_card_favorite, controller, card),
                inputs=[ui_state],
                outputs=[favorites_state, gallery_state, ui_state],
            )


def create_ui(controller: DogBrowserController) -> gr.Blocks:
    """Create the Gradio Blocks app.

    Args:
        controller: Controller shared by all sessions

    Returns:
        Gradio Blocks app (not launched)
    """
    app = gr.Blocks(title="Dog Breed Browser", css=CUSTOM_CSS)

    with app:
        # Session state - one instance per user
        ui_state = gr.State(AppState())
        gallery_state = gr.State([])
        favorites_state = gr.State([])

        gr.Markdown(
            """
            # Dog Breed Browser
            ### Pick a breed, click a dog to hear its name, tap ♥ to keep it
            """
        )

        breed_select = gr.Dropdown(
            choices=[(PLACEHOLDER_LABEL, "")],
            value="",
            label="Breed",
            interactive=True,
        )
        audio = gr.Audio(
            autoplay=True,
            interactive=False,
            show_label=False,
            elem_id="pronunciation-audio",
        )

        with gr.Column(visible=True) as background_column:
            background = gr.HTML()

        with gr.Column(visible=False) as gallery_column:
            gallery_title = gr.Markdown()
            gallery_status = gr.Markdown()

            @gr.render(inputs=[gallery_state])
            def render_gallery(cards):
                if cards:
                    _render_card_grid(
                        cards, controller, ui_state, audio, favorites_state, gallery_state
                    )

        gr.Markdown("## My Favorites")

        @gr.render(inputs=[favorites_state])
        def render_favorites(cards):
            if not cards:
                gr.Markdown(NO_FAVORITES_MESSAGE)
                return
            _render_card_grid(cards, controller, ui_state, audio, favorites_state, gallery_state)

        app.load(
            fn=partial(handlers.load_session, controller),
            inputs=[ui_state],
            outputs=[breed_select, background, favorites_state, ui_state],
        )
        breed_select.change(
            fn=partial(handlers.select_breed, controller),
            inputs=[breed_select, ui_state],
            outputs=[
                gallery_column,
                background_column,
                gallery_title,
                gallery_status,
                gallery_state,
                ui_state,
            ],
            concurrency_limit=None,
        )

    logger.info("Gradio UI created")
    return app
