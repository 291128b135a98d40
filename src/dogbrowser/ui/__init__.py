"""Gradio user interface for the Dog Breed Browser.

Modules
-------
models
    Session state, view states, dispatch enums, and view result types.
rendering
    Pure helpers for labels, selector options, cards, and background markup.
controller
    View-switch state machine and (element, event) -> action dispatch.
handlers
    Gradio event handlers adapting controller results to component updates.
app
    Blocks layout and event wiring.
"""
