"""Dog Breed Browser — FastAPI REST API layer.

This package contains the FastAPI application and its Pydantic request and
response models.

Modules
-------
main
    Application factory, JSON route handlers, Gradio mount, and the
    ``main()`` CLI entry point.
models
    Pydantic models for API request and response validation.
"""
