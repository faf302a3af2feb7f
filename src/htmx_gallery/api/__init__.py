"""HTMX Gallery — FastAPI web layer.

This package contains the FastAPI application and the HTML fragment
renderers it serves.

Modules
-------
main
    FastAPI application with the route handlers and the ``main()`` CLI
    entry point.
fragments
    Pure functions rendering the page shell, image list, image item, modal
    and loading indicator as HTML strings.
"""
