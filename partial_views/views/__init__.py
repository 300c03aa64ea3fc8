"""View rendering module for partial views.

The renderer resolves a view through the configured view engine, renders it
into a buffer and hands back the markup. Template helpers expose the
renderer inside Jinja2 templates.
"""
