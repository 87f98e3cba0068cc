"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that every feature uses (settings, DB
wiring, logging, the error taxonomy, the request gate). Keep feature-specific
SQL and business logic in the corresponding feature package (e.g. `gallery/`).
"""
