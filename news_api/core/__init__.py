"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that every feature uses (settings,
logging, DB wiring, errors, parameter validation). Keep feature-specific SQL
and business logic in the corresponding feature package (e.g. `articles/`).
"""
