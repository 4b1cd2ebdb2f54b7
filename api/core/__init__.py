"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (DB wiring,
schema and seed data, configuration, error handlers, middleware). Keep
feature-specific SQL and business logic in the corresponding feature package
(e.g. `catalog/`, `admin/`).
"""
