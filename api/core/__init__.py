"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every resource uses
(DB wiring, settings, logging, error contract, payload validation). Keep
resource-specific SQL and rules in the corresponding package
(`usuarios/`, `questoes/`).
"""
