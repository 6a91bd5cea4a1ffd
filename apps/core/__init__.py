"""Core app package.

Cross-cutting pieces used by every domain app: the API exception handler,
the health check and the demo data management command.
"""
