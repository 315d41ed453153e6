"""
API package containing the HTTP routes.

``router.py`` exposes two top-level routers: ``router`` for normal
operation and ``degraded_router`` for when the database could not be
initialised.  The application includes exactly one of them.
"""
