"""
Service layer abstraction.

Services encapsulate the logic for a domain.  They depend on a
repository interface, so the in-memory store and the database can be
swapped without changing the API handlers.
"""
