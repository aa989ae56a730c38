"""
Service layer abstraction.

Each service encapsulates the business rules for one collection.  The
services operate on a :class:`~taskboard_api.app.core.store.BoardStore`
passed in by the API layer, so handlers never touch the mappings
directly.
"""
