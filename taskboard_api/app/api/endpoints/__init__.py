"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
resource (cards, lists) or the unauthenticated root.  The routers are
aggregated in ``api/router.py``.
"""
