"""
API package containing the HTTP routes.

The ``router`` module aggregates the domain routers found in
``endpoints`` into a single ``APIRouter`` that the application
factory includes.
"""
