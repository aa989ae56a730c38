"""
Pydantic schema definitions for API payloads.

Create schemas accept loosely shaped input so that missing or empty
fields can be reported as invalid data by the services; read schemas
describe the records returned to clients.
"""
