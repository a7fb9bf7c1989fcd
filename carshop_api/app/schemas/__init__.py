"""
Pydantic schema definitions for API payloads.

Each domain (users, cars, customers, offerings, appointments) defines
its own models.  Attributes are snake_case in Python and camelCase on
the wire through field aliases.
"""
