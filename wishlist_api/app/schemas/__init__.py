"""
Pydantic schema definitions for API payloads and stored rows.

Field names are snake_case in Python and camelCase on the wire, which
matches the attribute names the store rows use.
"""
