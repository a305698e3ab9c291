"""Services Layer — invoice operations orchestrating core logic over repositories.

Invariants:
    - Services receive their repository by injection, never import the DB session
    - Services never catch domain or database errors; the API layer translates them
"""
