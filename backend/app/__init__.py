"""Billable Application Package — invoice persistence API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
