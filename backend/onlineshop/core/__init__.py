"""Core Layer — domain errors shared by every other layer.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
"""
