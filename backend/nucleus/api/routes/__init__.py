"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter; prefixes are applied in main.py
    - Every router depends on API version resolution
"""
