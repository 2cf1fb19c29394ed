"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes validate, delegate to services/, and map store signals — nothing else
"""
