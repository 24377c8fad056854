"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one record kind; ``router.py``
mounts them under their prefixes.
"""
