"""
Endpoint subpackage.

Each module defines an APIRouter for one concern.  The routers are
aggregated in ``router.py`` at the package level and then included in
the main application.
"""

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]
