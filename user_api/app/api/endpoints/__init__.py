"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one domain.  The
routers are aggregated in ``router.py`` one level up and then included
in the main application.
"""
