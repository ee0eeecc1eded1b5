"""
FastAPI routers grouped by domain.

Each module exposes an APIRouter that is included by ``rosterbook.app``.
Routers translate HTTP payloads through the JSON adapter and delegate to the
roster service.
"""
