from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from rosterbook.domain.errors import IllegalValueError
from rosterbook.domain.roster import DuplicatePersonError, PersonNotFoundError, RosterError
from rosterbook.repositories.json_adapter import deserialize, serialize
from rosterbook.services.roster_service import RosterService

router = APIRouter(prefix="/persons", tags=["persons"])


def _get_roster_service(request: Request) -> RosterService:
    svc = getattr(getattr(request.app, "state", None), "roster_service", None)
    if not svc:
        raise RuntimeError("RosterService not configured")
    return svc


def _error_response(err: IllegalValueError | RosterError, status_code: int) -> JSONResponse:
    return JSONResponse({"ok": False, "error": err.code, "message": err.message}, status_code=status_code)


@router.get("")
def list_persons(request: Request):
    svc = _get_roster_service(request)
    return {"ok": True, "persons": [serialize(p) for p in svc.list_persons()]}


@router.get("/{index}")
def get_person(index: int, request: Request):
    svc = _get_roster_service(request)
    try:
        person = svc.get(index)
    except PersonNotFoundError as exc:
        return _error_response(exc, 404)
    return {"ok": True, "person": serialize(person)}


@router.post("")
def add_person(payload: Dict[str, Any], request: Request):
    svc = _get_roster_service(request)
    try:
        person = deserialize(payload)
    except IllegalValueError as exc:
        return _error_response(exc, 422)
    try:
        svc.add(person)
    except DuplicatePersonError as exc:
        return _error_response(exc, 409)
    return JSONResponse({"ok": True, "person": serialize(person)}, status_code=201)


@router.put("/{index}")
def replace_person(index: int, payload: Dict[str, Any], request: Request):
    svc = _get_roster_service(request)
    try:
        person = deserialize(payload)
    except IllegalValueError as exc:
        return _error_response(exc, 422)
    try:
        svc.replace(index, person)
    except PersonNotFoundError as exc:
        return _error_response(exc, 404)
    except DuplicatePersonError as exc:
        return _error_response(exc, 409)
    return {"ok": True, "person": serialize(person)}


@router.delete("/{index}")
def delete_person(index: int, request: Request):
    svc = _get_roster_service(request)
    try:
        removed = svc.remove(index)
    except PersonNotFoundError as exc:
        return _error_response(exc, 404)
    return {"ok": True, "person": serialize(removed)}
