from __future__ import annotations

from typing import Iterator

from fastapi import APIRouter, Body, Depends

from vtc_registry.api.schemas import ErrorEnvelope, LicenseeRecordOut, SearchCriteriaIn
from vtc_registry.client import RegistryClient
from vtc_registry.errors import RegistryError


router = APIRouter(tags=["lookup"])

RECORD_ROUTE = {
    "response_model": LicenseeRecordOut,
    "response_model_exclude_none": True,
    "responses": {400: {"model": ErrorEnvelope}},
}


def get_client() -> Iterator[RegistryClient]:
    # one session per request, closed on success and error paths alike
    with RegistryClient.from_settings() as client:
        yield client


@router.get("/registration_number/{input}", **RECORD_ROUTE)
def lookup_registration_number(input: str, client: RegistryClient = Depends(get_client)):
    return LicenseeRecordOut.from_record(client.fetch_by_registration_number(input))


@router.get("/company_number/{input}", **RECORD_ROUTE)
def lookup_company_number(input: str, client: RegistryClient = Depends(get_client)):
    return LicenseeRecordOut.from_record(client.fetch_by_company_number(input))


@router.get("/record/{record_id}", **RECORD_ROUTE)
def lookup_record(record_id: int, client: RegistryClient = Depends(get_client)):
    return LicenseeRecordOut.from_record(client.fetch_by_record_id(record_id))


@router.post("/search", **RECORD_ROUTE)
def advanced_search(
    payload: SearchCriteriaIn = Body(...),
    client: RegistryClient = Depends(get_client),
):
    criteria = payload.to_criteria()
    if criteria.is_empty():
        raise RegistryError("at least one search criterion is required")
    return LicenseeRecordOut.from_record(client.fetch_by_advanced_search(criteria))
