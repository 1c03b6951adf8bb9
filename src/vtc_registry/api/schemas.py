from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from vtc_registry.enums import CompanyType, LegalEntityKind, PersonTitle
from vtc_registry.records import LicenseeRecord, SearchCriteria


class ErrorEnvelope(BaseModel):
    message: str


class AddressOut(BaseModel):
    postal_code: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    department: Optional[str] = None


class PersonNameOut(BaseModel):
    last_name: Optional[str] = None
    first_name: Optional[str] = None


class CompanyOut(BaseModel):
    name: Optional[str] = None
    acronym: Optional[str] = None
    brand: Optional[str] = None
    contact: Optional[PersonNameOut] = None
    company_type: Optional[CompanyType] = None


class IndividualOut(BaseModel):
    title: Optional[PersonTitle] = None
    name: Optional[PersonNameOut] = None


class LicenseeRecordOut(BaseModel):
    """Wire shape of a licensee; empty fields are left out of responses."""

    legal_entity_type: LegalEntityKind
    company_number: str
    registration_number: Optional[str] = None
    expiration_date: Optional[str] = None
    address: Optional[AddressOut] = None
    company: Optional[CompanyOut] = None
    individual: Optional[IndividualOut] = None

    @classmethod
    def from_record(cls, record: LicenseeRecord) -> "LicenseeRecordOut":
        return cls.model_validate(record.to_dict())


class SearchCriteriaIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    registration_number: str = ""
    person_name: str = ""
    company_name: str = ""
    company_number: str = ""
    acronym: str = ""
    brand: str = ""
    city: str = ""
    postal_code: str = ""
    department: str = ""

    def to_criteria(self) -> SearchCriteria:
        return SearchCriteria(**self.model_dump())
