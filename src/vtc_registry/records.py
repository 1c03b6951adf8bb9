from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import Any, Dict, Optional, Union

from vtc_registry import labels
from vtc_registry.enums import CompanyType, LegalEntityKind, PersonTitle


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop empty strings, `None` and empty nested blocks."""
    return {k: v for k, v in data.items() if v not in ("", None, {})}


def _token(value: StrEnum) -> Optional[str]:
    """Serialize an enum, leaving out its zero (OTHER) value."""
    return None if value.value == "OTHER" else value.value


@dataclass(frozen=True, slots=True)
class Address:
    postal_code: str = ""
    city: str = ""
    country: str = ""
    department: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "postal_code": self.postal_code,
                "city": self.city,
                "country": self.country,
                "department": self.department,
            }
        )


@dataclass(frozen=True, slots=True)
class PersonName:
    first_name: str = ""
    last_name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"last_name": self.last_name, "first_name": self.first_name})


@dataclass(frozen=True, slots=True)
class CompanyPayload:
    name: str = ""
    acronym: str = ""
    brand: str = ""
    contact: PersonName = field(default_factory=PersonName)
    company_type: CompanyType = CompanyType.OTHER

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "name": self.name,
                "acronym": self.acronym,
                "brand": self.brand,
                "contact": self.contact.to_dict(),
                "company_type": _token(self.company_type),
            }
        )


@dataclass(frozen=True, slots=True)
class IndividualPayload:
    title: PersonTitle = PersonTitle.OTHER
    name: PersonName = field(default_factory=PersonName)

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"title": _token(self.title), "name": self.name.to_dict()})


Entity = Union[CompanyPayload, IndividualPayload, None]


@dataclass(frozen=True, slots=True)
class LicenseeRecord:
    """A single licensee as listed by the VTC registry.

    `entity` is the variant payload: a `CompanyPayload`, an `IndividualPayload`,
    or `None` when the legal status was not recognized. The legal entity kind is
    read from it, so the two can never disagree.
    """

    company_number: str
    registration_number: str = ""
    expiration_date: Optional[date] = None
    address: Address = field(default_factory=Address)
    entity: Entity = None

    @property
    def legal_entity_kind(self) -> LegalEntityKind:
        if isinstance(self.entity, CompanyPayload):
            return LegalEntityKind.COMPANY
        if isinstance(self.entity, IndividualPayload):
            return LegalEntityKind.INDIVIDUAL
        return LegalEntityKind.OTHER

    @property
    def company(self) -> Optional[CompanyPayload]:
        return self.entity if isinstance(self.entity, CompanyPayload) else None

    @property
    def individual(self) -> Optional[IndividualPayload]:
        return self.entity if isinstance(self.entity, IndividualPayload) else None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "legal_entity_type": self.legal_entity_kind.value,
            "company_number": self.company_number,
            "registration_number": self.registration_number,
            "expiration_date": (
                self.expiration_date.isoformat() if self.expiration_date else None
            ),
            "address": self.address.to_dict(),
        }
        data = _compact(data)
        # the payload matching the kind stays, even when all its fields are empty
        if self.company is not None:
            data["company"] = self.company.to_dict()
        if self.individual is not None:
            data["individual"] = self.individual.to_dict()
        return data


@dataclass(frozen=True, slots=True)
class SearchCriteria:
    """Advanced search criteria. Unset criteria are sent as empty strings."""

    registration_number: str = ""
    person_name: str = ""
    company_name: str = ""
    company_number: str = ""
    acronym: str = ""
    brand: str = ""
    city: str = ""
    postal_code: str = ""
    department: str = ""

    def is_empty(self) -> bool:
        return not any(
            (
                self.registration_number,
                self.person_name,
                self.company_name,
                self.company_number,
                self.acronym,
                self.brand,
                self.city,
                self.postal_code,
                self.department,
            )
        )

    def to_form(self) -> Dict[str, str]:
        return {
            labels.F_REGISTRATION_NUMBER: self.registration_number,
            labels.F_PERSON_NAME: self.person_name,
            labels.F_COMPANY_NAME: self.company_name,
            labels.F_COMPANY_NUMBER: self.company_number,
            labels.F_ACRONYM: self.acronym,
            labels.F_BRAND: self.brand,
            labels.F_OTHER_COMPANY_TYPE: "",
            labels.F_COMPANY_TYPE_ID: "",
            labels.F_CITY: self.city,
            labels.F_COUNTRY_ID: "",
            labels.F_POSTAL_CODE: self.postal_code,
            labels.F_REGION_ID: "",
            labels.F_DEPARTMENT_ID: self.department,
            labels.SUBMIT_FIELD: labels.SUBMIT_VALUE,
        }
