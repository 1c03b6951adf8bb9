from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Mapping, Optional

from vtc_registry import labels
from vtc_registry.enums import (
    LegalEntityKind,
    resolve_company_type,
    resolve_legal_entity_kind,
    resolve_person_title,
)
from vtc_registry.errors import NotFoundError
from vtc_registry.records import (
    Address,
    CompanyPayload,
    Entity,
    IndividualPayload,
    LicenseeRecord,
    PersonName,
)


logger = logging.getLogger("vtc.mapper")

# strptime alone would also accept unpadded days and months
_DATE_SHAPE = re.compile(r"\d{2}/\d{2}/\d{4}")


def parse_expiration_date(value: Optional[str]) -> Optional[date]:
    """Parse a `dd/mm/yyyy` caption value; anything else yields `None`."""
    if not value:
        return None
    if not _DATE_SHAPE.fullmatch(value):
        logger.warning("unparseable expiration date %r", value)
        return None
    try:
        return datetime.strptime(value, labels.EXPIRATION_DATE_FORMAT).date()
    except ValueError:
        # a bad date never fails the whole record
        logger.warning("unparseable expiration date %r", value)
        return None


def _company(mapped: Mapping[str, str]) -> CompanyPayload:
    return CompanyPayload(
        name=mapped.get(labels.L_COMPANY_NAME, ""),
        acronym=mapped.get(labels.L_ACRONYM, ""),
        brand=mapped.get(labels.L_BRAND, ""),
        contact=PersonName(
            first_name=mapped.get(labels.L_CONTACT_FIRST_NAME, ""),
            last_name=mapped.get(labels.L_CONTACT_LAST_NAME, ""),
        ),
        company_type=resolve_company_type(mapped.get(labels.L_COMPANY_TYPE, "")),
    )


def _individual(mapped: Mapping[str, str]) -> IndividualPayload:
    return IndividualPayload(
        title=resolve_person_title(mapped.get(labels.L_INDIVIDUAL_TITLE, "")),
        name=PersonName(
            first_name=mapped.get(labels.L_INDIVIDUAL_FIRST_NAME, ""),
            last_name=mapped.get(labels.L_INDIVIDUAL_LAST_NAME, ""),
        ),
    )


def map_labels(mapped: Mapping[str, str]) -> LicenseeRecord:
    """Build a `LicenseeRecord` from caption/value pairs.

    Raises `NotFoundError` when the company number is missing, which is how
    the registry signals that nothing matched the query.
    """
    company_number = mapped.get(labels.L_COMPANY_NUMBER, "")
    if not company_number:
        raise NotFoundError()

    unknown = set(mapped) - labels.KNOWN_LABELS
    if unknown:
        logger.debug("ignoring unknown labels %s", sorted(unknown))

    kind = resolve_legal_entity_kind(mapped.get(labels.L_LEGAL_ENTITY_KIND, ""))
    entity: Entity = None
    if kind is LegalEntityKind.COMPANY:
        entity = _company(mapped)
    elif kind is LegalEntityKind.INDIVIDUAL:
        entity = _individual(mapped)

    return LicenseeRecord(
        company_number=company_number,
        registration_number=mapped.get(labels.L_REGISTRATION_NUMBER, ""),
        expiration_date=parse_expiration_date(mapped.get(labels.L_EXPIRATION_DATE)),
        address=Address(
            postal_code=mapped.get(labels.L_POSTAL_CODE, ""),
            city=mapped.get(labels.L_CITY, ""),
            country=mapped.get(labels.L_COUNTRY, ""),
            department=mapped.get(labels.L_DEPARTMENT, ""),
        ),
        entity=entity,
    )
