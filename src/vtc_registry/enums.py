from __future__ import annotations

from enum import StrEnum
from typing import Sequence, Tuple, TypeVar


E = TypeVar("E", bound=StrEnum)


class PersonTitle(StrEnum):
    OTHER = "OTHER"
    MR = "MR"
    MRS = "MRS"


class LegalEntityKind(StrEnum):
    """Whether the licensee is a business or a natural person.

    `OTHER` is the unknown kind: the status caption was missing or unrecognized.
    """

    OTHER = "OTHER"
    COMPANY = "COMPANY"
    INDIVIDUAL = "INDIVIDUAL"


class CompanyType(StrEnum):
    OTHER = "OTHER"
    SA = "SA"
    SARL = "SARL"
    SAS = "SAS"
    SASU = "SASU"
    EURL = "EURL"


# Canonical phrases as printed by the registry. Members without a phrase
# (the OTHER fallbacks) are only reachable through the default.
PERSON_TITLE_PHRASES: Tuple[Tuple[PersonTitle, str], ...] = (
    (PersonTitle.MR, "M."),
    (PersonTitle.MRS, "Mme"),
)

LEGAL_ENTITY_KIND_PHRASES: Tuple[Tuple[LegalEntityKind, str], ...] = (
    (LegalEntityKind.COMPANY, "Personne morale"),
    (LegalEntityKind.INDIVIDUAL, "Personne physique"),
)

COMPANY_TYPE_PHRASES: Tuple[Tuple[CompanyType, str], ...] = (
    (CompanyType.SA, "Société anonyme"),
    (CompanyType.SARL, "Société à responsabilité limitée"),
    (CompanyType.SAS, "Société par actions simplifiée"),
    (CompanyType.SASU, "Société par actions simplifiée unipersonnelle"),
    (CompanyType.EURL, "Entreprise unipersonnelle à responsabilité limitée"),
)


def resolve_label(value: str, phrases: Sequence[Tuple[E, str]], default: E) -> E:
    """Return the member whose phrase equals `value` exactly, else `default`.

    No case folding, trimming or accent normalization happens here.
    """
    for member, phrase in phrases:
        if phrase == value:
            return member
    return default


def resolve_person_title(value: str) -> PersonTitle:
    return resolve_label(value, PERSON_TITLE_PHRASES, PersonTitle.OTHER)


def resolve_legal_entity_kind(value: str) -> LegalEntityKind:
    return resolve_label(value, LEGAL_ENTITY_KIND_PHRASES, LegalEntityKind.OTHER)


def resolve_company_type(value: str) -> CompanyType:
    return resolve_label(value, COMPANY_TYPE_PHRASES, CompanyType.OTHER)
