from __future__ import annotations

import pytest

from vtc_registry.enums import (
    COMPANY_TYPE_PHRASES,
    CompanyType,
    LegalEntityKind,
    PersonTitle,
    resolve_company_type,
    resolve_label,
    resolve_legal_entity_kind,
    resolve_person_title,
)


@pytest.mark.parametrize(
    "phrase, expected",
    [
        ("Société anonyme", CompanyType.SA),
        ("Société à responsabilité limitée", CompanyType.SARL),
        ("Société par actions simplifiée", CompanyType.SAS),
        ("Société par actions simplifiée unipersonnelle", CompanyType.SASU),
        ("Entreprise unipersonnelle à responsabilité limitée", CompanyType.EURL),
    ],
)
def test_company_type_phrases(phrase, expected):
    assert resolve_company_type(phrase) is expected


def test_company_type_is_exact_match_only():
    assert resolve_company_type("sas") is CompanyType.OTHER
    assert resolve_company_type("SAS") is CompanyType.OTHER
    assert resolve_company_type("société anonyme") is CompanyType.OTHER
    assert resolve_company_type(" Société anonyme") is CompanyType.OTHER
    assert resolve_company_type("Société coopérative") is CompanyType.OTHER


def test_person_title():
    assert resolve_person_title("M.") is PersonTitle.MR
    assert resolve_person_title("Mme") is PersonTitle.MRS
    assert resolve_person_title("Mlle") is PersonTitle.OTHER
    assert resolve_person_title("") is PersonTitle.OTHER


def test_legal_entity_kind():
    assert resolve_legal_entity_kind("Personne morale") is LegalEntityKind.COMPANY
    assert resolve_legal_entity_kind("Personne physique") is LegalEntityKind.INDIVIDUAL
    assert resolve_legal_entity_kind("personne morale") is LegalEntityKind.OTHER
    assert resolve_legal_entity_kind("") is LegalEntityKind.OTHER


def test_resolve_label_uses_given_default():
    assert resolve_label("nope", COMPANY_TYPE_PHRASES, CompanyType.SA) is CompanyType.SA


def test_enum_tokens_are_uppercase_strings():
    assert str(CompanyType.SASU) == "SASU"
    assert LegalEntityKind.COMPANY.value == "COMPANY"
    assert PersonTitle.MRS.value == "MRS"
