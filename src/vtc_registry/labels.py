"""Static registry configuration: endpoints, page captions and form fields."""

BASE_URL = "https://registre-vtc.developpement-durable.gouv.fr/public"

DETAILS_PATH = "/rechercheExploitant.exploitantDetails.action"
ADVANCED_SEARCH_PATH = "/rechercheExploitant.avancee.action"

# Every caption on a result page carries this class.
LABEL_SELECTOR = ".cLabel"

L_COMPANY_NAME = "Dénomination"
L_COMPANY_NUMBER = "Numéro SIREN"
L_REGISTRATION_NUMBER = "Numéro d'inscription"
L_CONTACT_FIRST_NAME = "Prénom"
L_CONTACT_LAST_NAME = "Nom"
L_CITY = "Ville"
L_ACRONYM = "Sigle"
L_EXPIRATION_DATE = "Valide jusqu'au"
L_LEGAL_ENTITY_KIND = "Statut"
L_COMPANY_TYPE = "Forme juridique"
L_BRAND = "Marque/Nom commercial"
L_POSTAL_CODE = "Code Postal"
L_DEPARTMENT = "Département"
L_COUNTRY = "Pays"
L_INDIVIDUAL_TITLE = "Civilité"
L_INDIVIDUAL_FIRST_NAME = "Prénom principal"
L_INDIVIDUAL_LAST_NAME = "Nom d'usage"

KNOWN_LABELS = frozenset(
    {
        L_COMPANY_NAME,
        L_COMPANY_NUMBER,
        L_REGISTRATION_NUMBER,
        L_CONTACT_FIRST_NAME,
        L_CONTACT_LAST_NAME,
        L_CITY,
        L_ACRONYM,
        L_EXPIRATION_DATE,
        L_LEGAL_ENTITY_KIND,
        L_COMPANY_TYPE,
        L_BRAND,
        L_POSTAL_CODE,
        L_DEPARTMENT,
        L_COUNTRY,
        L_INDIVIDUAL_TITLE,
        L_INDIVIDUAL_FIRST_NAME,
        L_INDIVIDUAL_LAST_NAME,
    }
)

EXPIRATION_DATE_FORMAT = "%d/%m/%Y"

# Advanced search form. Order matches the registry's own form.
F_REGISTRATION_NUMBER = "rechercheCriteres.numeroInscription"
F_PERSON_NAME = "rechercheCriteres.nomRepresentantLegal"
F_COMPANY_NAME = "rechercheCriteres.nomDenomination"
F_COMPANY_NUMBER = "rechercheCriteres.numeroSiren"
F_ACRONYM = "rechercheCriteres.sigle"
F_BRAND = "rechercheCriteres.marque"
F_OTHER_COMPANY_TYPE = "rechercheCriteres.autreFormeJuridique"
F_COMPANY_TYPE_ID = "rechercheCriteres.idFormeJuridique"
F_CITY = "rechercheCriteres.ville"
F_COUNTRY_ID = "rechercheCriteres.idPays"
F_POSTAL_CODE = "rechercheCriteres.codePostal"
F_REGION_ID = "rechercheCriteres.idRegion"
F_DEPARTMENT_ID = "rechercheCriteres.idDepartement"

SUBMIT_FIELD = "action:/public/rechercheExploitant.liste.avancee"
SUBMIT_VALUE = "Rechercher"
