import argparse
import json
import logging
import sys

from .client import RegistryClient
from .errors import RegistryError, TransportError
from .records import SearchCriteria
from .settings import get_settings


CRITERIA_FLAGS = (
    ("--registration-number", "registration_number", "Registration number (Numéro d'inscription)"),
    ("--company-number", "company_number", "Company number (Numéro SIREN)"),
    ("--person-name", "person_name", "Legal representative name"),
    ("--company-name", "company_name", "Company name (Dénomination)"),
    ("--acronym", "acronym", "Company acronym (Sigle)"),
    ("--brand", "brand", "Brand or trade name"),
    ("--city", "city", "City"),
    ("--postal-code", "postal_code", "Postal code"),
    ("--department", "department", "Department identifier"),
)


class JsonLogFormatter(logging.Formatter):
    def format(self, record):
        return json.dumps(
            {
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
            },
            ensure_ascii=False,
        )


def configure_logging(level=None, log_json=False):
    handler = logging.StreamHandler(sys.stderr)
    if log_json:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("vtc")
    root.handlers[:] = [handler]
    root.setLevel((level or "WARNING").upper())


def build_parser():
    parser = argparse.ArgumentParser(
        description="Look up a licensee in the French VTC registry",
    )
    parser.add_argument(
        "--record-id",
        type=int,
        default=None,
        help="Internal registry record id (detail view lookup)",
    )
    for flag, dest, help_text in CRITERIA_FLAGS:
        parser.add_argument(flag, dest=dest, default="", help=help_text)
    parser.add_argument(
        "--base-url",
        default=None,
        help="Registry base URL (defaults to VTC_BASE_URL or the public site)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (defaults to VTC_HTTP_TIMEOUT)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, etc.)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit log lines as JSON objects on stderr",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.log_json)

    criteria = SearchCriteria(**{dest: getattr(args, dest) for _, dest, _ in CRITERIA_FLAGS})
    if args.record_id is None and criteria.is_empty():
        parser.error("provide --record-id or at least one search criterion")
    if args.record_id is not None and not criteria.is_empty():
        parser.error("--record-id cannot be combined with search criteria")

    settings = get_settings()
    timeout = settings.timeout
    if args.timeout is not None:
        # 0 or negative means no timeout, as with VTC_HTTP_TIMEOUT
        timeout = args.timeout if args.timeout > 0 else None
    client = RegistryClient(
        args.base_url or settings.base_url,
        timeout=timeout,
        user_agent=settings.user_agent,
    )
    if args.record_id is not None:
        record = client.fetch_by_record_id(args.record_id)
    else:
        record = client.fetch_by_advanced_search(criteria)
    print(json.dumps(record.to_dict(), ensure_ascii=False))


def _safe_main(argv=None):
    try:
        main(argv)
    except SystemExit:
        raise
    except (RegistryError, TransportError) as exc:
        print(json.dumps({"error": str(exc)}, ensure_ascii=False))
        raise SystemExit(1)


if __name__ == "__main__":
    _safe_main()
