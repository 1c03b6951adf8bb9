from __future__ import annotations

import logging
from typing import Optional

import requests

from vtc_registry import labels
from vtc_registry.errors import NotFoundError
from vtc_registry.extract import extract_labels_from_html
from vtc_registry.mapper import map_labels
from vtc_registry.records import LicenseeRecord, SearchCriteria
from vtc_registry.settings import DEFAULT_USER_AGENT, Settings, get_settings


logger = logging.getLogger("vtc.client")


def _decode_body(response: requests.Response) -> str:
    charset = "utf-8"
    content_type = response.headers.get("Content-Type", "")
    if "charset=" in content_type:
        charset = content_type.split("charset=")[-1].split(";")[0].strip() or charset
    try:
        return response.content.decode(charset, errors="replace")
    except LookupError:
        return response.content.decode("utf-8", errors="replace")


def handle_result_page(status: int, html: str) -> LicenseeRecord:
    """Turn one registry response into a record.

    A non-200 status is reported as not found before any parsing happens.
    """
    if status != 200:
        raise NotFoundError(status=status)
    return map_labels(extract_labels_from_html(html))


class RegistryClient:
    """Query facade over the public VTC registry.

    Each call issues exactly one request; nothing is retried or cached.
    Transport errors from `requests` propagate unchanged.
    """

    def __init__(
        self,
        base_url: str = labels.BASE_URL,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {
            "User-Agent": user_agent,
            "Accept": "text/html,application/xhtml+xml",
        }

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, *, session: Optional[requests.Session] = None
    ) -> "RegistryClient":
        settings = settings or get_settings()
        return cls(
            settings.base_url,
            timeout=settings.timeout,
            session=session,
            user_agent=settings.user_agent,
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RegistryClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _handle(self, response: requests.Response) -> LicenseeRecord:
        status = response.status_code
        if status != 200:
            logger.info("registry answered %s for %s", status, response.url)
            return handle_result_page(status, "")
        try:
            return handle_result_page(status, _decode_body(response))
        except NotFoundError:
            logger.info("no company number on %s", response.url)
            raise

    def fetch_by_record_id(self, record_id: int) -> LicenseeRecord:
        url = f"{self.base_url}{labels.DETAILS_PATH}"
        params = {"dossier.id": str(int(record_id))}
        logger.debug("GET %s %s", url, params)
        response = self.session.get(
            url, params=params, headers=self.headers, timeout=self.timeout
        )
        return self._handle(response)

    def fetch_by_advanced_search(
        self, criteria: Optional[SearchCriteria] = None
    ) -> LicenseeRecord:
        url = f"{self.base_url}{labels.ADVANCED_SEARCH_PATH}"
        form = (criteria or SearchCriteria()).to_form()
        logger.debug("POST %s", url)
        response = self.session.post(
            url, data=form, headers=self.headers, timeout=self.timeout
        )
        return self._handle(response)

    def fetch_by_company_number(self, company_number: str) -> LicenseeRecord:
        return self.fetch_by_advanced_search(SearchCriteria(company_number=company_number))

    def fetch_by_registration_number(self, registration_number: str) -> LicenseeRecord:
        return self.fetch_by_advanced_search(
            SearchCriteria(registration_number=registration_number)
        )
