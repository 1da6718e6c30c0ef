"""High-level BunnyCDN REST client."""

from __future__ import annotations

import logging
import os
from collections.abc import Collection, Mapping, MutableMapping
from typing import Any
from urllib.parse import urljoin, urlparse

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from .auth.access_key import AccessKeyAuth
from .config import DEFAULT_BASE_URL, ClientConfig, env_flag, env_verify
from .endpoints import Endpoint
from .exceptions import ConfigurationError, InvalidArgumentError, RequestError
from .http import HttpResponse
from .http import request as http_request
from .normalize import RecordSchema, normalize
from .resources import (
    AbuseCasesResource,
    BillingResource,
    CountriesResource,
    DnsZonesResource,
    RegionsResource,
    SupportResource,
    VideoLibrariesResource,
)


logger = logging.getLogger(__name__)


class BunnyCDNClient:
    """Wrap BunnyCDN REST endpoints with helper methods."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        parse_dates: bool = False,
        populate_fields: bool = False,
        verify_ssl: bool | str = True,
        timeout: float = 30.0,
        default_headers: Mapping[str, str] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = ClientConfig(
            base_url=base_url.rstrip("/"),
            verify_ssl=verify_ssl,
            timeout=timeout,
            default_headers=default_headers,
        )
        self.config.apply_options(
            {"parse_dates": parse_dates, "populate_fields": populate_fields}
        )
        self._auth: AccessKeyAuth | None = None
        if api_key is not None:
            self.set_api_key(api_key)
        self._suppress_insecure_warning_if_needed()
        self._session = session or requests.Session()
        self.abuse_cases = AbuseCasesResource(self)
        self.countries = CountriesResource(self)
        self.billing = BillingResource(self)
        self.support = SupportResource(self)
        self.regions = RegionsResource(self)
        self.video_libraries = VideoLibrariesResource(self)
        self.dns_zones = DnsZonesResource(self)

    @classmethod
    def from_env(cls, **overrides: Any) -> BunnyCDNClient:
        """Build a client from ``BUNNYCDN_*`` environment variables.

        Keyword arguments take precedence over the environment.
        """

        settings: dict[str, Any] = {
            "api_key": os.environ.get("BUNNYCDN_API_KEY") or None,
            "base_url": os.environ.get("BUNNYCDN_BASE_URL") or DEFAULT_BASE_URL,
            "parse_dates": env_flag("BUNNYCDN_PARSE_DATES"),
            "populate_fields": env_flag("BUNNYCDN_POPULATE_FIELDS"),
            "verify_ssl": env_verify("BUNNYCDN_VERIFY_SSL"),
        }
        raw_timeout = os.environ.get("BUNNYCDN_TIMEOUT")
        if raw_timeout:
            try:
                settings["timeout"] = float(raw_timeout)
            except ValueError as exc:
                raise InvalidArgumentError(
                    f"BUNNYCDN_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
                ) from exc
        settings.update(overrides)
        api_key = settings.pop("api_key")
        return cls(api_key, **settings)

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> BunnyCDNClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # Configuration -----------------------------------------------------------
    def set_api_key(self, key: str) -> None:
        """Replace the API key sent with every request."""

        if not isinstance(key, str) or not key:
            raise InvalidArgumentError("API key is required and must be a non-empty string")
        self.config.access_key = key
        self._auth = AccessKeyAuth(key)

    def set_options(self, options: Mapping[str, Any]) -> None:
        """Update `parse_dates` / `populate_fields`; unknown or mistyped keys are ignored."""

        self.config.apply_options(options)

    @property
    def has_api_key(self) -> bool:
        return self._auth is not None

    # Public API --------------------------------------------------------------
    def call(
        self,
        endpoint: Endpoint,
        *,
        path_params: Mapping[str, object] | None = None,
        params: Mapping[str, str] | None = None,
        json_payload: Mapping[str, Any] | None = None,
    ) -> Any:
        """Dispatch a catalogued endpoint and return its normalized payload."""

        path = endpoint.format_path(**(path_params or {}))
        return self.request(
            endpoint.method,
            path,
            params=params,
            json_payload=json_payload,
            success=endpoint.success,
            not_found=endpoint.not_found,
            expect_body=not endpoint.empty,
            schema=endpoint.schema,
        )

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        json_payload: Mapping[str, Any] | None = None,
        success: Collection[int] = (200,),
        not_found: bool = False,
        expect_body: bool = True,
        schema: RecordSchema | None = None,
    ) -> Any:
        headers = self._prepare_headers()
        url = self._resolve_url(path)
        self._log_request(method, url)
        response = self._perform_request(
            method,
            url,
            params=params,
            headers=headers,
            json_payload=json_payload,
            success=success,
            not_found=not_found,
            expect_body=expect_body,
        )
        if not expect_body:
            return None
        return normalize(
            response.data,
            schema,
            parse_dates=self.config.parse_dates,
            populate_fields=self.config.populate_fields,
        )

    def close(self) -> None:
        self._session.close()

    # Internal helpers -------------------------------------------------------
    def _resolve_url(self, path: str) -> str:
        parsed = urlparse(path)
        if parsed.scheme and parsed.netloc:
            return path
        relative_path = path.lstrip("/")
        return urljoin(f"{self.config.base_url}/", relative_path)

    def _prepare_headers(self) -> MutableMapping[str, str]:
        if self._auth is None:
            raise ConfigurationError(
                "API key is not set. Use BunnyCDNClient.set_api_key(key) to set it."
            )
        headers = self.config.resolved_headers()
        self._auth.apply(headers)
        return headers

    def _perform_request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None,
        headers: MutableMapping[str, str],
        json_payload: Mapping[str, Any] | None,
        success: Collection[int],
        not_found: bool,
        expect_body: bool,
    ) -> HttpResponse:
        try:
            return http_request(
                self._session,
                method,
                url,
                params=params,
                headers=headers,
                json_payload=json_payload,
                success=success,
                not_found=not_found,
                expect_body=expect_body,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            reason = str(exc).strip() or exc.__class__.__name__
            raise RequestError(
                f"Failed to communicate with BunnyCDN API: {reason}", details=reason
            ) from exc

    def _log_request(self, method: str, url: str) -> None:
        logger.info("BunnyCDN request %s %s", method.upper(), url)

    def _suppress_insecure_warning_if_needed(self) -> None:
        if isinstance(self.config.verify_ssl, bool) and not self.config.verify_ssl:
            urllib3.disable_warnings(InsecureRequestWarning)
