import logging
from typing import Any, Dict, Optional

import requests

from mandrill.api_clients.errors import ApiError, TransportError, UnknownResponseError
from mandrill.config import MandrillSettings, get_settings

logger = logging.getLogger("mandrill")

JSON_HEADERS = {"Content-Type": "application/json"}


class BaseClient:
    """
    JSON-over-POST transport shared by the Mandrill endpoints.

    Every call is a single blocking request; there are no retries. The
    API key travels inside the JSON body, so no auth header is set.
    """

    def __init__(self, settings: Optional[MandrillSettings] = None,
                 session: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        self.base_url = self.settings.base_url.rstrip("/")
        self.session = session or requests.Session()

    def _post(self, endpoint: str, json: Dict[str, Any] = None,
              base_url: Optional[str] = None, expect_json: bool = True) -> Any:
        url = f"{(base_url or self.base_url).rstrip('/')}{endpoint}"
        logger.debug(f"POST {url}")
        try:
            resp = self.session.post(url, json=json, headers=JSON_HEADERS,
                                     timeout=self.settings.timeout)
        except requests.RequestException as e:
            logger.error(f"POST {endpoint} failed: {e}")
            raise TransportError(endpoint, e) from e

        if resp.status_code != 200:
            raise self._error_from(endpoint, resp)

        if not resp.content or not expect_json:
            return None
        try:
            return resp.json()
        except ValueError:
            logger.error(f"POST {endpoint} returned a non-JSON body: {resp.text[:200]}")
            raise UnknownResponseError(resp.status_code, resp.text)

    @staticmethod
    def _error_from(endpoint: str, resp: requests.Response) -> Exception:
        try:
            body = resp.json()
        except ValueError:
            body = None
        err = ApiError.from_response(body)
        if err is None:
            logger.error(f"POST {endpoint} failed with HTTP {resp.status_code}: {resp.text[:200]}")
            return UnknownResponseError(resp.status_code, resp.text)
        logger.error(f"POST {endpoint} rejected by Mandrill: {err}")
        return err
