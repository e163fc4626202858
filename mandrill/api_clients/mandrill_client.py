import logging
from typing import Any, Dict, List, Mapping, Optional

import requests
from pydantic import ValidationError

from mandrill.api_clients.base_client import BaseClient
from mandrill.api_clients.errors import UnknownResponseError
from mandrill.config import get_settings
from mandrill.models.message import Message, map_to_vars
from mandrill.models.send_result import SendResult

logger = logging.getLogger("mandrill")


class MandrillClient(BaseClient):
    """
    Client for the Mandrill messaging endpoints.

    Values not passed explicitly fall back to the environment settings
    (MANDRILL_API_KEY, MANDRILL_BASE_URL, MANDRILL_TIMEOUT). Every method
    accepts `base_url` to point a single call somewhere else, e.g. at a
    local stub server.

    Raises TransportError, ApiError or UnknownResponseError; a rejected
    recipient is not an error and shows up as a SendResult.
    """

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        overrides = {"api_key": api_key, "base_url": base_url, "timeout": timeout}
        settings = get_settings().model_copy(
            update={k: v for k, v in overrides.items() if v is not None}
        )
        super().__init__(settings=settings, session=session)

    @property
    def api_key(self) -> str:
        return self.settings.api_key

    def ping(self, base_url: Optional[str] = None) -> None:
        """Validates the API key. Returns only if Mandrill answers with HTTP 200."""
        self._post("/users/ping", json={"key": self.api_key},
                   base_url=base_url, expect_json=False)

    def send(self, message: Message, async_: bool = False,
             base_url: Optional[str] = None) -> List[SendResult]:
        data = {
            "key": self.api_key,
            "message": message.to_payload(),
            "async": async_,
        }
        return self._send("/messages/send", data, base_url)

    def send_template(self, message: Message, template_name: str,
                      content: Mapping[str, str], async_: bool = False,
                      base_url: Optional[str] = None) -> List[SendResult]:
        data = {
            "key": self.api_key,
            "template_name": template_name,
            "template_content": [v.model_dump(mode="json") for v in map_to_vars(content)],
            "message": message.to_payload(),
            "async": async_,
        }
        return self._send("/messages/send-template", data, base_url)

    def _send(self, endpoint: str, data: Dict[str, Any],
              base_url: Optional[str]) -> List[SendResult]:
        body = self._post(endpoint, json=data, base_url=base_url)
        if body is None:
            return []
        if not isinstance(body, list):
            raise UnknownResponseError(200, str(body))
        try:
            results = [SendResult.model_validate(item) for item in body]
        except ValidationError:
            raise UnknownResponseError(200, str(body)) from None
        logger.info(f"{endpoint}: {len(results)} result(s), "
                    f"{sum(1 for r in results if r.accepted)} accepted")
        return results
