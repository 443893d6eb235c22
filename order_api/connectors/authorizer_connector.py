"""
Customer Authorizer Connector
Asks the external authorizer whether a customer CPF may place orders

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Optional

import httpx

from order_api.core.config import settings
from order_api.core.errors import UnauthorizedError
from order_api.domain.cpf import normalize_cpf

logger = logging.getLogger(__name__)


class AuthorizerConnector:
    """
    Connector for the customer authorizer service

    POSTs {"cpf": "<digits>"} to AUTHORIZER_URL:
    - 2xx: customer authorized
    - 401/403: customer rejected, raises UnauthorizedError
    - anything else: raises httpx.HTTPStatusError
    """

    def __init__(self, url: str = None, timeout: float = None, client: Optional[httpx.Client] = None):
        """
        Args:
            url: Authorizer endpoint (default: settings.AUTHORIZER_URL)
            timeout: Request timeout in seconds (default: settings.AUTHORIZER_TIMEOUT)
            client: Shared httpx client; a short-lived one is opened per call otherwise
        """
        self.url = url or settings.AUTHORIZER_URL
        self.timeout = timeout or settings.AUTHORIZER_TIMEOUT
        self.client = client

    def _post(self, payload: dict) -> httpx.Response:
        if self.client is not None:
            return self.client.post(self.url, json=payload, timeout=self.timeout)
        with httpx.Client(timeout=self.timeout) as client:
            return client.post(self.url, json=payload)

    def authorize(self, cpf: str) -> None:
        """
        Authorize a customer by CPF

        Raises:
            UnauthorizedError: the authorizer rejected the customer
            httpx.HTTPError: the authorizer could not be reached or failed
        """
        response = self._post({"cpf": normalize_cpf(cpf)})

        if response.status_code in (401, 403):
            logger.warning(f"Customer rejected by authorizer (status {response.status_code})")
            raise UnauthorizedError()

        response.raise_for_status()
        logger.debug("Customer authorized")
