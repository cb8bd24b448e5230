# build_client/core/transport.py

import base64

import requests

from .endpoints import Endpoints
from .errors import HTTPStatusError, Timeout, TransportError
from .logger import logger


class Transport:
    def __init__(
        self,
        api_key: str,
        endpoints: Endpoints | None = None,
        session: requests.Session | None = None,
        timeout: float | None = 30.0,
        strict_status: bool = False,
    ):
        self.endpoints = endpoints or Endpoints()
        self.timeout = timeout
        self.strict_status = strict_status
        # Basic auth with the API key alone, no password component
        self._creds = base64.b64encode(api_key.encode("utf-8")).decode("ascii")
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Basic {self._creds}",
            "Content-Type": "application/json",
        })

    def complete_request(
        self,
        method: str,
        url: str,
        body: bytes | None = None,
        timeout: float | None = None,
    ) -> bytes:
        """
        Executes one authenticated round trip and returns the raw body.
        Only Gateway Timeout is classified from the status code; every other
        status hands its body back so the envelope decides success.
        """
        timeout = self.timeout if timeout is None else timeout

        try:
            resp = self.session.request(method, url, data=body, timeout=timeout, stream=True)
        except requests.exceptions.Timeout as e:
            logger.debug(f"Deadline of {timeout}s expired for {method} {url}: {e}")
            raise Timeout(f"No response from {url} within {timeout}s") from e
        except requests.exceptions.RequestException as e:
            logger.debug(f"An error happened sending {method} {url}: {e}")
            raise TransportError(f"Could not send {method} {url}: {e}") from e

        try:
            if resp.status_code == requests.codes.gateway_timeout:
                logger.debug(f"Gateway timeout for {method} {url}")
                raise Timeout()

            if self.strict_status and not 200 <= resp.status_code < 300:
                raise HTTPStatusError(resp.status_code, url)

            try:
                content = resp.content
            except requests.exceptions.RequestException as e:
                logger.debug(f"Failed reading body of {method} {url}: {e}")
                raise TransportError(f"Could not read response from {url}: {e}") from e
        finally:
            resp.close()

        logger.debug(f"{method} {url} -> {resp.status_code} {content!r}")
        return content

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
