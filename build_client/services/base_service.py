# build_client/services/base_service.py

from pydantic import BaseModel

from build_client.core import DecodeError, Transport, logger
from build_client.core.codec import decode, encode, ensure_success


class BaseService:
    def __init__(self, transport: Transport):
        self.transport = transport
        self.endpoints = transport.endpoints

    def _send_request(
        self,
        method: str,
        url: str,
        envelope_cls: type[BaseModel],
        context: str,
        payload: BaseModel | None = None,
        timeout: float | None = None,
        result_field: str | None = None,
    ):
        """
        Central path for every call: transport, decode, success check.
        Returns the decoded envelope, or its `result_field` when one is named;
        a successful envelope missing that field is a DecodeError.
        """
        body = encode(payload) if payload is not None else None

        logger.debug(f"{method} {url}")
        raw = self.transport.complete_request(method, url, body=body, timeout=timeout)

        envelope = ensure_success(decode(raw, envelope_cls), context)
        if result_field is None:
            return envelope

        result = getattr(envelope, result_field)
        if result is None:
            logger.warning(f"{envelope_cls.__name__} from {url} has no '{result_field}'")
            raise DecodeError(f"{envelope_cls.__name__} is missing '{result_field}'", raw=raw)
        return result
