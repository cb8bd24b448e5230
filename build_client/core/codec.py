# build_client/core/codec.py

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from .errors import APIError, DecodeError
from .logger import logger

EnvelopeT = TypeVar("EnvelopeT", bound=BaseModel)


def encode(resource: BaseModel) -> bytes:
    """Request body: aliases on, unset and None fields left out."""
    body = resource.model_dump_json(by_alias=True, exclude_unset=True, exclude_none=True)
    logger.debug(f"Request body: {body}")
    return body.encode("utf-8")


def decode(raw: bytes, envelope_cls: type[EnvelopeT]) -> EnvelopeT:
    try:
        return envelope_cls.model_validate_json(raw)
    except ValidationError as e:
        logger.warning(f"Failed to decode {envelope_cls.__name__}: {e}")
        raise DecodeError(f"Invalid {envelope_cls.__name__} body: {e}", raw=raw) from e


def ensure_success(envelope, context: str):
    if not envelope.success:
        error = APIError.from_payload(context, envelope.error)
        logger.warning(str(error))
        raise error
    return envelope
