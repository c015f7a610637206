"""
Pydantic decoder adapter - Implements ResponseDecoder protocol.

This module provides the pydantic v2 implementation of the domain's
decoder port. Decoding runs in two passes:

1. Envelope: the document is parsed against WireEnvelope, which only
   checks structure (object, required message/status, integer code).
2. Payload: status is mapped onto ResponseStatus and message is validated
   in strict mode against the type that status requires, the
   specialization's payload type on success and a plain string on error.

Pass 2 runs in strict mode; nothing is coerced.

Every pydantic ValidationError is translated into a domain exception
before leaving this module.
"""

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, TypeAdapter, ValidationError

from src.domain.exceptions import MalformedDocument, PayloadTypeMismatch, UnknownStatus
from src.domain.ports import ResponseStatus
from src.domain.responses import DogCeoResponse, Err, Ok

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_DOCUMENT_BYTES = 1_048_576


class WireEnvelope(BaseModel):
    """Structural shape shared by every response body."""

    model_config = ConfigDict(extra="allow")

    code: StrictInt | None = None
    message: Any
    status: StrictStr


def _describe(exc: ValidationError) -> str:
    """Render the first validation error as 'loc: msg'."""
    error = exc.errors()[0]
    loc = ".".join(str(part) for part in error["loc"])
    return f"{loc}: {error['msg']}" if loc else error["msg"]


class PydanticResponseDecoder(Generic[T]):
    """
    Implements ResponseDecoder protocol via pydantic TypeAdapters.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Instances are immutable after construction and safe to share.
    """

    def __init__(
        self,
        payload_type: Any,
        *,
        max_document_bytes: int = DEFAULT_MAX_DOCUMENT_BYTES,
        allow_extra_fields: bool = True,
    ) -> None:
        """
        Initialize decoder for one payload specialization.

        Args:
            payload_type: Type the message must have on success,
                e.g. list[str] or dict[str, list[str]]
            max_document_bytes: Upper bound on raw document size
            allow_extra_fields: Ignore unknown top-level keys when True,
                reject them when False
        """
        self._payload_adapter: TypeAdapter[T] = TypeAdapter(payload_type)
        self._text_adapter: TypeAdapter[str] = TypeAdapter(str)
        self._max_document_bytes = max_document_bytes
        self._allow_extra_fields = allow_extra_fields

    def decode(self, document: str | bytes | bytearray) -> DogCeoResponse[T]:
        """
        Decode a raw JSON document.

        Raises:
            MalformedDocument: Oversized, invalid JSON, not an object,
                missing message/status, or wrongly typed code/status
            UnknownStatus: Status string outside success/error
            PayloadTypeMismatch: Message shape does not match the status
        """
        if isinstance(document, str):
            try:
                size = len(document.encode())
            except UnicodeEncodeError as exc:
                logger.debug("Rejected document that is not valid UTF-8: %s", exc)
                raise MalformedDocument(f"Document is not valid UTF-8: {exc.reason}") from exc
        else:
            size = len(document)
        if size > self._max_document_bytes:
            logger.debug("Rejected %d byte document (limit %d)", size, self._max_document_bytes)
            raise MalformedDocument(
                f"Document is {size} bytes, limit is {self._max_document_bytes}"
            )

        try:
            envelope = WireEnvelope.model_validate_json(document)
        except ValidationError as exc:
            logger.debug("Envelope validation failed: %s", exc)
            raise MalformedDocument(_describe(exc)) from exc

        return self._discriminate(envelope)

    def decode_obj(self, data: object) -> DogCeoResponse[T]:
        """
        Decode an already-parsed JSON value (e.g. from response.json()).

        Same contract as decode() minus the size check.
        """
        try:
            envelope = WireEnvelope.model_validate(data)
        except ValidationError as exc:
            logger.debug("Envelope validation failed: %s", exc)
            raise MalformedDocument(_describe(exc)) from exc

        return self._discriminate(envelope)

    def _discriminate(self, envelope: WireEnvelope) -> DogCeoResponse[T]:
        if not self._allow_extra_fields and envelope.model_extra:
            extra = ", ".join(sorted(envelope.model_extra))
            raise MalformedDocument(f"Unexpected fields: {extra}")

        try:
            status = ResponseStatus(envelope.status)
        except ValueError:
            logger.debug("Unknown status %r", envelope.status)
            raise UnknownStatus(envelope.status) from None

        if status is ResponseStatus.ERROR:
            text = self._validate(self._text_adapter, envelope.message, status)
            return DogCeoResponse(result=Err(text), code=envelope.code)

        payload = self._validate(self._payload_adapter, envelope.message, status)
        return DogCeoResponse(result=Ok(payload), code=envelope.code)

    def _validate(self, adapter: TypeAdapter[Any], value: Any, status: ResponseStatus) -> Any:
        try:
            return adapter.validate_python(value, strict=True)
        except ValidationError as exc:
            logger.debug("Message validation failed for %s status: %s", status.value, exc)
            raise PayloadTypeMismatch(status.value, _describe(exc)) from exc
