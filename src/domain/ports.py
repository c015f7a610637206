"""
Port interfaces - Protocol definitions for decoder abstraction.

This module defines the interface (port) that the domain requires
from the wire layer. Adapters implement these protocols.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from .responses import DogCeoResponse

T_co = TypeVar("T_co", covariant=True)


class ResponseStatus(str, Enum):
    """
    Status discriminant of every dog.ceo response envelope.

    - SUCCESS: request completed, `message` carries the typed payload
    - ERROR: request failed, `message` carries a human-readable string

    The str mixin keeps values JSON serializable and comparable
    against the raw wire strings.
    """

    SUCCESS = "success"
    ERROR = "error"


class ResponseDecoder(Protocol[T_co]):
    """Port interface for decoding one envelope specialization."""

    def decode(self, document: str | bytes | bytearray) -> DogCeoResponse[T_co]:
        """
        Decode a raw JSON document into a typed response.

        Args:
            document: Raw response body as received from the API

        Returns:
            DogCeoResponse whose result is Ok(payload) or Err(text)

        Raises:
            MalformedDocument: Invalid JSON, not an object, missing fields
            UnknownStatus: Status outside the enumerated values
            PayloadTypeMismatch: Message shape does not match the status
        """
        ...

    def decode_obj(self, data: object) -> DogCeoResponse[T_co]:
        """
        Decode an already-parsed JSON value.

        Same contract as decode(), for callers whose HTTP client has
        already turned the body into Python objects.
        """
        ...
