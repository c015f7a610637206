"""
Envelope encoder - Serializes domain responses back to the wire shape.

Used to build fixtures and to log responses in their original form.
"""

from typing import Any

from src.adapters.wire.pydantic_decoder import WireEnvelope
from src.domain.responses import DogCeoResponse


def encode(response: DogCeoResponse[Any]) -> str:
    """
    Serialize a response to a JSON document.

    The code key is omitted when the response carries no code.
    """
    envelope = WireEnvelope(
        code=response.code,
        message=response.message,
        status=response.status.value,
    )
    return envelope.model_dump_json(exclude_none=True)
