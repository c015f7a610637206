"""
Domain layer - Response types with zero framework imports.

This package contains the typed model of dog.ceo response envelopes,
the decoder port and the error taxonomy. Parsing lives in the wire
adapter, keeping the domain free of pydantic.
"""

from .decoding import ResponseReader
from .exceptions import (
    DecodingError,
    DogCeoApiError,
    MalformedDocument,
    PayloadTypeMismatch,
    UnknownStatus,
)
from .ports import ResponseDecoder, ResponseStatus
from .responses import (
    BreedMap,
    BreedsListResponse,
    DogCeoResponse,
    Err,
    ImageList,
    ImagesResponse,
    Ok,
    RandomImageResponse,
)

__all__ = [
    "BreedMap",
    "BreedsListResponse",
    "DecodingError",
    "DogCeoApiError",
    "DogCeoResponse",
    "Err",
    "ImageList",
    "ImagesResponse",
    "MalformedDocument",
    "Ok",
    "PayloadTypeMismatch",
    "RandomImageResponse",
    "ResponseDecoder",
    "ResponseReader",
    "ResponseStatus",
    "UnknownStatus",
]
