"""Wire adapters - JSON decoding and encoding via pydantic."""

from .encoder import encode
from .factories import breeds_list_decoder, build_reader, images_decoder, random_image_decoder
from .pydantic_decoder import PydanticResponseDecoder, WireEnvelope

__all__ = [
    "PydanticResponseDecoder",
    "WireEnvelope",
    "breeds_list_decoder",
    "build_reader",
    "encode",
    "images_decoder",
    "random_image_decoder",
]
