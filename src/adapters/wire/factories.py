"""
Decoder factories - Wire settings into one decoder per specialization.

This module plays the role of dependency wiring: it reads Settings and
builds the adapters the domain ResponseReader is composed from.
"""

from typing import Any

from src.adapters.wire.pydantic_decoder import PydanticResponseDecoder
from src.config.settings import Settings, get_settings
from src.domain.decoding import ResponseReader
from src.domain.responses import BreedMap, ImageList


def _decoder(payload_type: Any, settings: Settings | None) -> PydanticResponseDecoder[Any]:
    settings = settings or get_settings()
    return PydanticResponseDecoder(
        payload_type,
        max_document_bytes=settings.max_document_bytes,
        allow_extra_fields=settings.allow_extra_fields,
    )


def images_decoder(settings: Settings | None = None) -> PydanticResponseDecoder[ImageList]:
    """Decoder for image-list responses (message is a list of URLs)."""
    return _decoder(ImageList, settings)


def breeds_list_decoder(settings: Settings | None = None) -> PydanticResponseDecoder[BreedMap]:
    """Decoder for breeds-list responses (message maps breed to sub-breeds)."""
    return _decoder(BreedMap, settings)


def random_image_decoder(settings: Settings | None = None) -> PydanticResponseDecoder[str]:
    """Decoder for single-image responses (message is one URL)."""
    return _decoder(str, settings)


def build_reader(settings: Settings | None = None) -> ResponseReader:
    """
    Create a response reader with all specializations wired in.

    Args:
        settings: Decoder settings; cached environment settings when omitted
    """
    return ResponseReader(
        images=images_decoder(settings),
        breeds_list=breeds_list_decoder(settings),
        random_image=random_image_decoder(settings),
    )
