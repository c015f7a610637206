"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Settings isolated from the environment and .env files
- A fully wired ResponseReader
- Realistic dog.ceo response bodies
"""

import pytest

from src.adapters.wire.factories import build_reader
from src.config.settings import Settings
from src.domain.decoding import ResponseReader


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def reader(settings: Settings) -> ResponseReader:
    """ResponseReader wired with pydantic decoders."""
    return build_reader(settings)


@pytest.fixture
def images_document() -> str:
    """Body of GET /breed/hound/images."""
    return (
        '{"message": ['
        '"https://images.dog.ceo/breeds/hound-afghan/n02088094_1003.jpg", '
        '"https://images.dog.ceo/breeds/hound-basset/n02088238_10005.jpg", '
        '"https://images.dog.ceo/breeds/hound-blood/n02088466_10083.jpg"'
        '], "status": "success"}'
    )


@pytest.fixture
def breeds_list_document() -> str:
    """Body of GET /breeds/list/all (trimmed)."""
    return (
        '{"message": {'
        '"affenpinscher": [], '
        '"bulldog": ["boston", "english", "french"], '
        '"hound": ["afghan", "basset", "blood", "english", "ibizan", "plott", "walker"], '
        '"terrier": ["american", "australian", "bedlington"]'
        '}, "status": "success"}'
    )


@pytest.fixture
def random_image_document() -> str:
    """Body of GET /breeds/image/random."""
    return (
        '{"message": "https://images.dog.ceo/breeds/terrier-bedlington/n02093647_1178.jpg", '
        '"status": "success"}'
    )


@pytest.fixture
def not_found_document() -> str:
    """Body of GET /breed/unicorn/images."""
    return (
        '{"status": "error", '
        '"message": "Breed not found (main breed does not exist)", '
        '"code": 404}'
    )
