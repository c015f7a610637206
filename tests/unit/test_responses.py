"""
Unit tests for the response envelope and its result variants.
"""

import dataclasses

import pytest

from src.domain.exceptions import DogCeoApiError
from src.domain.ports import ResponseStatus
from src.domain.responses import DogCeoResponse, Err, Ok


class TestVariants:
    """Tests for Ok and Err."""

    def test_ok_status_is_success(self) -> None:
        """Ok always reports success."""
        assert Ok(["a"]).status is ResponseStatus.SUCCESS

    def test_err_status_is_error(self) -> None:
        """Err always reports error."""
        assert Err("Breed not found").status is ResponseStatus.ERROR

    def test_variants_are_frozen(self) -> None:
        """Variants cannot be mutated after creation."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            Ok("x").payload = "y"  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            Err("x").text = "y"  # type: ignore[misc]

    def test_variants_compare_by_value(self) -> None:
        """Equal contents mean equal variants."""
        assert Ok(["a", "b"]) == Ok(["a", "b"])
        assert Err("x") == Err("x")
        assert Ok("x") != Err("x")


class TestDogCeoResponse:
    """Tests for the DogCeoResponse envelope."""

    def test_success_response_properties(self) -> None:
        """Success envelope exposes payload as message."""
        response = DogCeoResponse(result=Ok(["https://a/1.jpg"]))

        assert response.status is ResponseStatus.SUCCESS
        assert response.is_success is True
        assert response.message == ["https://a/1.jpg"]

    def test_error_response_properties(self) -> None:
        """Error envelope exposes text as message."""
        response: DogCeoResponse[list[str]] = DogCeoResponse(
            result=Err("Breed not found"), code=404
        )

        assert response.status is ResponseStatus.ERROR
        assert response.is_success is False
        assert response.message == "Breed not found"
        assert response.code == 404

    def test_code_defaults_to_none(self) -> None:
        """Absent code is None, not 0."""
        response = DogCeoResponse(result=Ok([]))
        assert response.code is None

    def test_code_may_accompany_success(self) -> None:
        """Code is attached to the envelope, not the variant."""
        response = DogCeoResponse(result=Ok("x"), code=200)
        assert response.code == 200
        assert response.is_success

    def test_unwrap_returns_payload(self) -> None:
        """unwrap() hands back the payload of a success."""
        payload = {"hound": ["afghan", "basset"]}
        response = DogCeoResponse(result=Ok(payload))
        assert response.unwrap() == payload

    def test_unwrap_raises_on_error(self) -> None:
        """unwrap() raises DogCeoApiError with text and code."""
        response: DogCeoResponse[list[str]] = DogCeoResponse(
            result=Err("Breed not found"), code=404
        )

        with pytest.raises(DogCeoApiError) as exc_info:
            response.unwrap()

        assert exc_info.value.text == "Breed not found"
        assert exc_info.value.code == 404

    def test_unwrap_returns_empty_payload(self) -> None:
        """An empty list is still a successful payload."""
        response: DogCeoResponse[list[str]] = DogCeoResponse(result=Ok([]))
        assert response.unwrap() == []
