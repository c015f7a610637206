"""
Response envelope - Typed model of every dog.ceo response body.

The wire format carries a `message` whose meaning depends on the sibling
`status` field:

    {"code": 404, "message": "Breed not found", "status": "error"}
    {"message": ["https://.../1.jpg"], "status": "success"}

Here that union is a tagged variant keyed by status:

- Ok(payload): status is success, payload has the specialization type
- Err(text):   status is error, text is the human-readable failure

The optional numeric code sits on the envelope and applies to either
variant. Absent code is None, never 0.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import DogCeoApiError
from .ports import ResponseStatus

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result carrying the typed payload."""

    payload: T

    @property
    def status(self) -> ResponseStatus:
        return ResponseStatus.SUCCESS


@dataclass(frozen=True)
class Err:
    """Failed result carrying the API's error text."""

    text: str

    @property
    def status(self) -> ResponseStatus:
        return ResponseStatus.ERROR


@dataclass(frozen=True)
class DogCeoResponse(Generic[T]):
    """
    Generic response envelope.

    Attributes:
        result: Ok(payload) on success, Err(text) on error
        code: Optional status code sent by the API (mostly on errors)
    """

    result: Ok[T] | Err
    code: int | None = None

    @property
    def status(self) -> ResponseStatus:
        return self.result.status

    @property
    def is_success(self) -> bool:
        return isinstance(self.result, Ok)

    @property
    def message(self) -> T | str:
        """Raw message value: the payload on success, the text on error."""
        if isinstance(self.result, Ok):
            return self.result.payload
        return self.result.text

    def unwrap(self) -> T:
        """
        Return the payload of a successful response.

        Raises:
            DogCeoApiError: If the response is an error, with its text and code
        """
        if isinstance(self.result, Ok):
            return self.result.payload
        raise DogCeoApiError(self.result.text, self.code)


# Specializations
ImageList = list[str]
BreedMap = dict[str, list[str]]

ImagesResponse = DogCeoResponse[ImageList]
BreedsListResponse = DogCeoResponse[BreedMap]
RandomImageResponse = DogCeoResponse[str]
