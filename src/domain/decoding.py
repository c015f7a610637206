"""
Response reader domain service.

Groups one decoder per envelope specialization so calling code picks the
payload type by method name instead of wiring decoders itself:

- read_images:       list of image URLs (breed or whole collection)
- read_breeds_list:  breed name -> list of sub-breed names
- read_random_image: single image URL

Each has an _obj twin taking a body already parsed by the HTTP client
(e.g. response.json()).

Decoding failures propagate unchanged as DecodingError subclasses.
Error-status responses are not failures here; they come back as Err and
the caller decides, typically via DogCeoResponse.unwrap().
"""

import logging
from dataclasses import dataclass
from typing import TypeVar

from .ports import ResponseDecoder
from .responses import BreedMap, DogCeoResponse, ImageList

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ResponseReader:
    """
    Domain service for reading dog.ceo responses.

    Holds immutable decoders only, so one instance can be shared
    between threads.
    """

    images: ResponseDecoder[ImageList]
    breeds_list: ResponseDecoder[BreedMap]
    random_image: ResponseDecoder[str]

    def read_images(self, document: str | bytes | bytearray) -> DogCeoResponse[ImageList]:
        """
        Decode an image-list response.

        Args:
            document: Raw response body

        Returns:
            Response whose payload is the ordered list of image URLs

        Raises:
            DecodingError: If the document does not fit the envelope
        """
        return self._read("images", self.images, document)

    def read_breeds_list(self, document: str | bytes | bytearray) -> DogCeoResponse[BreedMap]:
        """
        Decode a breeds-list response.

        Args:
            document: Raw response body

        Returns:
            Response whose payload maps breed names to sub-breed names

        Raises:
            DecodingError: If the document does not fit the envelope
        """
        return self._read("breeds_list", self.breeds_list, document)

    def read_random_image(self, document: str | bytes | bytearray) -> DogCeoResponse[str]:
        """Decode a single-image response (payload is one URL)."""
        return self._read("random_image", self.random_image, document)

    def read_images_obj(self, data: object) -> DogCeoResponse[ImageList]:
        """Decode an image-list body already parsed by the HTTP client."""
        return self._log("images", self.images.decode_obj(data))

    def read_breeds_list_obj(self, data: object) -> DogCeoResponse[BreedMap]:
        """Decode a breeds-list body already parsed by the HTTP client."""
        return self._log("breeds_list", self.breeds_list.decode_obj(data))

    def read_random_image_obj(self, data: object) -> DogCeoResponse[str]:
        """Decode a single-image body already parsed by the HTTP client."""
        return self._log("random_image", self.random_image.decode_obj(data))

    def _read(
        self,
        kind: str,
        decoder: ResponseDecoder[T],
        document: str | bytes | bytearray,
    ) -> DogCeoResponse[T]:
        return self._log(kind, decoder.decode(document))

    def _log(self, kind: str, response: DogCeoResponse[T]) -> DogCeoResponse[T]:
        if response.is_success:
            logger.debug("Decoded %s response", kind)
        else:
            logger.info(
                "dog.ceo returned error for %s: code=%s message=%s",
                kind,
                response.code,
                response.message,
            )
        return response
