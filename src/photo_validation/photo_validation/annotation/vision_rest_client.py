from __future__ import annotations

import logging
from typing import Optional

import requests

from ..core.constants import (
    DEFAULT_VISION_ENDPOINT,
    DEFAULT_VISION_TIMEOUT_SECONDS,
    LABEL_MAX_RESULTS,
    LOGO_MAX_RESULTS,
    OBJECT_MAX_RESULTS,
)
from ..core.exceptions import AnnotationError
from .client import AnnotationClient
from .model import AnnotationPayload

logger = logging.getLogger(__name__)


class VisionRestAnnotationClient(AnnotationClient):
    """AnnotationClient backed by the Cloud Vision `images:annotate` REST API."""

    def __init__(
        self,
        api_key: str,
        *,
        endpoint: str = DEFAULT_VISION_ENDPOINT,
        timeout: float = DEFAULT_VISION_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self._endpoint = endpoint
        self._timeout = timeout
        self._session = session or requests.Session()

    @staticmethod
    def build_request(image_ref: str) -> dict:
        return {
            "requests": [
                {
                    "image": {"source": {"imageUri": image_ref}},
                    "features": [
                        {"type": "LABEL_DETECTION", "maxResults": LABEL_MAX_RESULTS},
                        {"type": "LOGO_DETECTION", "maxResults": LOGO_MAX_RESULTS},
                        {"type": "IMAGE_PROPERTIES"},
                        {"type": "OBJECT_LOCALIZATION", "maxResults": OBJECT_MAX_RESULTS},
                    ],
                }
            ]
        }

    def annotate(self, image_ref: str) -> AnnotationPayload:
        if not self._api_key:
            raise AnnotationError("Vision API key is not configured")

        try:
            resp = self._session.post(
                self._endpoint,
                params={"key": self._api_key},
                json=self.build_request(image_ref),
                timeout=self._timeout,
            )
            resp.raise_for_status()
            body = resp.json()
        except requests.RequestException as e:
            raise AnnotationError(f"Vision request failed: {e}") from e
        except ValueError as e:
            raise AnnotationError("Vision response is not valid JSON") from e

        responses = body.get("responses") if isinstance(body, dict) else None
        if not responses:
            raise AnnotationError("Vision response has no entries")

        entry = responses[0] or {}
        if entry.get("error"):
            message = entry["error"].get("message") or "unknown error"
            raise AnnotationError(f"Vision rejected the image: {message}")

        payload = AnnotationPayload.from_response(entry)
        logger.debug(
            "annotated %s: %d labels, %d logos, %d colors",
            image_ref,
            len(payload.labels),
            len(payload.logos),
            len(payload.colors),
        )
        return payload
