from __future__ import annotations

from typing import Protocol

from .model import AnnotationPayload


class AnnotationClient(Protocol):
    """Image-understanding provider.

    `image_ref` is a bucket/path style locator (e.g. ``gs://bucket/a/b.jpg``).
    Implementations raise on provider failure; callers decide how to degrade.
    """

    def annotate(self, image_ref: str) -> AnnotationPayload:
        raise NotImplementedError
