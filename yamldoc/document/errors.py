"""Errors raised while rendering a document."""

from typing import Any


class SerializationError(ValueError):
    """A leaf value could not be converted to its YAML text form.

    The failing value is kept on ``value`` and the underlying encoder
    message on ``detail``. When the failure came from PyYAML the original
    exception is chained as ``__cause__``.
    """

    def __init__(self, value: Any, detail: str):
        self.value = value
        self.detail = detail
        super().__init__(f"Cannot serialize {type(value).__name__} value: {detail}")
