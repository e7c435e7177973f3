"""Base service class for domain services."""

from contextlib import AbstractContextManager
from typing import Any, ClassVar

import logfire


class Service:
    """Base class for all domain services.

    Operations are traced as ``<span_prefix>.<operation>`` so every span of a
    service groups under one name in logfire.
    """

    span_prefix: ClassVar[str] = "service"

    def span(self, operation: str, **attributes: Any) -> AbstractContextManager[Any]:
        """Open a logfire span for one operation of this service."""
        return logfire.span(f"{self.span_prefix}.{operation}", **attributes)
