"""
Response factory interface.

A response factory turns a normalized ``ResponseEnvelope`` into the response
object of a web framework.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from api_response.core.domain.responses import ResponseEnvelope


class IResponseFactory(ABC):
    """Interface for building framework responses from envelopes."""

    @abstractmethod
    def create_response(self, envelope: ResponseEnvelope) -> Any:
        """Create a framework response.

        Implementations must not raise for payloads that cannot be encoded;
        they answer with the minimal error payload and status 500 instead.

        Args:
            envelope: The normalized response envelope

        Returns:
            The framework response object
        """
