"""
Acknowledging sink for create operations.

The mock API accepts new cars and appointments but never stores them:
the fixture store stays exactly as it was built.  This module makes
that contract explicit.  Create services hand their records to an
:class:`AcknowledgingSink`, which logs the simulated write and returns
the record unchanged.
"""

import logging
from typing import Any, Mapping, Optional, TypeVar, Union

from fastapi import Request
from pydantic import BaseModel


T = TypeVar("T", bound=Union[BaseModel, Mapping[str, Any]])


class AcknowledgingSink:
    """Repository that accepts records and discards them."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def accept(self, kind: str, record: T) -> T:
        """Acknowledge ``record`` of the given ``kind`` without storing it."""
        if isinstance(record, BaseModel):
            shown = record.model_dump(mode="json", by_alias=True)
        else:
            shown = dict(record)
        self.logger.info("Simulated adding new %s: %s", kind, shown)
        return record


def get_sink(request: Request) -> AcknowledgingSink:
    """FastAPI dependency returning the sink attached to the application."""
    return request.app.state.sink
