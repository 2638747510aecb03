"""Shared dependencies: application context and id parsing."""
from typing import Annotated, Optional

from beanie import PydanticObjectId
from bson.errors import InvalidId
from fastapi import Depends, Request

from attendance_portal.db import AppContext


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def parse_object_id(value: Optional[str]) -> Optional[PydanticObjectId]:
    """Parse a hex id; None when it cannot name any stored document."""
    if not value:
        return None
    try:
        return PydanticObjectId(value)
    except (InvalidId, TypeError):
        return None


# Type alias for route injection
Context = Annotated[AppContext, Depends(get_context)]
