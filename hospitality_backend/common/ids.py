# common/ids.py

import uuid
from typing import Optional


def parse_uuid(value) -> Optional[uuid.UUID]:
    """
    Path/header ids arrive as free text; anything that is not a UUID
    simply cannot match a row.
    """
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None
