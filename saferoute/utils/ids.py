from __future__ import annotations

import base64
import uuid


def new_base64_uuid() -> str:
    """Return a short URL-safe identifier for edges added without an explicit id.

    The identifier is a random UUID4 encoded as URL-safe Base64 with the two
    trailing padding characters removed, so it is always 22 characters long.
    """
    return base64.urlsafe_b64encode(uuid.uuid4().bytes)[:-2].decode("ascii")
