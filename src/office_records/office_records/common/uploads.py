from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Optional

from flask import request


@dataclass(frozen=True)
class Attachment:
    """An uploaded document kept inline as a data URL."""

    name: str
    size: int
    content_type: str
    url: str


def uploaded_attachment(field_name: str) -> Optional[Attachment]:
    upload = request.files.get(field_name)
    if not upload or not upload.filename:
        return None
    payload = upload.read()
    content_type = upload.mimetype or "application/octet-stream"
    return Attachment(
        name=upload.filename,
        size=len(payload),
        content_type=content_type,
        url=f"data:{content_type};base64,{base64.b64encode(payload).decode('ascii')}",
    )
