"""Compact share codes for drafts (the text a QR code or link carries)."""

from __future__ import annotations

import base64
import binascii
import json
from urllib.parse import quote, unquote

from pydantic import ValidationError

from garage.errors import ShareCodeError
from garage.models import Draft


def encode_draft(draft: Draft) -> str:
    payload = json.dumps(draft.to_payload(), separators=(",", ":"), ensure_ascii=False)
    return base64.urlsafe_b64encode(quote(payload, safe="").encode("ascii")).decode("ascii")


def decode_draft(code: str) -> Draft:
    """Inverse of :func:`encode_draft`; raises :class:`ShareCodeError` on bad input."""

    text = code.strip()
    # Older links were produced with the standard alphabet and may have lost padding.
    text = text.replace("+", "-").replace("/", "_")
    text += "=" * (-len(text) % 4)
    try:
        raw = base64.urlsafe_b64decode(text.encode("ascii")).decode("ascii")
        payload = json.loads(unquote(raw))
    except (binascii.Error, UnicodeError, ValueError) as exc:
        raise ShareCodeError(f"share code is not a valid encoded draft: {exc}") from exc
    try:
        return Draft.model_validate(payload)
    except ValidationError as exc:
        raise ShareCodeError(f"share code does not describe a draft: {exc}") from exc
