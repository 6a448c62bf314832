"""
PetDemo: Request Body Reader
============================

What:  Reads a POST body into a plain dict regardless of how it was sent.
Why:   The pages submit HTML forms; API clients send JSON. Both reach the
       same handlers.

Supported content types:
    application/json                    → parsed object (non-objects → {})
    application/x-www-form-urlencoded   → form fields
    multipart/form-data                 → form fields (file parts dropped)
    anything else / no body             → {}
"""

from typing import Any, Dict

from fastapi import Request

from petdemo.exceptions import ValidationError

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_body(request: Request) -> Dict[str, Any]:
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith("application/json"):
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            payload = await request.json()
        except ValueError:
            raise ValidationError(message="Request body is not valid JSON")
        return payload if isinstance(payload, dict) else {}

    if content_type.startswith(FORM_TYPES):
        form = await request.form()
        # File parts are not field values; leave them out so they read as missing
        return {key: value for key, value in form.items() if isinstance(value, str)}

    return {}
