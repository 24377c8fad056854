"""
Response classes for the API.
"""

import json
from typing import Any

from fastapi.responses import JSONResponse


class RecordJSONResponse(JSONResponse):
    """JSON response that allows non-finite floats.

    Prices and order totals may be ``inf`` or ``NaN``; they are written
    as the ``Infinity``/``NaN`` constants that Python's ``json`` module
    (and therefore ``requests``) reads back.
    """

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=True,
            indent=None,
            separators=(",", ":"),
        ).encode("utf-8")
