import json
from typing import Any, Optional

from fastapi.responses import Response
from pydantic import BaseModel

JSON_MEDIA_TYPE = "application/json"


def is_pretty(flag: Optional[str]) -> bool:
    """Only the literal string ``"true"`` turns pretty-printing on."""
    return flag == "true"


def to_json(data: Any, pretty: bool = False) -> str:
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def format_response(
    data: Any, pretty: Optional[str] = None, status_code: int = 200
) -> Response:
    """Serialize ``data`` into a JSON response, indented when ``pretty`` is "true"."""
    return Response(
        content=to_json(data, is_pretty(pretty)),
        status_code=status_code,
        media_type=JSON_MEDIA_TYPE,
    )
