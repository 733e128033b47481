import json
from typing import Any, Optional

import requests


def make_response(status_code: int = 200, body: Optional[Any] = None, raw: Optional[bytes] = None) -> requests.Response:
    """Build a real requests.Response carrying a JSON (or raw) body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code == 200 else "Bad Request"
    if raw is not None:
        response._content = raw
    else:
        response._content = json.dumps(body if body is not None else {}).encode('utf-8')
    response.encoding = 'utf-8'
    return response
