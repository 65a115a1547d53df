import uuid
from starlette.middleware.base import BaseHTTPMiddleware

MAX_REQUEST_ID_LEN = 64


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        incoming = (request.headers.get("X-Request-Id") or "").strip()
        rid = incoming[:MAX_REQUEST_ID_LEN] or uuid.uuid4().hex
        request.state.request_id = rid
        response = await call_next(request)
        response.headers["X-Request-Id"] = rid
        return response
