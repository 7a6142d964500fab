from fastapi import Request

from app.upload.orchestrator import UploadOrchestrator
from app.upload.rate_limiter import UNKNOWN_CLIENT


def get_orchestrator(request: Request) -> UploadOrchestrator:
    return request.app.state.orchestrator


def get_client_id(request: Request) -> str:
    """Identify the caller from proxy headers, falling back to "unknown"."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    return UNKNOWN_CLIENT
