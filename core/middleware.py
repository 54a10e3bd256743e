import time
from functools import wraps
from typing import Any

from flask import current_app, g

from core.errors import AiHomeError


def _get_metrics():
    return current_app.config.get('metrics')


def _extract_status_code(response: Any) -> int:
    if hasattr(response, 'status_code'):
        try:
            return int(response.status_code)
        except (TypeError, ValueError):
            return 200
    if isinstance(response, tuple) and len(response) >= 2:
        try:
            return int(response[1])
        except (TypeError, ValueError):
            return 200
    return 200


def _exception_status(exc: Exception) -> int:
    if isinstance(exc, AiHomeError):
        return exc.status_code
    code = getattr(exc, 'code', None)
    if isinstance(code, int):
        return code
    return 500


def _record(metrics, status_code: int, duration: float) -> None:
    kind = g.get('ai_home_kind', 'other')
    metrics.inc_counter('ai_home_requests_total', {'kind': kind, 'status': str(status_code)})
    metrics.observe_histogram('ai_home_request_duration_seconds', duration, {'kind': kind})


def track_request_metrics(func):
    """Decorator that records request counts and latency per resolved branch."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        metrics = _get_metrics()
        start_time = time.time()
        try:
            response = func(*args, **kwargs)
        except Exception as exc:
            if metrics:
                _record(metrics, _exception_status(exc), time.time() - start_time)
            raise
        if metrics:
            _record(metrics, _extract_status_code(response), time.time() - start_time)
        return response

    return wrapper
