from __future__ import annotations

import functools
import json
import logging
import time
from contextlib import asynccontextmanager, contextmanager
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, TypeVar

T = TypeVar("T")

METRICS_LOGGER_NAME = "metrics.actions"


class MetricsClient:
    """Writes one JSON line per timed action to the ``metrics.actions`` logger."""

    def __init__(self):
        self._logger = logging.getLogger(METRICS_LOGGER_NAME)

    def configure(self, logger: logging.Logger | None = None) -> None:
        if logger:
            self._logger = logger

    def _emit(
        self,
        action: str,
        duration_ms: float,
        error: BaseException | None,
        *,
        source: str | None,
        extra: dict | None,
    ) -> None:
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "action": action,
            "duration_ms": round(duration_ms, 3),
            "success": error is None,
        }
        if error is not None:
            payload["error"] = type(error).__name__
        if source:
            payload["source"] = source
        if extra:
            payload.update(extra)
        self._logger.info(json.dumps(payload, ensure_ascii=False, default=str))

    @contextmanager
    def span(self, action: str, *, source: str | None = None, extra: dict | None = None):
        start = time.perf_counter()
        error: BaseException | None = None
        try:
            yield
        except Exception as exc:
            error = exc
            raise
        finally:
            self._emit(action, (time.perf_counter() - start) * 1000, error, source=source, extra=extra)

    @asynccontextmanager
    async def span_async(self, action: str, *, source: str | None = None, extra: dict | None = None):
        start = time.perf_counter()
        error: BaseException | None = None
        try:
            yield
        except Exception as exc:
            error = exc
            raise
        finally:
            self._emit(action, (time.perf_counter() - start) * 1000, error, source=source, extra=extra)

    def wrap_async(
        self,
        action: str,
        *,
        source: str | None = None,
        extra_fn: Callable[..., dict | None] | None = None,
    ):
        def decorator(func: Callable[..., Awaitable[T]]):
            @functools.wraps(func)
            async def wrapper(*args, **kwargs):
                extra = extra_fn(*args, **kwargs) if extra_fn else None
                async with self.span_async(action, source=source, extra=extra):
                    return await func(*args, **kwargs)

            return wrapper

        return decorator

    def wrap_sync(
        self,
        action: str,
        *,
        source: str | None = None,
        extra_fn: Callable[..., dict | None] | None = None,
    ):
        def decorator(func: Callable[..., T]):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                extra = extra_fn(*args, **kwargs) if extra_fn else None
                with self.span(action, source=source, extra=extra):
                    return func(*args, **kwargs)

            return wrapper

        return decorator


metrics = MetricsClient()
