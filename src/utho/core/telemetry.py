# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Request logging and hooks for Utho API calls.

Each call made by :class:`~utho.data._api._ApiClient` is wrapped in
:meth:`TelemetryManager.trace_request`. The manager writes one log line per
response (or transport failure) and forwards the same events to any
:class:`TelemetryHook` objects the caller registered.
"""

from __future__ import annotations

import logging
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Protocol, Union, runtime_checkable

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TelemetryConfig:
    """
    Opt-in logging and hook settings, passed with
    :func:`~utho.core.options.with_telemetry`.

    Log records and hook contexts carry the method, URL and status of a call,
    never the ``Authorization`` header.

    :param enable_logging: Write one record per call to ``logger_name``.
    :type enable_logging: bool
    :param log_level: Level applied to that logger. Successful calls are
        logged at ``DEBUG``, failures at ``WARNING``.
    :type log_level: str
    :param logger_name: Logger to write to.
    :type logger_name: str
    :param hooks: Objects implementing some or all of :class:`TelemetryHook`.
    :type hooks: list

    Example::

        client = UthoClient(
            token,
            with_telemetry(TelemetryConfig(enable_logging=True, log_level="DEBUG")),
        )
    """

    enable_logging: bool = False
    log_level: str = "WARNING"
    logger_name: str = "utho"
    hooks: List["TelemetryHook"] = field(default_factory=list)


@dataclass
class RequestContext:
    """One outgoing call; the same instance is handed to every hook event of that call."""

    request_id: str
    method: str
    url: str
    # Namespace-qualified name such as "cloud_instances.hard_reboot"
    operation: Optional[str] = None
    start_time: float = field(default_factory=time.perf_counter)
    # Scratch space shared by hooks across the events of one call
    custom_data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ResponseContext:
    status_code: int
    duration_ms: float
    response_size: Optional[int] = None


@runtime_checkable
class TelemetryHook(Protocol):
    """
    Receiver for per-call events. Any subset of the methods may be implemented.

    ``on_request_end`` fires for every response, including ones later raised
    as :class:`~utho.core.errors.ApiError`. ``on_request_error`` fires only
    when no response arrived.

    Example::

        class SlowCallHook:
            def on_request_end(self, request, response):
                if response.duration_ms > 2000:
                    print("slow:", request.operation, response.duration_ms)
    """

    def on_request_start(self, context: RequestContext) -> None:
        ...

    def on_request_end(self, request: RequestContext, response: ResponseContext) -> None:
        ...

    def on_request_error(self, request: RequestContext, error: Exception) -> None:
        ...


class TelemetryManager:
    """Internal. Fans call events out to the configured logger and hooks."""

    def __init__(self, config: Optional[TelemetryConfig] = None) -> None:
        self._config = config or TelemetryConfig()
        self._logger: Optional[logging.Logger] = None
        self._hooks = list(self._config.hooks)

        if self._config.enable_logging:
            self._logger = logging.getLogger(self._config.logger_name)
            self._logger.setLevel(getattr(logging, self._config.log_level.upper()))

    @contextmanager
    def trace_request(self, method: str, url: str, operation: Optional[str] = None) -> Iterator[RequestContext]:
        """
        Open a call context. An exception escaping the block is logged,
        reported to ``on_request_error`` and re-raised unchanged.
        """
        ctx = RequestContext(request_id=str(uuid.uuid4()), method=method, url=url, operation=operation)
        self._notify("on_request_start", ctx)
        try:
            yield ctx
        except Exception as e:
            if self._logger:
                self._logger.warning(
                    f"{ctx.method} {ctx.url} failed: {e}",
                    extra={"request_id": ctx.request_id},
                )
            self._notify("on_request_error", ctx, e)
            raise

    def record_response(self, ctx: RequestContext, status_code: int, response_size: Optional[int] = None) -> None:
        """Log the status and elapsed time of ``ctx`` and notify ``on_request_end``."""
        duration_ms = (time.perf_counter() - ctx.start_time) * 1000
        response = ResponseContext(status_code=status_code, duration_ms=duration_ms, response_size=response_size)

        if self._logger:
            level = logging.DEBUG if 200 <= status_code < 400 else logging.WARNING
            self._logger.log(
                level,
                f"{ctx.method} {ctx.url} {status_code} {duration_ms:.1f}ms",
                extra={"request_id": ctx.request_id},
            )

        self._notify("on_request_end", ctx, response)

    def _notify(self, event: str, *args: Any) -> None:
        for hook in self._hooks:
            handler = getattr(hook, event, None)
            if handler is None:
                continue
            try:
                handler(*args)
            except Exception:
                # A broken hook never fails the call
                _log.debug("telemetry hook %r failed in %s", hook, event, exc_info=True)


class NoOpTelemetryManager:
    """Stand-in used when neither logging nor hooks are configured."""

    @contextmanager
    def trace_request(self, method: str, url: str, operation: Optional[str] = None) -> Iterator[RequestContext]:
        yield RequestContext(request_id=str(uuid.uuid4()), method=method, url=url, operation=operation)

    def record_response(self, *args: Any, **kwargs: Any) -> None:
        pass


def create_telemetry_manager(
    config: Optional[TelemetryConfig],
) -> Union[TelemetryManager, NoOpTelemetryManager]:
    if config is None or not (config.enable_logging or config.hooks):
        return NoOpTelemetryManager()
    return TelemetryManager(config)


__all__ = [
    "TelemetryConfig",
    "TelemetryHook",
    "TelemetryManager",
    "NoOpTelemetryManager",
    "RequestContext",
    "ResponseContext",
    "create_telemetry_manager",
]
