"""Tracing helpers: a span decorator for async use cases and a span context manager."""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

P = ParamSpec("P")
T = TypeVar("T")

AttributeValue = str | int | float | bool


def traced(
    operation_name: str | None = None,
    attributes: dict[str, AttributeValue] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """Decorator that runs an async function inside a span.

    Args:
        operation_name: Span name (defaults to module.funcname).
        attributes: Optional attributes set on the span.
    """

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        tracer = trace.get_tracer(func.__module__)
        span_name = operation_name or f"{func.__module__}.{func.__name__}"

        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            with tracer.start_as_current_span(
                span_name, attributes=attributes, record_exception=True
            ) as span:
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        return wrapper

    return decorator


def add_span_attributes(**attributes: AttributeValue) -> None:
    """Add attributes to the current span."""
    span = trace.get_current_span()
    if span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)


class TracedOperation:
    """Context manager for a child span around one unit of work.

    Errors the caller handles itself are reported with record_error(); an
    exception escaping the block marks the span as failed too.
    """

    def __init__(
        self, operation_name: str, attributes: dict[str, AttributeValue] | None = None
    ) -> None:
        self.operation_name = operation_name
        self.attributes = attributes or {}
        self.tracer = trace.get_tracer(__name__)
        self._cm: Any = None
        self.span: trace.Span | None = None
        self._failed = False

    def __enter__(self) -> "TracedOperation":
        self._cm = self.tracer.start_as_current_span(
            self.operation_name,
            attributes=self.attributes,
            record_exception=False,
            set_status_on_exception=False,
        )
        self.span = self._cm.__enter__()
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        if self.span is not None:
            if exc_val is not None:
                self.record_error(exc_val)
            elif not self._failed:
                self.span.set_status(Status(StatusCode.OK))
        self._cm.__exit__(exc_type, exc_val, exc_tb)

    def set_attribute(self, key: str, value: AttributeValue) -> None:
        if self.span is not None:
            self.span.set_attribute(key, value)

    def record_error(self, exc: BaseException) -> None:
        self._failed = True
        if self.span is not None:
            self.span.set_status(Status(StatusCode.ERROR, str(exc)))
            self.span.record_exception(exc)
