"""OpenTelemetry tracing and metrics for route dispatch.

Creates an internal span and records metrics for each match against a router.

Install with: uv add "routetrie[otel]"
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from routetrie.route import Route, RouteMatch
    from routetrie.router import Router

try:
    from opentelemetry import metrics, trace
    from opentelemetry.trace import SpanKind, TracerProvider
except ImportError as e:
    msg = (
        "OpenTelemetry instrumentation requires the 'otel' extra. "
        "Install with: uv add 'routetrie[otel]'"
    )
    raise ImportError(msg) from e


_DURATION_BUCKETS = (
    0.000001,
    0.000005,
    0.00001,
    0.000025,
    0.00005,
    0.0001,
    0.00025,
    0.0005,
    0.001,
    0.005,
    0.01,
)


class TracedRouter:
    """Read-only view of a built router whose lookups are instrumented.

    Spans are named ``routetrie.match`` and carry ``routetrie.path`` plus,
    on a hit, ``routetrie.route.name`` and ``routetrie.route.pattern``.
    Wildcard bindings are added as ``routetrie.route.param.<name>`` by
    ``resolve``.
    """

    __slots__ = ("_duration_histogram", "_lookup_counter", "_router", "_tracer")

    def __init__(
        self,
        router: Router,
        tracer: trace.Tracer,
        meter: metrics.Meter,
    ) -> None:
        self._router = router
        self._tracer = tracer
        self._duration_histogram = meter.create_histogram(
            "routetrie.match.duration",
            unit="s",
            description="Duration of route lookups.",
            explicit_bucket_boundaries_advisory=_DURATION_BUCKETS,
        )
        self._lookup_counter = meter.create_counter(
            "routetrie.match.count",
            unit="{lookup}",
            description="Number of route lookups.",
        )

    @property
    def router(self) -> Router:
        return self._router

    def get_route(self, name: str) -> Route | None:
        return self._router.get_route(name)

    def match(self, path: str) -> Route | None:
        with self._tracer.start_as_current_span(
            "routetrie.match",
            kind=SpanKind.INTERNAL,
            attributes={"routetrie.path": path},
        ) as span:
            start = time.perf_counter()
            try:
                route = self._router.match(path)
            finally:
                duration = time.perf_counter() - start
            self._record(span, route, duration)
            return route

    def resolve(self, path: str) -> RouteMatch | None:
        with self._tracer.start_as_current_span(
            "routetrie.match",
            kind=SpanKind.INTERNAL,
            attributes={"routetrie.path": path},
        ) as span:
            start = time.perf_counter()
            try:
                match = self._router.resolve(path)
            finally:
                duration = time.perf_counter() - start
            self._record(span, match.route if match is not None else None, duration)
            if match is not None:
                for key, value in match.params.items():
                    span.set_attribute(f"routetrie.route.param.{key}", value)
            return match

    def _record(self, span: trace.Span, route: Route | None, duration: float) -> None:
        attrs: dict[str, str | bool] = {"routetrie.matched": route is not None}
        if route is not None:
            attrs["routetrie.route.name"] = route.name
            span.set_attribute("routetrie.route.name", route.name)
            span.set_attribute("routetrie.route.pattern", str(route.pattern))
        self._lookup_counter.add(1, attrs)
        self._duration_histogram.record(duration, attrs)


def traced(
    router: Router,
    *,
    tracer_provider: TracerProvider | None = None,
    meter_provider: metrics.MeterProvider | None = None,
) -> TracedRouter:
    """Wrap a router so its lookups emit OpenTelemetry spans and metrics.

    Only depends on ``opentelemetry-api``; users bring their own SDK and
    exporters.

    Metrics emitted:
        - ``routetrie.match.duration`` (histogram, seconds)
        - ``routetrie.match.count`` (counter, ``routetrie.matched`` attribute)

    Args:
        router: The router to instrument. Register routes before wrapping.
        tracer_provider: Optional TracerProvider. If None, uses the global provider.
        meter_provider: Optional MeterProvider. If None, uses the global provider.

    Example:
        router.finalize()
        dispatch = traced(router)
        dispatch.match("/user/10")
    """
    tracer = trace.get_tracer("routetrie", tracer_provider=tracer_provider)
    meter = metrics.get_meter("routetrie", meter_provider=meter_provider)
    return TracedRouter(router, tracer, meter)
