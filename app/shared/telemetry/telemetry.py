"""OpenTelemetry distributed tracing configuration.

Traces incoming FastAPI requests, outgoing translation backend calls (httpx)
and Redis commands. Uses OTLP exporter only; Jaeger is supported via its
OTLP endpoint (port 4317).
"""

import logging
import threading

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

logger = logging.getLogger(__name__)

# Probes are not traced.
_UNTRACED_URLS = "/api/v1/health,/api/v1/translate/metadata/health"


def _build_exporter(
    exporter_type: str,
    otlp_endpoint: str | None,
    jaeger_endpoint: str | None,
) -> SpanExporter | None:
    """Return the span exporter for exporter_type; None means "none"."""
    if exporter_type == "none":
        return None
    if exporter_type == "otlp" and otlp_endpoint:
        logger.info("Using OTLP span exporter: %s", otlp_endpoint)
        return OTLPSpanExporter(
            endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
        )
    if exporter_type == "jaeger" and jaeger_endpoint:
        # Jaeger accepts OTLP on port 4317 (gRPC)
        endpoint = f"{jaeger_endpoint}:4317"
        logger.info("Using OTLP span exporter for Jaeger: %s", endpoint)
        return OTLPSpanExporter(endpoint=endpoint, insecure=True)
    if exporter_type != "console":
        logger.warning("Unknown exporter type '%s', using console", exporter_type)
    return ConsoleSpanExporter()


class TelemetryConfig:
    """OpenTelemetry configuration for distributed tracing.

    Exporters: console, otlp, jaeger, or none.
    """

    def __init__(
        self,
        service_name: str,
        service_version: str,
        enabled: bool = True,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.enabled = enabled
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        jaeger_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Initialize tracing and set the global tracer provider.

        Args:
            exporter_type: "console", "otlp", "jaeger", or "none".
            otlp_endpoint: OTLP gRPC endpoint (e.g. http://localhost:4317).
            jaeger_endpoint: Jaeger host (OTLP gRPC on port 4317).
            sample_rate: Sampling rate 0.0–1.0.

        Returns:
            TracerProvider or None if disabled or setup failed.
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None
        try:
            resource = Resource(
                attributes={
                    SERVICE_NAME: self.service_name,
                    SERVICE_VERSION: self.service_version,
                    "deployment.environment": self.environment,
                }
            )
            self.tracer_provider = TracerProvider(
                resource=resource, sampler=TraceIdRatioBased(sample_rate)
            )
            exporter = _build_exporter(exporter_type, otlp_endpoint, jaeger_endpoint)
            if exporter is not None:
                self.tracer_provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(self.tracer_provider)
            logger.info(
                "OpenTelemetry initialized: service=%s, version=%s, exporter=%s",
                self.service_name,
                self.service_version,
                exporter_type,
            )
            return self.tracer_provider
        except Exception as e:
            logger.exception("Failed to initialize telemetry: %s", e)
            return None

    def instrument(self, app: FastAPI) -> None:
        """Instrument FastAPI, httpx, Redis and logging; each one independently."""
        if not self.enabled or not self.tracer_provider:
            return
        steps = (
            ("FastAPI", lambda: FastAPIInstrumentor.instrument_app(
                app, tracer_provider=self.tracer_provider, excluded_urls=_UNTRACED_URLS
            )),
            ("httpx", lambda: HTTPXClientInstrumentor().instrument(
                tracer_provider=self.tracer_provider
            )),
            ("Redis", lambda: RedisInstrumentor().instrument(
                tracer_provider=self.tracer_provider
            )),
            ("logging", lambda: LoggingInstrumentor().instrument(
                tracer_provider=self.tracer_provider, set_logging_format=True
            )),
        )
        for name, step in steps:
            try:
                step()
                logger.info("%s instrumentation enabled", name)
            except Exception as e:
                logger.exception("Failed to instrument %s: %s", name, e)

    def shutdown(self) -> None:
        """Shutdown tracer provider and flush remaining spans."""
        if self.tracer_provider:
            try:
                self.tracer_provider.shutdown()
                logger.info("Telemetry shutdown complete")
            except Exception as e:
                logger.exception("Error during telemetry shutdown: %s", e)


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> TelemetryConfig | None:
    """Return the global telemetry instance (set at startup)."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    """Set (or clear, with None) the global telemetry instance."""
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
