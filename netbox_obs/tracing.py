"""
Distributed Tracing Setup (OpenTelemetry).

Auto-instruments: fastapi, sqlalchemy, redis ONLY.
"""

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from netbox_config.settings import Settings
from netbox_obs.logging import get_logger

logger = get_logger(__name__)


def setup_tracing(settings: Settings, app: FastAPI | None = None) -> bool:
    """
    Setup OpenTelemetry distributed tracing.

    Instruments: fastapi (when an app is given), sqlalchemy, redis
    Exports: OTLP (Jaeger/Tempo/Collector)

    Returns:
        True if tracing was enabled
    """
    if not settings.OTEL_TRACES_ENABLED:
        logger.info("otel_tracing_disabled")
        return False

    resource = Resource.create(
        {
            "service.name": settings.OTEL_SERVICE_NAME,
            "service.version": "0.1.0",
            "deployment.environment": settings.ENVIRONMENT,
        }
    )

    provider = TracerProvider(resource=resource)
    otlp_exporter = OTLPSpanExporter(endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT)
    provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
    trace.set_tracer_provider(provider)

    # Auto-instrument
    RedisInstrumentor().instrument()
    SQLAlchemyInstrumentor().instrument()
    if app is not None:
        FastAPIInstrumentor.instrument_app(app)

    logger.info(
        "otel_tracing_enabled",
        service=settings.OTEL_SERVICE_NAME,
        endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT,
    )
    return True
