"""
OpenTelemetry 트레이싱 (TRACING_ENABLED일 때만 사용)
"""
import logging
import os

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from app.config.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_OTLP_ENDPOINT = "http://localhost:4317"


def setup_tracing(settings: Settings) -> None:
    """OTLP gRPC 수집기로 스팬을 내보내는 전역 TracerProvider를 등록합니다."""
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", DEFAULT_OTLP_ENDPOINT)
    resource = Resource.create({
        SERVICE_NAME: os.getenv("OTEL_SERVICE_NAME", settings.APP_NAME),
        SERVICE_VERSION: settings.APP_VERSION,
        "deployment.environment": "development" if settings.DEBUG else "production",
    })

    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=True)))
    trace.set_tracer_provider(provider)

    logger.info(f"OpenTelemetry tracing initialized - endpoint: {endpoint}")


def instrument_app(app: FastAPI, settings: Settings) -> None:
    """요청 단위 스팬 생성 (트레이싱이 꺼져 있으면 아무것도 하지 않음)"""
    if not settings.TRACING_ENABLED:
        return
    FastAPIInstrumentor.instrument_app(app)
