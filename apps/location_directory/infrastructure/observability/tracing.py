"""OpenTelemetry Tracing - Location Directory Service."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_tracer_provider = None


def setup_tracing(
    service_name: str,
    *,
    endpoint: str,
    sampling_rate: float = 1.0,
    environment: str = "development",
) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Args:
        service_name: 서비스 이름
        endpoint: OTLP gRPC exporter 엔드포인트
        sampling_rate: 샘플링 비율 (0.0 ~ 1.0)
        environment: 배포 환경

    Returns:
        설정 성공 여부
    """
    global _tracer_provider  # noqa: PLW0603

    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
        from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

        resource = Resource.create(
            {
                "service.name": service_name,
                "deployment.environment": environment,
            }
        )
        provider = TracerProvider(resource=resource, sampler=TraceIdRatioBased(sampling_rate))
        provider.add_span_processor(
            BatchSpanProcessor(
                OTLPSpanExporter(endpoint=endpoint, insecure=True),
                max_queue_size=2048,
                max_export_batch_size=512,
                schedule_delay_millis=1000,
            )
        )
        trace.set_tracer_provider(provider)
        _tracer_provider = provider

        logger.info(
            "OpenTelemetry tracing configured",
            extra={
                "service": service_name,
                "endpoint": endpoint,
                "sampling_rate": sampling_rate,
            },
        )
        return True

    except ImportError as e:
        logger.warning(f"OpenTelemetry not available: {e}")
        return False
    except Exception as e:
        logger.error(f"Failed to configure tracing: {e}")
        return False


def instrument_fastapi(app) -> None:
    """FastAPI 자동 계측."""
    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

        FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ping")
        logger.info("FastAPI instrumentation enabled")

    except ImportError:
        logger.warning("FastAPIInstrumentor not available")
    except Exception as e:
        logger.error(f"Failed to instrument FastAPI: {e}")


def instrument_sqlalchemy(engine) -> None:
    """SQLAlchemy 자동 계측 (AsyncEngine은 sync_engine을 사용)."""
    try:
        from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor

        SQLAlchemyInstrumentor().instrument(engine=getattr(engine, "sync_engine", engine))
        logger.info("SQLAlchemy instrumentation enabled")

    except ImportError:
        logger.warning("SQLAlchemyInstrumentor not available")
    except Exception as e:
        logger.error(f"Failed to instrument SQLAlchemy: {e}")


def instrument_redis() -> None:
    """Redis 자동 계측 (Rate Limiter 호출)."""
    try:
        from opentelemetry.instrumentation.redis import RedisInstrumentor

        RedisInstrumentor().instrument()
        logger.info("Redis instrumentation enabled")

    except ImportError:
        logger.warning("RedisInstrumentor not available")
    except Exception as e:
        logger.error(f"Failed to instrument Redis: {e}")


def shutdown_tracing() -> None:
    """트레이싱 종료 (남은 span flush)."""
    global _tracer_provider  # noqa: PLW0603
    if _tracer_provider is None:
        return
    _tracer_provider.shutdown()
    _tracer_provider = None
