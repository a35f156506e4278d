"""
Structured logging configuration.
Designed for easy debugging without exposing user data.
"""
import logging
import sys
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Generator, Optional

import structlog
from structlog.types import Processor

from fittrack.core.config import settings


def setup_logging() -> None:
    """Configure structured logging for the application."""
    
    # Common processors
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    
    if settings.LOG_FORMAT == "json":
        # JSON format for production
        renderer = structlog.processors.JSONRenderer()
    else:
        # Console format for development
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    
    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    
    # Configure root logger
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )
    
    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper()))
    
    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


# ========================================
# Operation Timing
# ========================================

@dataclass
class OperationLog:
    """Log entry for a timed store-backed operation."""
    operation_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    operation: str = ""
    context: Dict[str, Any] = field(default_factory=dict)
    
    start_time: float = 0.0
    duration_ms: float = 0.0
    
    success: bool = True
    error_type: Optional[str] = None
    error_message: Optional[str] = None


class OperationTracker:
    """Tracker for a single operation; lets the caller attach result fields."""
    
    def __init__(self, logger: structlog.stdlib.BoundLogger, operation: str, **context: Any):
        self.logger = logger
        self.log = OperationLog(operation=operation, context=dict(context))
    
    def start(self) -> None:
        """Mark the start of the operation."""
        self.log.start_time = time.time()
        self.logger.debug(
            "Operation started",
            operation=self.log.operation,
            operation_id=self.log.operation_id,
            **self.log.context,
        )
    
    def add(self, **fields: Any) -> None:
        """Attach result fields to the completion log."""
        self.log.context.update(fields)
    
    def set_error(self, error_type: str, error_message: str) -> None:
        """Record an error."""
        self.log.success = False
        self.log.error_type = error_type
        self.log.error_message = error_message
    
    def finish(self) -> None:
        """Complete the operation and log the outcome."""
        self.log.duration_ms = round((time.time() - self.log.start_time) * 1000, 2)
        
        if self.log.success:
            self.logger.info(
                "Operation completed",
                operation=self.log.operation,
                operation_id=self.log.operation_id,
                duration_ms=self.log.duration_ms,
                **self.log.context,
            )
        else:
            self.logger.error(
                "Operation failed",
                operation=self.log.operation,
                operation_id=self.log.operation_id,
                duration_ms=self.log.duration_ms,
                error_type=self.log.error_type,
                error_message=self.log.error_message,
                **self.log.context,
            )


@contextmanager
def track_operation(
    logger: structlog.stdlib.BoundLogger,
    operation: str,
    **context: Any
) -> Generator[OperationTracker, None, None]:
    """
    Context manager for timing an operation.
    
    Usage:
        with track_operation(logger, "recalculate", user_id=user_id) as op:
            summary = ...
            op.add(total_workouts=summary.workout_stats.total_workouts)
    
    Exceptions are logged and re-raised.
    """
    tracker = OperationTracker(logger, operation, **context)
    tracker.start()
    try:
        yield tracker
    except Exception as e:
        tracker.set_error(type(e).__name__, str(e))
        raise
    finally:
        tracker.finish()
