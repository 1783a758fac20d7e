"""
Error Handler - Logged fallbacks for composite derivation steps.

Every insights function is total over its inputs, but views and batch
endpoints chain several of them per record. Instead of letting one
unexpected failure blank out a whole batch, those steps run through
safe_execute(), which logs what went wrong and returns the step's empty
value.

Usage:
    from attendee_intel.insights.error_handler import log_component_error, safe_execute

    # Option 1: Manual logging
    try:
        result = risky_operation()
    except Exception as e:
        log_component_error(phase="value_prop", error=e, record_name=name)
        result = ""

    # Option 2: Safe execution wrapper
    result = safe_execute(
        derive_value_prop, args=(record,),
        phase="value_prop", record_name=name, fallback="",
    )
"""

import logging
import traceback
from typing import Any, Callable

logger = logging.getLogger("attendee_intel.error_handler")


def log_component_error(
    phase: str,
    error: Exception = None,
    error_message: str = None,
    record_name: str = None,
    context: dict = None,
    severity: str = "warning",
):
    """Log a non-fatal derivation error.

    Args:
        phase: Derivation step where the error occurred (tiers, value_prop, outreach, etc.)
        error: The exception object (optional if error_message provided)
        error_message: Human-readable error description
        record_name: Name on the record being processed, if any
        context: Additional context dict
        severity: "warning", "error", or "critical"
    """
    msg = error_message or (str(error) if error else "Unknown error")
    error_type = type(error).__name__ if error else "UnknownError"

    log_extra = {
        "phase": phase,
        "record_name": record_name or "",
        "component": (context or {}).get("function", ""),
    }

    if severity == "critical":
        logger.critical("Derivation error in %s (%s): %s", phase, error_type, msg, extra=log_extra)
    elif severity == "error":
        logger.error("Derivation error in %s (%s): %s", phase, error_type, msg, extra=log_extra)
    else:
        logger.warning("Derivation error in %s (%s): %s", phase, error_type, msg, extra=log_extra)

    if context and context.get("traceback"):
        logger.debug("Traceback for %s:\n%s", phase, context["traceback"])


def safe_execute(
    fn: Callable,
    args: tuple = (),
    kwargs: dict = None,
    phase: str = "unknown",
    record_name: str = None,
    fallback: Any = None,
    severity: str = "warning",
) -> Any:
    """Execute a function with automatic error capture.

    If the function raises, the error is logged and the fallback value is returned.

    Args:
        fn: The function to call.
        args: Positional arguments.
        kwargs: Keyword arguments.
        phase: Derivation step name.
        record_name: Name on the record, for log context.
        fallback: Value to return if fn raises.
        severity: Error severity level.

    Returns:
        The function's return value, or fallback if it raised.
    """
    kwargs = kwargs or {}
    try:
        return fn(*args, **kwargs)
    except Exception as e:
        log_component_error(
            phase=phase,
            error=e,
            record_name=record_name,
            context={
                "function": getattr(fn, "__name__", repr(fn)),
                "traceback": traceback.format_exc()[-500:],
            },
            severity=severity,
        )
        return fallback
