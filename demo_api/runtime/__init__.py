"""Runtime metrics sources consumed by health reporting."""

from .process_metrics import ProcessRuntimeMetrics

__all__ = ["ProcessRuntimeMetrics"]
