"""Health monitoring package."""

from semantic_memory.health.monitor import PerformanceMonitor

__all__ = ["PerformanceMonitor"]
