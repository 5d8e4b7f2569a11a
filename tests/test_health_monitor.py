# tests/test_health_monitor.py
"""Tests for the performance monitor."""

import pytest


def test_fresh_monitor_is_fully_healthy():
    from semantic_memory.health import PerformanceMonitor

    monitor = PerformanceMonitor()

    assert monitor.system_health() == 100
    assert monitor.get_health()["status"] == "healthy"


def test_health_formula():
    from semantic_memory.health import PerformanceMonitor

    monitor = PerformanceMonitor(slow_response_ms=1000)
    monitor.record(100)
    monitor.record(300, error=True)

    # (1 - 0.5) * (1 - 200/1000) * 1.0 * 100
    assert monitor.system_health() == 40


def test_availability_scales_health():
    from semantic_memory.health import PerformanceMonitor

    monitor = PerformanceMonitor()

    assert monitor.system_health(availability=0.75) == 75


def test_speed_factor_floors_at_zero():
    from semantic_memory.health import PerformanceMonitor

    monitor = PerformanceMonitor(slow_response_ms=100)
    monitor.record(500)

    assert monitor.system_health() == 0


def test_response_window_is_trimmed():
    from semantic_memory.health import PerformanceMonitor

    monitor = PerformanceMonitor(response_window=100)
    for i in range(101):
        monitor.record(float(i))

    assert len(monitor.response_times) == 50
    assert monitor.response_times[-1] == 100.0
    assert monitor.requests == 101


def test_high_error_rate_alert():
    from semantic_memory.health import PerformanceMonitor

    monitor = PerformanceMonitor()
    for i in range(10):
        monitor.record(1, error=i < 5)

    alerts = monitor.get_health()["alerts"]

    assert any(a["type"] == "high_error_rate" for a in alerts)


def test_no_error_alert_with_little_data():
    from semantic_memory.health import PerformanceMonitor

    monitor = PerformanceMonitor()
    monitor.record(1, error=True)

    assert monitor.get_health()["alerts"] == []


def test_slow_responses_alert():
    from semantic_memory.health import PerformanceMonitor

    monitor = PerformanceMonitor(slow_response_ms=1000)
    monitor.record(800)

    report = monitor.get_health()

    assert report["alerts"][0]["type"] == "slow_responses"
    assert report["status"] == "unhealthy"


def test_degraded_modules_alert():
    from semantic_memory.health import PerformanceMonitor

    report = PerformanceMonitor().get_health(availability=0.5, degraded_modules=["cluster_classifier"])

    assert report["status"] == "degraded"
    assert "cluster_classifier" in report["alerts"][0]["message"]
