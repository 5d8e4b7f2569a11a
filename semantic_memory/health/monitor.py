"""Performance and health monitoring for the orchestrator."""

# Share of the window kept after trimming
TRIM_RATIO = 0.5


class PerformanceMonitor:
    """Rolling response-time window, error counts and a 0-100 health score."""

    def __init__(
        self,
        slow_response_ms: int = 5000,
        response_window: int = 100,
        alert_error_rate: float = 0.20,
    ):
        self.slow_response_ms = slow_response_ms
        self.response_window = response_window
        self.alert_error_rate = alert_error_rate

        self.response_times: list[float] = []
        self.requests = 0
        self.errors = 0

    def record(self, duration_ms: float, error: bool = False) -> None:
        """Record one handled request."""
        self.requests += 1
        if error:
            self.errors += 1

        self.response_times.append(duration_ms)
        if len(self.response_times) > self.response_window:
            keep = int(self.response_window * TRIM_RATIO)
            self.response_times = self.response_times[-keep:]

    @property
    def average_response_ms(self) -> float:
        if not self.response_times:
            return 0.0
        return sum(self.response_times) / len(self.response_times)

    @property
    def error_rate(self) -> float:
        if self.requests == 0:
            return 0.0
        return self.errors / self.requests

    def system_health(self, availability: float = 1.0) -> int:
        """
        Health score, 0-100.

        Product of the success rate, a speed factor that falls linearly to
        zero at slow_response_ms, and module availability.
        """
        speed = max(0.0, 1 - self.average_response_ms / self.slow_response_ms)
        return round((1 - self.error_rate) * speed * availability * 100)

    def get_health(self, availability: float = 1.0, degraded_modules: list[str] = None) -> dict:
        """Get current health with alerts."""
        degraded_modules = degraded_modules or []
        health = self.system_health(availability)

        if health >= 80:
            status = "healthy"
        elif health >= 50:
            status = "degraded"
        else:
            status = "unhealthy"

        return {
            "system_health": health,
            "status": status,
            "requests": self.requests,
            "errors": self.errors,
            "error_rate": round(self.error_rate, 4),
            "average_response_time_ms": round(self.average_response_ms, 2),
            "availability": round(availability, 4),
            "alerts": self._generate_alerts(degraded_modules),
        }

    def _generate_alerts(self, degraded_modules: list[str]) -> list[dict]:
        """Generate alerts based on current state."""
        alerts = []

        # Only check if enough data
        if self.requests >= 10 and self.error_rate > self.alert_error_rate:
            alerts.append({
                "type": "high_error_rate",
                "severity": "warning",
                "message": f"Error rate is {self.error_rate:.0%} (threshold: {self.alert_error_rate:.0%})"
            })

        if self.response_times and self.average_response_ms > self.slow_response_ms / 2:
            alerts.append({
                "type": "slow_responses",
                "severity": "warning",
                "message": f"Average response time is {self.average_response_ms:.0f}ms (limit: {self.slow_response_ms}ms)"
            })

        if degraded_modules:
            alerts.append({
                "type": "degraded_modules",
                "severity": "info",
                "message": f"Running on fallbacks for: {', '.join(degraded_modules)}"
            })

        return alerts
