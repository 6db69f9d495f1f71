import logging
from typing import Protocol

logger = logging.getLogger(__name__)

Labels = dict[str, str] | None


class MetricsHook(Protocol):
    """
    Sink for conversion metrics.

    Durations are reported in milliseconds. The converter and locator call
    these methods and never depend on what an implementation does with them.
    """

    def record_latency(self, name: str, value_ms: float, labels: Labels = None) -> None: ...

    def increment(self, name: str, value: int = 1, labels: Labels = None) -> None: ...

    def record_gauge(self, name: str, value: float, labels: Labels = None) -> None: ...


class NoOpMetricsHook:
    """Default hook; discards everything."""

    def record_latency(self, name: str, value_ms: float, labels: Labels = None) -> None:
        return None

    def increment(self, name: str, value: int = 1, labels: Labels = None) -> None:
        return None

    def record_gauge(self, name: str, value: float, labels: Labels = None) -> None:
        return None


class LoggingMetricsHook:
    """Writes every metric as a DEBUG log line. Used by `convert --verbose`."""

    def __init__(self, level: int = logging.DEBUG) -> None:
        self._level = level

    def record_latency(self, name: str, value_ms: float, labels: Labels = None) -> None:
        self._emit(name, f"{value_ms:.1f}ms", labels)

    def increment(self, name: str, value: int = 1, labels: Labels = None) -> None:
        self._emit(name, f"+{value}", labels)

    def record_gauge(self, name: str, value: float, labels: Labels = None) -> None:
        self._emit(name, f"={value:g}", labels)

    def _emit(self, name: str, value: str, labels: Labels) -> None:
        suffix = ""
        if labels:
            suffix = " " + ",".join(f"{k}={v}" for k, v in sorted(labels.items()))
        logger.log(self._level, "metric %s %s%s", name, value, suffix)
