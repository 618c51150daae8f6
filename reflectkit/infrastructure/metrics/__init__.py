from .jsonl import METRICS_LOGGER_NAME, MetricsClient, metrics

__all__ = ["METRICS_LOGGER_NAME", "MetricsClient", "metrics"]
