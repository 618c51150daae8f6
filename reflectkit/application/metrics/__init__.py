from .logger import ResilientTimedRotatingFileHandler, configure_metrics_logger, release_metrics_logger

__all__ = ["ResilientTimedRotatingFileHandler", "configure_metrics_logger", "release_metrics_logger"]
