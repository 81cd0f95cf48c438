from .logging import reset_logging, switch_log_file

__all__ = ["reset_logging", "switch_log_file"]
