from .logging import LOGGER_NAME, action_extra, configure_logging, get_logger

__all__ = ["LOGGER_NAME", "action_extra", "configure_logging", "get_logger"]
