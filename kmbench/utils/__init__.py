from .logging import setup_logger, format_case_prefix

__all__ = ["setup_logger", "format_case_prefix"]
