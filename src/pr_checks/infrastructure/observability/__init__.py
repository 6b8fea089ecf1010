from pr_checks.infrastructure.observability.logger_factory_service import configure_logging

__all__ = ["configure_logging"]
