from pr_checks.infrastructure.configuration.checks_settings import ChecksSettings

__all__ = ["ChecksSettings"]
