from pr_checks.infrastructure.resolution.default_checks import Platform, build_default_checks

__all__ = ["Platform", "build_default_checks"]
