"""Built-in rule sets."""

from layercheck.application.rules.layering import (
    CONTROLLER_PACKAGE,
    CONTROLLERS_DO_NOT_ACCESS_REPOSITORIES,
    CONTROLLERS_RESIDE_IN_CONTROLLER_PACKAGE,
    LAYERING_RULES,
    REPOSITORIES_RESIDE_IN_REPOSITORY_PACKAGE,
    REPOSITORY_PACKAGE,
    SERVICE_PACKAGE,
    SERVICES_RESIDE_IN_SERVICE_PACKAGE,
    package_isolated_from,
    suffix_resides_in,
)

__all__ = [
    "LAYERING_RULES",
    "CONTROLLERS_RESIDE_IN_CONTROLLER_PACKAGE",
    "SERVICES_RESIDE_IN_SERVICE_PACKAGE",
    "REPOSITORIES_RESIDE_IN_REPOSITORY_PACKAGE",
    "CONTROLLERS_DO_NOT_ACCESS_REPOSITORIES",
    "CONTROLLER_PACKAGE",
    "SERVICE_PACKAGE",
    "REPOSITORY_PACKAGE",
    "suffix_resides_in",
    "package_isolated_from",
]
