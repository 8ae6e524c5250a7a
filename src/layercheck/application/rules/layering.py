"""Standard layering rules for controller/service/repository services.

Classes are placed by naming convention (simple-name suffix), and the
controller tier must reach persistence only through services.
"""

from __future__ import annotations

from layercheck.domain.model.rule import Rule
from layercheck.domain.predicates import (
    all_of,
    has_simple_name_ending_with,
    is_class,
    not_reference_package,
    reside_in_package,
    resides_in_package,
)

CONTROLLER_PACKAGE = "**.controller.**"
SERVICE_PACKAGE = "**.service.**"
REPOSITORY_PACKAGE = "**.repository.**"


def suffix_resides_in(rule_id: str, suffix: str, pattern: str) -> Rule:
    """Build rule: classes named *<suffix> must reside in pattern.

    Args:
        rule_id: Rule identifier
        suffix: Simple-name suffix selecting the classes
        pattern: Package glob they must reside in

    Returns:
        Rule instance
    """
    return Rule(
        rule_id=rule_id,
        description=f"classes named '*{suffix}' reside in a package matching '{pattern}'",
        selector=all_of(is_class(), has_simple_name_ending_with(suffix)),
        constraint=reside_in_package(pattern),
    )


def package_isolated_from(rule_id: str, source: str, forbidden: str) -> Rule:
    """Build rule: units in source package reference nothing in forbidden package.

    Args:
        rule_id: Rule identifier
        source: Package glob of the constrained units
        forbidden: Package glob they must not reference

    Returns:
        Rule instance
    """
    return Rule(
        rule_id=rule_id,
        description=(
            f"units in packages matching '{source}' do not reference "
            f"units in packages matching '{forbidden}'"
        ),
        selector=resides_in_package(source),
        constraint=not_reference_package(forbidden),
    )


CONTROLLERS_RESIDE_IN_CONTROLLER_PACKAGE = suffix_resides_in(
    "controllers-reside-in-controller-package", "Controller", CONTROLLER_PACKAGE
)
SERVICES_RESIDE_IN_SERVICE_PACKAGE = suffix_resides_in(
    "services-reside-in-service-package", "Service", SERVICE_PACKAGE
)
REPOSITORIES_RESIDE_IN_REPOSITORY_PACKAGE = suffix_resides_in(
    "repositories-reside-in-repository-package", "Repository", REPOSITORY_PACKAGE
)
CONTROLLERS_DO_NOT_ACCESS_REPOSITORIES = package_isolated_from(
    "controllers-do-not-access-repositories", CONTROLLER_PACKAGE, REPOSITORY_PACKAGE
)

# Evaluated independently, reported in this order
LAYERING_RULES: tuple[Rule, ...] = (
    CONTROLLERS_RESIDE_IN_CONTROLLER_PACKAGE,
    SERVICES_RESIDE_IN_SERVICE_PACKAGE,
    REPOSITORIES_RESIDE_IN_REPOSITORY_PACKAGE,
    CONTROLLERS_DO_NOT_ACCESS_REPOSITORIES,
)
