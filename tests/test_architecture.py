"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application
- Application services don't depend on adapters
- Adapters can depend on domain but not on application
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import anything outside domain models and the standard library."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("prim_transit.domain.models*")
        .should_not_import("prim_transit.adapters*")
        .should_not_import("prim_transit.application*")
        .should_not_import("prim_transit.domain.ports*")
        .should_not_import("prim_transit.domain.identifiers*")
        .may_import("prim_transit.domain.models*")
        .check("prim_transit")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("prim_transit.domain.ports*")
        .should_not_import("prim_transit.adapters*")
        .should_not_import("prim_transit.application*")
        .may_import("prim_transit.domain.ports*")
        .may_import("prim_transit.domain.models*")
        .check("prim_transit")
    )


def test_identifiers_only_depend_on_models() -> None:
    """Identifier resolution is pure and should not reach outside the domain."""
    (
        archrule("domain identifiers", comment="Identifiers should be pure domain logic")
        .match("prim_transit.domain.identifiers*")
        .should_not_import("prim_transit.adapters*")
        .should_not_import("prim_transit.application*")
        .should_not_import("prim_transit.domain.ports*")
        .may_import("prim_transit.domain.identifiers*")
        .may_import("prim_transit.domain.models*")
        .check("prim_transit")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("prim_transit.application*")
        .should_not_import("prim_transit.adapters*")
        .should_not_import("prim_transit.cli")
        .may_import("prim_transit.domain*")
        .may_import("prim_transit.application*")
        .check("prim_transit")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("prim_transit.adapters*")
        .should_not_import("prim_transit.application*")
        .may_import("prim_transit.domain*")
        .may_import("prim_transit.adapters*")
        .check("prim_transit", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("prim_transit.domain*")
        .should_not_import("prim_transit.adapters*")
        .should_not_import("prim_transit.application*")
        .should_not_import("prim_transit.cli")
        .may_import("prim_transit.domain*")
        .check("prim_transit", only_direct_imports=True)
    )
