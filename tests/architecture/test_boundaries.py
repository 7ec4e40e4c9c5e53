from pytest_archon import archrule


def test_domain_is_orm_free() -> None:
    """
    Request and result types must not depend on SQLAlchemy
    or on the persistence layer.
    """
    (
        archrule("domain_is_orm_free")
        .match("member_search.domain*")
        .should_not_import("sqlalchemy*")
        .should_not_import("member_search.persistence*")
        .check("member_search", only_direct_imports=True)
    )


def test_predicate_builder_is_orm_free() -> None:
    (
        archrule("predicates_are_orm_free")
        .match("member_search.predicates*")
        .should_not_import("sqlalchemy*")
        .should_not_import("member_search.persistence*")
        .check("member_search", only_direct_imports=True)
    )


def test_pagination_planner_is_orm_free() -> None:
    """
    The pagination planner decides from (offset, limit, n) alone;
    it must not reach for the ORM or the store executor.
    """
    (
        archrule("pagination_is_orm_free")
        .match("member_search.pagination")
        .should_not_import("sqlalchemy*")
        .should_not_import("member_search.persistence*")
        .should_not_import("member_search.engine")
        .check("member_search", only_direct_imports=True)
    )


def test_projection_is_orm_free() -> None:
    (
        archrule("projection_is_orm_free")
        .match("member_search.projection")
        .should_not_import("sqlalchemy*")
        .check("member_search", only_direct_imports=True)
    )


def test_persistence_does_not_import_engine_except_repository() -> None:
    """
    Only the repository composes the engine; the assembler and executor
    stay below it.
    """
    (
        archrule("persistence_layering")
        .match("member_search.persistence*")
        .exclude("member_search.persistence.repository")
        .should_not_import("member_search.engine")
        .should_not_import("member_search.persistence.repository")
        .check("member_search", only_direct_imports=True)
    )
