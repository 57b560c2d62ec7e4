"""Tests for Container registration methods."""

from __future__ import annotations

from typing import Any, cast

import pytest

from wiregraph import Container, WiregraphInvalidArgumentError, WiregraphNoBindingFoundError


class DependencyA:
    pass


class Repository:
    pass


class SqlRepository(Repository):
    pass


class CachedSqlRepository(SqlRepository):
    pass


class TestRegisterType:
    def test_register_type_with_default_name(self, container: Container) -> None:
        container.register_type(DependencyA)

        assert container.is_registered(DependencyA)

    def test_register_type_with_custom_name(self, container: Container) -> None:
        container.register_type(DependencyA, "custom")

        assert container.is_registered(DependencyA, "custom")
        assert not container.is_registered(DependencyA)

    def test_register_type_maps_every_base_class(self, container: Container) -> None:
        container.register_type(CachedSqlRepository, "main")

        assert container.is_registered(SqlRepository, "main")
        assert container.is_registered(Repository, "main")
        assert container.resolve(Repository, "main") is container.resolve(SqlRepository, "main")

    def test_register_type_skips_builtin_bases(self, container: Container) -> None:
        class Payload(dict[str, int]):
            pass

        container.register_type(Payload)

        assert not container.is_registered(dict)
        assert not container.is_registered(object)

    def test_registration_is_lazy(self, container: Container) -> None:
        class NeedsMissing:
            def __init__(self, value: DependencyA) -> None:
                self.value = value

        container.register_type(NeedsMissing)

        assert container.is_registered(NeedsMissing)

    def test_re_registration_overwrites_silently(self, container: Container) -> None:
        container.register_type(DependencyA)
        container.register_type(DependencyA)

        assert isinstance(container.resolve(DependencyA), DependencyA)


class TestRegisterInstance:
    def test_register_instance_maps_capabilities(self, container: Container) -> None:
        repository = SqlRepository()
        container.register_instance(repository, "primary")

        assert container.resolve(SqlRepository, "primary") is repository
        assert container.resolve(Repository, "primary") is repository

    def test_register_instance_overwrites_previous_instance(self, container: Container) -> None:
        first = DependencyA()
        second = DependencyA()
        container.register_instance(first)
        container.register_instance(second)

        assert container.resolve(DependencyA) is second

    def test_register_instance_of_builtin_type(self, container: Container) -> None:
        container.register_instance("postgres://db", "dsn")

        assert container.resolve(str, "dsn") == "postgres://db"
        with pytest.raises(WiregraphNoBindingFoundError):
            container.resolve(object, "dsn")


class TestArgumentValidation:
    @pytest.mark.parametrize("name", ["", None, 42])
    def test_register_type_rejects_invalid_name(self, container: Container, name: Any) -> None:
        with pytest.raises(WiregraphInvalidArgumentError, match="non-empty string"):
            container.register_type(DependencyA, cast("str", name))

    @pytest.mark.parametrize("name", ["", None])
    def test_register_instance_rejects_invalid_name(
        self,
        container: Container,
        name: Any,
    ) -> None:
        with pytest.raises(WiregraphInvalidArgumentError):
            container.register_instance(DependencyA(), cast("str", name))

    @pytest.mark.parametrize("name", ["", None])
    def test_resolve_rejects_invalid_name(self, container: Container, name: Any) -> None:
        container.register_type(DependencyA)

        with pytest.raises(WiregraphInvalidArgumentError):
            container.resolve(DependencyA, cast("str", name))

    def test_register_type_rejects_none(self, container: Container) -> None:
        with pytest.raises(WiregraphInvalidArgumentError, match="cannot be None"):
            container.register_type(cast("Any", None))

    def test_register_type_rejects_non_class(self, container: Container) -> None:
        with pytest.raises(WiregraphInvalidArgumentError, match="Expected a class"):
            container.register_type(cast("Any", DependencyA()))

    def test_register_instance_rejects_none(self, container: Container) -> None:
        with pytest.raises(WiregraphInvalidArgumentError, match="cannot be None"):
            container.register_instance(None)

        with pytest.raises(WiregraphInvalidArgumentError):
            container.register_instance(None, "bean")

    def test_resolve_rejects_none(self, container: Container) -> None:
        with pytest.raises(WiregraphInvalidArgumentError):
            container.resolve(cast("Any", None))

        with pytest.raises(WiregraphInvalidArgumentError):
            container.resolve(cast("Any", None), "bean")

    def test_resolve_rejects_generic_alias(self, container: Container) -> None:
        with pytest.raises(WiregraphInvalidArgumentError):
            container.resolve(cast("Any", list[int]))

    def test_invalid_registration_leaves_registry_untouched(self, container: Container) -> None:
        with pytest.raises(WiregraphInvalidArgumentError):
            container.register_type(SqlRepository, "")

        assert not container.is_registered(Repository)
