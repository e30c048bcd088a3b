"""Tests for ModuleScanner traversal against in-memory module graphs."""

import abc
import logging
from typing import Protocol
from unittest.mock import MagicMock

import pytest

from gfind.container import Lifetime, ServiceCollection, ServiceCollectionPort, ServiceDescriptor
from gfind.kernel.exceptions import InvalidCapabilityError, MissingRootModuleError, UnnamedModuleError
from gfind.scanning.markers import exclude_from_search
from gfind.scanning.scanner import ModuleScanner
from gfind.scanning.settings import ScanSettings
from gfind.testing import FakeModule, InMemoryTypeCatalog


class Bar(abc.ABC):
    @abc.abstractmethod
    def run(self) -> None: ...


class Foo(Bar):
    def run(self) -> None:
        return None


class BazAbstract(Bar):
    @abc.abstractmethod
    def other(self) -> None: ...


@exclude_from_search
class Excluded(Bar):
    def run(self) -> None:
        return None


class Qux(Bar):
    def run(self) -> None:
        return None


class Quux(Bar):
    def run(self) -> None:
        return None


class Plugin(Protocol):
    def load(self) -> None: ...


class NotAnInterface:
    pass


QUIET = ScanSettings(console_output=False)


def make_scanner(services, *modules, settings=QUIET, **kwargs):
    catalog = InMemoryTypeCatalog(modules)
    return ModuleScanner(services, catalog=catalog, settings=settings, **kwargs), catalog


class TestScenarios:
    def test_concrete_registered_once_abstract_never(self):
        services = ServiceCollection()
        root = FakeModule("app", types=[Foo, BazAbstract])
        scanner, _ = make_scanner(services, root)

        scanner.scan(root, Bar, Lifetime.SCOPED)

        assert list(services) == [ServiceDescriptor(Bar, Foo, Lifetime.SCOPED)]

    def test_excluded_class_never_registered(self):
        services = ServiceCollection()
        root = FakeModule("app", types=[Foo, Excluded])
        scanner, _ = make_scanner(services, root)

        scanner.scan(root, Bar, Lifetime.SCOPED)

        assert services.implementations_of(Bar) == [Foo]

    def test_failed_reference_is_logged_and_scan_completes(self, caplog):
        caplog.set_level(logging.INFO)
        services = ServiceCollection()
        lib = FakeModule("app.lib", types=[Qux])
        root = FakeModule("app", types=[Foo], references=["app.missing", "app.lib"])
        scanner, _ = make_scanner(services, root, lib)

        scanner.scan(root, Bar, Lifetime.SCOPED)

        assert set(services.implementations_of(Bar)) == {Foo, Qux}
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert errors[0].getMessage() == "Error: Unable to load module app.missing"
        assert errors[0].reference == "app.missing"

    def test_reference_raising_any_error_is_logged_and_scan_completes(self, caplog):
        caplog.set_level(logging.INFO)
        services = ServiceCollection()
        lib = FakeModule("app.lib", types=[Qux])
        root = FakeModule("app", types=[Foo], references=["app.native", "app.lib"])
        scanner, catalog = make_scanner(services, root, lib)
        load = catalog.load

        def load_or_fail(reference):
            if reference == "app.native":
                raise OSError("library not available on this platform")
            return load(reference)

        catalog.load = load_or_fail

        scanner.scan(root, Bar, Lifetime.SCOPED)

        assert set(services.implementations_of(Bar)) == {Foo, Qux}
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert [r.reference for r in errors] == ["app.native"]
        assert errors[0].reason == "library not available on this platform"


class TestTraversal:
    def test_each_module_scanned_once_in_diamond_graph(self):
        services = ServiceCollection()
        shared = FakeModule("app.shared", types=[Quux])
        left = FakeModule("app.left", types=[Qux], references=["app.shared"])
        right = FakeModule("app.right", references=["app.shared", "app"])
        root = FakeModule("app", types=[Foo], references=["app.left", "app.right"])
        scanner, _ = make_scanner(services, root, left, right, shared)

        scanner.scan(root, Bar, Lifetime.TRANSIENT)

        assert sorted(cls.__name__ for cls in services.implementations_of(Bar)) == ["Foo", "Quux", "Qux"]

    def test_cycle_terminates(self):
        services = ServiceCollection()
        a = FakeModule("a", types=[Foo], references=["b"])
        b = FakeModule("b", types=[Qux], references=["a"])
        scanner, _ = make_scanner(services, a, b)

        scanner.scan(a, Bar)

        assert services.implementations_of(Bar) == [Foo, Qux]

    def test_depth_first_lifo_order(self):
        services = ServiceCollection()
        first = FakeModule("first", types=[Qux])
        second = FakeModule("second", types=[Quux])
        root = FakeModule("root", types=[Foo], references=["first", "second"])
        scanner, _ = make_scanner(services, root, first, second)

        scanner.scan(root, Bar)

        # Last pushed reference is scanned first
        assert services.implementations_of(Bar) == [Foo, Quux, Qux]

    def test_third_party_module_contributes_nothing_and_is_not_walked(self):
        services = ServiceCollection()
        behind = FakeModule("behind", types=[Quux])
        vendor = FakeModule(
            "vendor",
            types=[Qux],
            references=["behind"],
            location="/opt/venv/lib/python3.12/site-packages/vendor/__init__.py",
        )
        root = FakeModule("app", types=[Foo], references=["vendor"])
        scanner, catalog = make_scanner(services, root, vendor, behind)

        scanner.scan(root, Bar)

        assert services.implementations_of(Bar) == [Foo]
        assert "behind" not in catalog.load_attempts

    def test_module_without_location_is_treated_as_system(self):
        services = ServiceCollection()
        builtin = FakeModule("builtin_mod", types=[Qux], location=None)
        root = FakeModule("app", references=["builtin_mod"])
        scanner, _ = make_scanner(services, root, builtin)

        scanner.scan(root, Bar)

        assert len(services) == 0

    def test_follow_references_disabled_scans_root_only(self):
        services = ServiceCollection()
        lib = FakeModule("lib", types=[Qux])
        root = FakeModule("app", types=[Foo], references=["lib"])
        scanner, catalog = make_scanner(
            services, root, lib, settings=ScanSettings(console_output=False, follow_references=False)
        )

        scanner.scan(root, Bar)

        assert services.implementations_of(Bar) == [Foo]
        assert catalog.load_attempts == []

    def test_returns_registered_descriptors(self):
        services = ServiceCollection()
        root = FakeModule("app", types=[Foo, Qux])
        scanner, _ = make_scanner(services, root)

        result = scanner.scan(root, Bar, Lifetime.SINGLETON)

        assert result == [
            ServiceDescriptor(Bar, Foo, Lifetime.SINGLETON),
            ServiceDescriptor(Bar, Qux, Lifetime.SINGLETON),
        ]

    def test_separate_scans_have_separate_visited_sets(self):
        services = ServiceCollection()
        root = FakeModule("app", types=[Foo])
        scanner, _ = make_scanner(services, root)

        scanner.scan(root, Bar)
        scanner.scan(root, Bar)

        assert services.implementations_of(Bar) == [Foo, Foo]


class TestFailures:
    def test_non_interface_capability_fails_before_any_registration(self):
        services = MagicMock(spec=ServiceCollectionPort)
        root = FakeModule("app", types=[Foo])
        scanner, catalog = make_scanner(services, root)

        with pytest.raises(InvalidCapabilityError):
            scanner.scan(root, NotAnInterface)

        services.add_scoped.assert_not_called()
        services.add_transient.assert_not_called()
        services.add_singleton.assert_not_called()

    def test_missing_root(self):
        scanner, _ = make_scanner(ServiceCollection())
        with pytest.raises(MissingRootModuleError):
            scanner.scan(None, Bar)

    def test_unnamed_module_aborts(self):
        services = ServiceCollection()
        root = FakeModule("app", types=[Foo], references=["anon"])
        anon = FakeModule(None, types=[Qux])
        catalog = InMemoryTypeCatalog([root])
        catalog._modules["anon"] = anon
        scanner = ModuleScanner(services, catalog=catalog, settings=QUIET)

        with pytest.raises(UnnamedModuleError):
            scanner.scan(root, Bar)

    def test_unnamed_root_aborts_before_registration(self):
        services = ServiceCollection()
        scanner, _ = make_scanner(services)
        with pytest.raises(UnnamedModuleError):
            scanner.scan(FakeModule("", types=[Foo]), Bar)
        assert len(services) == 0


class TestOutput:
    def test_one_log_record_per_registration(self, caplog):
        caplog.set_level(logging.INFO)
        root = FakeModule("app", types=[Foo, Qux])
        scanner, _ = make_scanner(ServiceCollection(), root, logger=logging.getLogger("myapp.di"))

        scanner.scan(root, Bar)

        infos = [r for r in caplog.records if r.name == "myapp.di" and r.levelno == logging.INFO]
        assert len(infos) == 2
        assert [r.implementation for r in infos] == [f"{Foo.__module__}.Foo", f"{Qux.__module__}.Qux"]
        assert {r.lifetime for r in infos} == {"Scoped"}

    def test_console_lines_for_registrations_and_failures(self, capture_console):
        root = FakeModule("app", types=[Foo], references=["gone"])
        scanner, _ = make_scanner(
            ServiceCollection(), root, settings=ScanSettings(), console=capture_console
        )

        scanner.scan(root, Bar)

        lines = capture_console.file.getvalue().splitlines()
        assert len(lines) == 2
        assert "Registering service" in lines[0]
        assert lines[1] == "Error: Unable to load module gone"

    def test_protocol_capability(self):
        class LocalPlugin(Plugin):
            def load(self) -> None:
                return None

        services = ServiceCollection()
        root = FakeModule("plugins", types=[LocalPlugin, Foo])
        scanner, _ = make_scanner(services, root)

        scanner.scan(root, Plugin, Lifetime.TRANSIENT)

        assert list(services) == [ServiceDescriptor(Plugin, LocalPlugin, Lifetime.TRANSIENT)]
