# tests/test_discovery.py
"""
Tests for pattern-based message discovery.
"""

from __future__ import annotations

import pytest

from asyncontract.catalog import TypeKind
from asyncontract.core.diagnostics import CLASSIFICATION_CONFLICT, UNMATCHED_PATTERN
from asyncontract.server.discovery import DiscoveryPattern, MessageKind, discover, parse_pattern
from conftest import make_catalog, make_type

pytestmark = pytest.mark.tier1

EVENT = MessageKind.EVENT
COMMAND = MessageKind.COMMAND


def names(result):
    return [t.name for t in result.types]


class TestPatternParsing:
    """PATTERN[=KIND] strings."""

    def test_default_kind_is_event(self):
        assert parse_pattern("shop.events.**") == DiscoveryPattern("shop.events.**", EVENT)

    def test_command_is_case_insensitive(self):
        assert parse_pattern("shop.commands.*=Command").kind is COMMAND
        assert parse_pattern(" shop.commands.* = COMMAND ").pattern == "shop.commands.*"

    def test_unknown_kind_is_event(self):
        assert parse_pattern("ShipOrder=query").kind is EVENT


class TestWildcards:
    """Namespace wildcards over the shopdemo catalog."""

    def test_recursive_wildcard_excludes_abstract_and_private(self, shop_catalog):
        result = discover(shop_catalog, [DiscoveryPattern("shopdemo.orders.**")])

        assert names(result) == ["ShipOrder", "CancelOrder", "OrderCreated"]
        assert result.diagnostics == []

    def test_exact_wildcard_does_not_descend(self, shop_catalog):
        result = discover(shop_catalog, [DiscoveryPattern("shopdemo.orders.events.*")])

        assert names(result) == ["OrderCreated"]

    def test_exact_wildcard_on_package_without_types(self, shop_catalog):
        result = discover(shop_catalog, [DiscoveryPattern("shopdemo.orders.*")])

        assert len(result) == 0
        assert [d.code for d in result.diagnostics] == [UNMATCHED_PATTERN]
        assert result.diagnostics[0].subject == "shopdemo.orders.*"

    def test_wildcards_skip_enums(self, shop_catalog):
        result = discover(shop_catalog, [DiscoveryPattern("shopdemo.models.*")])

        assert names(result) == ["Address", "Customer", "OrderLine"]

    def test_namespace_prefix_is_segment_aware(self):
        catalog = make_catalog(
            make_type("A", "Orders.Events"),
            make_type("B", "Orders.EventsArchive"),
        )

        result = discover(catalog, [DiscoveryPattern("Orders.Events.**")])

        assert names(result) == ["A"]

    def test_referenced_types_are_never_candidates(self):
        catalog = make_catalog(
            make_type("Own", "Shop.Events"),
            make_type("Borrowed", "Shop.Events", scanned=False),
        )

        assert names(discover(catalog, [DiscoveryPattern("Shop.Events.**")])) == ["Own"]


class TestPolymorphicBases:
    """Interface and base-class patterns expand to implementers."""

    def test_abstract_base_is_excluded_from_namespace_match(self):
        catalog = make_catalog(
            make_type("OrderEventBase", "Orders.Events", kind=TypeKind.ABSTRACT),
            make_type("OrderCreated", "Orders.Events", bases=["Orders.Events.OrderEventBase"]),
        )

        result = discover(catalog, [DiscoveryPattern("Orders.Events.**", EVENT)])

        assert result.kinds() == {"Orders.Events.OrderCreated": EVENT}

    def test_interface_expands_to_implementers_only(self):
        catalog = make_catalog(
            make_type("ICustomerEvent", "Orders", kind=TypeKind.INTERFACE),
            make_type("CustomerCreated", "Orders", bases=["Orders.ICustomerEvent"]),
            make_type("CustomerUpdated", "Orders", bases=["Orders.ICustomerEvent"]),
            make_type("OtherEvent", "Orders"),
        )

        result = discover(catalog, [DiscoveryPattern("Orders.ICustomerEvent", EVENT)])

        assert names(result) == ["CustomerCreated", "CustomerUpdated"]

    def test_protocol_in_module(self, shop_catalog):
        result = discover(shop_catalog, [DiscoveryPattern("CustomerEvent")])

        assert names(result) == ["CustomerCreated", "CustomerUpdated"]

    def test_abc_base_in_module(self, shop_catalog):
        result = discover(shop_catalog, [DiscoveryPattern("shopdemo.orders.events.OrderEventBase")])

        assert names(result) == ["OrderCreated"]

    def test_concrete_base_with_subtypes(self, shop_catalog):
        result = discover(shop_catalog, [DiscoveryPattern("StockEvent")])

        assert names(result) == ["StockReserved", "StockReleased"]

    def test_transitive_subtypes(self):
        catalog = make_catalog(
            make_type("Base", "S", kind=TypeKind.ABSTRACT),
            make_type("Middle", "S", kind=TypeKind.ABSTRACT, bases=["S.Base"]),
            make_type("Leaf", "S", bases=["S.Middle"]),
        )

        assert names(discover(catalog, [DiscoveryPattern("S.Base")])) == ["Leaf"]

    def test_concrete_base_with_only_private_subtypes_is_excluded(self):
        catalog = make_catalog(
            make_type("Notice", "S"),
            make_type("_InternalNotice", "S", bases=["S.Notice"], public=False),
        )

        result = discover(catalog, [DiscoveryPattern("S.Notice")])

        assert len(result) == 0
        assert result.diagnostics[0].code == UNMATCHED_PATTERN

    def test_interface_without_implementers_is_unmatched(self):
        catalog = make_catalog(make_type("ILonely", "S", kind=TypeKind.INTERFACE))

        result = discover(catalog, [DiscoveryPattern("ILonely")])

        assert len(result) == 0
        assert result.diagnostics[0].code == UNMATCHED_PATTERN


class TestConcreteReferences:
    """Exact type references."""

    def test_by_identity(self, shop_catalog):
        result = discover(shop_catalog, [DiscoveryPattern("shopdemo.orders.commands.ShipOrder", COMMAND)])

        assert result.kinds() == {"shopdemo.orders.commands.ShipOrder": COMMAND}

    def test_by_simple_name(self, shop_catalog):
        assert names(discover(shop_catalog, [DiscoveryPattern("OtherEvent")])) == ["OtherEvent"]

    def test_unknown_name_is_unmatched(self, shop_catalog):
        result = discover(shop_catalog, [DiscoveryPattern("NoSuchType")])

        assert len(result) == 0
        assert result.diagnostics[0].code == UNMATCHED_PATTERN

    def test_referenced_only_type_is_unmatched(self):
        catalog = make_catalog(make_type("OrderCreated", "Shop"), make_type("Customer", "Lib", scanned=False))

        result = discover(catalog, [DiscoveryPattern("Lib.Customer")])

        assert len(result) == 0


class TestClassification:
    """First claim wins; conflicts are reported."""

    def test_events_and_commands(self, shop_catalog):
        result = discover(
            shop_catalog,
            [
                DiscoveryPattern("shopdemo.orders.events.*", EVENT),
                DiscoveryPattern("shopdemo.orders.commands.*", COMMAND),
            ],
        )

        assert result.kinds() == {
            "shopdemo.orders.events.OrderCreated": EVENT,
            "shopdemo.orders.commands.ShipOrder": COMMAND,
            "shopdemo.orders.commands.CancelOrder": COMMAND,
        }

    def test_conflict_keeps_first_classification(self, shop_catalog):
        result = discover(
            shop_catalog,
            [
                DiscoveryPattern("ShipOrder", COMMAND),
                DiscoveryPattern("shopdemo.orders.**", EVENT),
            ],
        )

        assert result.kinds()["shopdemo.orders.commands.ShipOrder"] is COMMAND
        assert names(result) == ["ShipOrder", "CancelOrder", "OrderCreated"]
        conflicts = [d for d in result.diagnostics if d.code == CLASSIFICATION_CONFLICT]
        assert [d.subject for d in conflicts] == ["shopdemo.orders.commands.ShipOrder"]

    def test_same_classification_twice_is_silent(self, shop_catalog):
        result = discover(
            shop_catalog,
            [DiscoveryPattern("OrderCreated"), DiscoveryPattern("shopdemo.orders.events.*")],
        )

        assert names(result) == ["OrderCreated"]
        assert result.diagnostics == []

    def test_no_patterns(self, shop_catalog):
        result = discover(shop_catalog, [])

        assert len(result) == 0
        assert result.diagnostics == []
