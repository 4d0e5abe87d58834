# tests/test_adapter.py
"""
Tests for the code generation adapter.

tier1 covers schema rewriting and class extraction on fixed source text;
tier2 runs datamodel-code-generator.
"""

from __future__ import annotations

import ast

import pytest

from asyncontract.client.adapter import CodeGeneratorAdapter, extract_type, to_library_schema
from asyncontract.client.settings import ClassStyle, ContainerStyle, ContractGeneratorSettings
from asyncontract.schema.nodes import (
    ORIGIN_IDENTITY,
    ORIGIN_NAMESPACE,
    ArraySchema,
    EnumSchema,
    ObjectSchema,
    PrimitiveSchema,
    ReferenceSchema,
)

GENERATED_MODULE = '''\
# generated by datamodel-codegen:
#   filename:  schema.json

from __future__ import annotations

import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field


class Customer(BaseModel):
    pass


class OrderCreated(BaseModel):
    model_config = ConfigDict(
        frozen=True,
    )
    order_id: Annotated[str, Field(description="Order id")]
    customer: Customer
    created_at: datetime.datetime
    note: Optional[str] = None
'''

ORDER_CREATED = ObjectSchema(
    title="OrderCreated",
    properties={
        "order_id": PrimitiveSchema(type="string", format="uuid"),
        "customer": ReferenceSchema(target="Customer"),
        "lines": ArraySchema(items=ReferenceSchema(target="OrderLine")),
        "parent": ReferenceSchema(target="OrderCreated", nullable=True),
    },
    required=["order_id", "customer", "lines"],
    extensions={ORIGIN_NAMESPACE: "shop.events", ORIGIN_IDENTITY: "shop.events.OrderCreated"},
)


@pytest.mark.tier1
class TestLibrarySchema:
    """to_library_schema()"""

    def test_drops_extensions(self):
        schema = to_library_schema("OrderCreated", ORDER_CREATED)

        assert ORIGIN_NAMESPACE not in schema
        assert ORIGIN_IDENTITY not in schema

    def test_references_become_placeholder_definitions(self):
        schema = to_library_schema("OrderCreated", ORDER_CREATED)

        assert schema["properties"]["customer"] == {"$ref": "#/definitions/Customer"}
        assert schema["properties"]["lines"]["items"] == {"$ref": "#/definitions/OrderLine"}
        assert list(schema["definitions"]) == ["Customer", "OrderLine"]
        assert schema["definitions"]["Customer"] == {"type": "object", "title": "Customer", "properties": {}}

    def test_self_reference_points_at_root(self):
        schema = to_library_schema("OrderCreated", ORDER_CREATED)

        assert schema["properties"]["parent"] == {"anyOf": [{"$ref": "#"}, {"type": "null"}]}
        assert "OrderCreated" not in schema["definitions"]

    def test_title_defaults_to_type_name(self):
        schema = to_library_schema("Blob", ObjectSchema(additional_properties=True))

        assert schema["title"] == "Blob"
        assert "definitions" not in schema


@pytest.mark.tier1
class TestExtractType:
    """extract_type()"""

    def test_keeps_only_requested_class(self):
        adapted = extract_type(GENERATED_MODULE, "OrderCreated")

        assert adapted.body.startswith("class OrderCreated(BaseModel):")
        assert adapted.body.endswith("note: Optional[str] = None")
        assert "class Customer" not in adapted.body
        assert adapted.placeholder is False

    def test_collects_imports_without_future(self):
        adapted = extract_type(GENERATED_MODULE, "OrderCreated")

        assert adapted.imports == ["datetime"]
        assert adapted.from_imports == {
            "typing": ["Annotated", "Optional"],
            "pydantic": ["BaseModel", "ConfigDict", "Field"],
        }

    def test_includes_decorators(self):
        source = "import dataclasses\n\n\n@dataclasses.dataclass(frozen=True)\nclass Point:\n    x: int\n"

        adapted = extract_type(source, "Point")

        assert adapted.body == "@dataclasses.dataclass(frozen=True)\nclass Point:\n    x: int"

    def test_missing_class_is_placeholder(self):
        adapted = extract_type(GENERATED_MODULE, "ShipOrder")

        assert adapted.placeholder is True
        assert adapted.body == "class ShipOrder(BaseModel):\n    pass"

    def test_unparseable_output_is_placeholder(self):
        adapted = extract_type("class (:\n", "ShipOrder")

        assert adapted.placeholder is True

    def test_value_style_placeholder_is_frozen(self):
        adapted = extract_type(GENERATED_MODULE, "ShipOrder", frozen=True)

        assert adapted.body == "class ShipOrder(BaseModel):\n    model_config = ConfigDict(frozen=True)"
        assert adapted.from_imports == {"pydantic": ["BaseModel", "ConfigDict"]}

    def test_frozen_placeholder_for_unparseable_output(self):
        adapted = extract_type("class (:\n", "ShipOrder", frozen=True)

        assert "frozen=True" in adapted.body
        assert adapted.placeholder is True


@pytest.mark.tier2
class TestCodeGeneratorAdapter:
    """Real library runs."""

    def test_object_with_reference(self):
        adapted = CodeGeneratorAdapter().adapt("OrderCreated", ORDER_CREATED)

        assert adapted.placeholder is False
        tree = ast.parse(adapted.body)
        assert [n.name for n in tree.body if isinstance(n, ast.ClassDef)] == ["OrderCreated"]
        assert "Customer" in adapted.body
        assert "OrderLine" in adapted.body

    def test_referenced_types_are_not_generated(self):
        adapted = CodeGeneratorAdapter().adapt("OrderCreated", ORDER_CREATED)

        assert "class Customer" not in adapted.body
        assert "class OrderLine" not in adapted.body

    def test_enum(self):
        node = EnumSchema(title="OrderStatus", values=["pending", "paid"])

        adapted = CodeGeneratorAdapter().adapt("OrderStatus", node)

        assert adapted.body.startswith("class OrderStatus(")
        assert "pending" in adapted.body
        assert "enum" in adapted.from_imports

    def test_value_style_is_frozen(self):
        settings = ContractGeneratorSettings(class_style=ClassStyle.VALUE)
        node = ObjectSchema(
            title="Address",
            properties={"city": PrimitiveSchema(type="string")},
            required=["city"],
        )

        adapted = CodeGeneratorAdapter(settings).adapt("Address", node)

        assert "frozen" in adapted.body

    def test_aliased_field(self):
        node = ObjectSchema(
            title="Address",
            properties={"postalCode": PrimitiveSchema(type="string")},
            required=["postalCode"],
        )

        adapted = CodeGeneratorAdapter().adapt("Address", node)

        assert "postalCode" in adapted.body


def dated(*formats: str) -> ObjectSchema:
    return ObjectSchema(
        title="Shipment",
        properties={f"value_{i}": PrimitiveSchema(type="string", format=f) for i, f in enumerate(formats)},
        required=[f"value_{i}" for i in range(len(formats))],
    )


@pytest.mark.tier2
class TestTypeMappings:
    """Settings that pick target types."""

    def test_default_date_class(self):
        adapted = CodeGeneratorAdapter().adapt("Shipment", dated("date"))

        assert "value_0: date" in adapted.body or "value_0: datetime.date" in adapted.body

    def test_past_date_class(self):
        settings = ContractGeneratorSettings(date_class="PastDate")

        adapted = CodeGeneratorAdapter(settings).adapt("Shipment", dated("date"))

        assert "PastDate" in adapted.body
        assert "PastDate" in adapted.from_imports["pydantic"]

    def test_aware_datetime_class(self):
        settings = ContractGeneratorSettings(datetime_class="AwareDatetime")

        adapted = CodeGeneratorAdapter(settings).adapt("Shipment", dated("date-time"))

        assert "AwareDatetime" in adapted.body

    def test_time_and_duration_mappings(self):
        adapted = CodeGeneratorAdapter().adapt("Shipment", dated("time", "duration"))

        assert "time" in adapted.body.split("value_0:")[1].splitlines()[0]
        assert "timedelta" in adapted.body

    @pytest.mark.parametrize(
        "style, sequence, mapping",
        [
            (ContainerStyle.STANDARD, "list[", "dict[str,"),
            (ContainerStyle.TYPING, "List[", "Dict[str,"),
            (ContainerStyle.ABSTRACT, "Sequence[", "Mapping[str,"),
        ],
    )
    def test_container_style_applies_to_arrays_and_maps(self, style, sequence, mapping):
        node = ObjectSchema(
            title="Basket",
            properties={
                "skus": ArraySchema(items=PrimitiveSchema(type="string")),
                "counts": ObjectSchema(additional_properties=PrimitiveSchema(type="integer")),
            },
            required=["skus", "counts"],
        )

        adapted = CodeGeneratorAdapter(ContractGeneratorSettings(container_style=style)).adapt("Basket", node)

        assert sequence in adapted.body
        assert mapping in adapted.body
