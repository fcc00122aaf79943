"""Unit tests for schema derivation."""

import logging
from typing import Annotated, Dict, List, Mapping, OrderedDict

import pytest

from steer_schema import (
    Description,
    JsonArraySchema,
    JsonBooleanSchema,
    JsonEnumSchema,
    JsonIntegerSchema,
    JsonNumberSchema,
    JsonObjectSchema,
    JsonStringSchema,
    SchemaDepthError,
    SchemaSettings,
    UnsupportedTypeError,
    json_object_schema_from,
    json_schema_element_from,
    schema_from_annotation,
)
from tests.helpers.local_types import make_cart_type
from tests.helpers.sample_types import (
    Address,
    Color,
    Customer,
    Loose,
    Node,
    Order,
    Person,
    Priority,
    Shapes,
)


class TestPrimitiveDerivation:
    """Test primitive dispatch."""

    @pytest.mark.parametrize("cls,expected", [
        (str, JsonStringSchema),
        (int, JsonIntegerSchema),
        (float, JsonNumberSchema),
        (bool, JsonBooleanSchema),
    ])
    def test_primitives(self, cls, expected):
        node = json_schema_element_from(cls)
        assert type(node) is expected
        assert node.description is None

    def test_explicit_description_kept(self):
        assert json_schema_element_from(int, None, "count").description == "count"


class TestEnumDerivation:
    """Test enum dispatch."""

    def test_enum_values_in_order(self):
        node = json_schema_element_from(Color)
        assert isinstance(node, JsonEnumSchema)
        assert node.enum_values == ("RED", "GREEN", "BLUE")

    def test_str_enum_is_enum_not_string(self):
        node = json_schema_element_from(Priority)
        assert isinstance(node, JsonEnumSchema)
        assert node.description == "Shipping priority"

    def test_explicit_description_wins(self):
        node = json_schema_element_from(Priority, None, "explicit")
        assert node.description == "explicit"


class TestArrayDerivation:
    """Test tuple and collection dispatch."""

    def test_list_of_strings(self):
        node = schema_from_annotation(List[str])
        assert isinstance(node, JsonArraySchema)
        assert isinstance(node.items, JsonStringSchema)

    def test_array_description_on_array_not_items(self):
        node = schema_from_annotation(Annotated[List[int], Description("ids")])
        assert node.description == "ids"
        assert node.items.description is None

    def test_shapes(self, default_settings):
        schema = json_object_schema_from(Shapes, settings=default_settings)
        props = schema.properties
        assert isinstance(props["scores"].items, JsonNumberSchema)
        assert isinstance(props["pair"].items, JsonIntegerSchema)
        assert isinstance(props["labels"].items, JsonStringSchema)
        assert isinstance(props["frozen"].items, JsonIntegerSchema)
        assert isinstance(props["history"].items, JsonStringSchema)
        assert isinstance(props["matrix"].items, JsonArraySchema)
        assert isinstance(props["matrix"].items.items, JsonIntegerSchema)
        assert isinstance(props["people"].items, JsonObjectSchema)
        assert props["people"].items.required == ("name", "age")


class TestObjectDerivation:
    """Test object derivation."""

    def test_person(self):
        schema = json_schema_element_from(Person)
        assert isinstance(schema, JsonObjectSchema)
        assert list(schema.properties) == ["name", "age"]
        assert schema.required == ("name", "age")
        assert schema.additional_properties is False
        assert schema.description is None

    def test_type_description(self):
        assert json_object_schema_from(Address).description == "A postal address"

    def test_explicit_description_wins_over_type(self):
        assert json_object_schema_from(Address, "Delivery address").description == "Delivery address"

    def test_member_description_reaches_property(self):
        schema = json_object_schema_from(Address)
        assert schema.properties["street"].description == "Street and house number"
        assert isinstance(schema.properties["zip_code"], JsonStringSchema)
        assert schema.properties["zip_code"].description == "Postal code"

    def test_nested(self):
        schema = json_object_schema_from(Customer)
        props = schema.properties
        assert isinstance(props["id"], JsonStringSchema)
        assert isinstance(props["balance"], JsonNumberSchema)
        assert isinstance(props["active"], JsonBooleanSchema)
        assert isinstance(props["favourite"], JsonEnumSchema)
        assert isinstance(props["address"], JsonObjectSchema)
        assert props["address"].description == "A postal address"
        assert "_internal" not in props
        assert "secret" not in props
        assert "REGISTRY" not in props

    def test_pydantic_model(self):
        schema = json_object_schema_from(Order)
        assert schema.required == ("order_id", "quantity", "notes", "level")
        assert schema.description is None
        assert schema.properties["level"].enum_values == ("DEBUG", "INFO")

    def test_empty_class_is_empty_object(self):
        class Marker:
            pass

        schema = json_object_schema_from(Marker)
        assert dict(schema.properties) == {}
        assert schema.required == ()


class TestUnknownTypes:
    """Test the unknown-type policy."""

    def test_string_fallback(self, default_settings, caplog):
        with caplog.at_level(logging.WARNING, logger="steer_schema.derivation"):
            schema = json_object_schema_from(Loose, settings=default_settings)
        assert isinstance(schema.properties["anything"], JsonStringSchema)
        assert isinstance(schema.properties["bare"].items, JsonStringSchema)
        assert isinstance(schema.properties["mixed"].items, JsonStringSchema)
        assert "Falling back to string schema" in caplog.text

    @pytest.mark.parametrize("annotation", [Dict[str, int], dict, Mapping[str, str], OrderedDict[str, int]])
    def test_mapping_falls_back_to_string(self, annotation, default_settings):
        schema = schema_from_annotation(annotation, "lookup", settings=default_settings)
        assert isinstance(schema, JsonStringSchema)
        assert schema.description == "lookup"

    def test_mapping_member_falls_back(self, default_settings):
        schema = json_object_schema_from(Loose, settings=default_settings)
        assert isinstance(schema.properties["mapping"], JsonStringSchema)

    def test_mapping_error_policy(self, strict_settings):
        with pytest.raises(UnsupportedTypeError, match="no single element type"):
            schema_from_annotation(Dict[str, int], settings=strict_settings)

    def test_unresolved_local_types_fall_back(self, default_settings, caplog):
        cart = make_cart_type()
        with caplog.at_level(logging.WARNING, logger="steer_schema.derivation"):
            schema = json_object_schema_from(cart, settings=default_settings)
        assert list(schema.properties) == ["lines", "total"]
        assert isinstance(schema.properties["lines"], JsonStringSchema)
        assert isinstance(schema.properties["total"], JsonNumberSchema)
        assert "Unresolved member annotation" in caplog.text
        assert "member=lines" in caplog.text

    def test_unresolved_local_types_error_policy(self, strict_settings):
        with pytest.raises(UnsupportedTypeError):
            json_object_schema_from(make_cart_type(), settings=strict_settings)

    def test_error_policy(self, strict_settings):
        with pytest.raises(UnsupportedTypeError, match="no single element type"):
            schema_from_annotation(list, settings=strict_settings)

    def test_error_policy_on_non_class(self, strict_settings):
        with pytest.raises(UnsupportedTypeError):
            json_object_schema_from(Loose, settings=strict_settings)


class TestDepthLimit:
    """Test recursion guard for self-referential types."""

    def test_self_referential_type(self):
        with pytest.raises(SchemaDepthError, match="max_depth=5"):
            json_object_schema_from(Node, settings=SchemaSettings(max_depth=5))

    def test_depth_within_limit(self):
        schema = json_object_schema_from(Customer, settings=SchemaSettings(max_depth=2))
        assert isinstance(schema.properties["address"], JsonObjectSchema)
