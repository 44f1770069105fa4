"""Tests for tables, fields, indexes, enums, refs, endpoints and table groups."""
import importlib

import pytest

from helpers import raw_endpoint, raw_enum, raw_field, raw_ref, raw_table, token
from model_structure import Database, ErrorKind, SemanticError


def build_error(bundle: dict) -> SemanticError:
    with pytest.raises(SemanticError) as exc_info:
        Database(bundle)
    return exc_info.value


class TestTable:
    def test_table_without_fields_is_accepted(self) -> None:
        database = Database({"tables": [{"name": "empty"}]})

        assert database.schemas[0].tables[0].fields == []

    def test_null_collections_are_empty(self) -> None:
        database = Database({"tables": [{"name": "t", "fields": None, "indexes": None, "tags": None}]})

        table = database.schemas[0].tables[0]
        assert (table.fields, table.indexes, table.tags) == ([], [], [])

    def test_index_with_null_columns(self) -> None:
        database = Database({"tables": [raw_table("t", indexes=[{"name": "i", "columns": None}])]})

        assert database.schemas[0].tables[0].indexes[0].columns == []

    def test_duplicate_field(self) -> None:
        error = build_error({"tables": [raw_table("t", [raw_field("id"), raw_field("id", token=token(4, 3))])]})

        assert error.kind == ErrorKind.DUPLICATE_FIELD_NAME
        assert error.message == 'Field "id" existed in table "t"'
        assert str(error) == 'Line 4:3 - Field "id" existed in table "t"'

    def test_field_requires_name_and_type(self) -> None:
        assert build_error({"tables": [raw_table("t", [{"type": {"type_name": "int"}}])]}).kind == ErrorKind.INVALID_ELEMENT
        error = build_error({"tables": [raw_table("t", [{"name": "id"}])]})
        assert error.message == "Field must have a type"

    def test_field_attributes(self, ecommerce) -> None:
        users = ecommerce.find_table({"name": "users"})
        email = users.find_field("email")

        assert (email.unique, email.not_null, email.pk) == (True, True, None)
        assert email.type_name == "varchar"
        assert email.type_schema_name is None
        assert email.table is users
        assert users.find_field("id").increment is True

    def test_header_color_and_alias(self) -> None:
        database = Database({"tables": [raw_table("t", alias="T", headerColor="#fff")]})

        exported = database.export()["schemas"][0]["tables"][0]
        assert (exported["alias"], exported["headerColor"]) == ("T", "#fff")


class TestIndex:
    def test_columns_must_exist(self) -> None:
        table = raw_table("t", indexes=[{"columns": [{"type": "column", "value": "missing"}]}], schema="s")

        error = build_error({"tables": [table]})

        assert error.kind == ErrorKind.MISSING_FIELD
        assert error.message == 'Column "missing" does not exist in table "s"."t"'

    def test_expression_columns_are_not_checked(self) -> None:
        table = raw_table("t", indexes=[{"columns": [{"type": "expression", "value": "lower(name)"}]}])

        index = Database({"tables": [table]}).schemas[0].tables[0].indexes[0]

        assert index.columns[0].type == "expression"
        assert index.columns[0].index is index

    def test_composite_pk_index(self, ecommerce) -> None:
        items = ecommerce.find_table({"name": "order_items"})
        index = items.indexes[0]

        assert index.pk is True
        assert [c.value for c in index.columns] == ["order_id", "product_id"]
        assert index.table is items


class TestEnum:
    def test_values(self, ecommerce) -> None:
        enum = ecommerce.lookup_schema("public").find_enum("order_status")

        assert [v.name for v in enum.values] == ["created", "shipped", "delivered"]
        assert enum.values[2].note == "final"
        assert enum.values[0].enum is enum

    def test_duplicate_value(self) -> None:
        error = build_error({"enums": [raw_enum("status", ["on", "on"], schema="core")]})

        assert error.kind == ErrorKind.DUPLICATE_ENUM_VALUE
        assert error.message == 'Enum value "on" existed in enum "core"."status"'

    def test_enum_requires_name(self) -> None:
        assert build_error({"enums": [{"values": []}]}).kind == ErrorKind.INVALID_ELEMENT

    def test_value_requires_name(self) -> None:
        assert build_error({"enums": [{"name": "e", "values": [{}]}]}).message == "Enum value must have a name"

    def test_null_values_are_empty(self) -> None:
        database = Database({"enums": [{"name": "e", "values": None}]})

        assert database.schemas[0].enums[0].values == []


class TestRefAndEndpoints:
    def _tables(self) -> list:
        return [
            raw_table("users"),
            raw_table("posts", [raw_field("id", pk=True), raw_field("user_id"), raw_field("editor_id")]),
        ]

    def test_endpoints_link_fields(self, ecommerce) -> None:
        ref = ecommerce.lookup_schema("public").refs[0]
        left, right = ref.endpoints

        assert ref.name == "orders_user"
        assert ref.on_delete == "cascade"
        assert [f.name for f in left.fields] == ["user_id"]
        assert [f.name for f in right.fields] == ["id"]
        assert right.fields[0].endpoints == [right]
        assert left.ref is ref

    def test_empty_field_names_fall_back_to_pk_field(self, ecommerce) -> None:
        ref = ecommerce.lookup_schema("public").refs[1]

        assert [f.name for f in ref.endpoints[1].fields] == ["id"]
        assert ref.endpoints[1].field_names == []

    def test_empty_field_names_fall_back_to_pk_index(self) -> None:
        items = raw_table("items", [raw_field("a"), raw_field("b")],
                          indexes=[{"pk": True, "columns": [{"type": "column", "value": "a"},
                                                            {"type": "column", "value": "b"}]}])
        notes = raw_table("notes", [raw_field("id", pk=True), raw_field("item_a"), raw_field("item_b")])
        ref = raw_ref(raw_endpoint("notes", ["item_a", "item_b"], "*"), raw_endpoint("items", []))

        database = Database({"tables": [items, notes], "refs": [ref]})

        endpoint = database.schemas[0].refs[0].endpoints[1]
        assert [f.name for f in endpoint.fields] == ["a", "b"]

    def test_missing_key(self) -> None:
        tables = [raw_table("a", [raw_field("x")]), raw_table("b")]
        error = build_error({"tables": tables, "refs": [raw_ref(raw_endpoint("b", ["id"]), raw_endpoint("a", []))]})

        assert error.kind == ErrorKind.MISSING_KEY

    def test_missing_table(self) -> None:
        error = build_error({"tables": self._tables(),
                             "refs": [raw_ref(raw_endpoint("posts", ["user_id"]), raw_endpoint("ghosts", ["id"]))]})

        assert error.kind == ErrorKind.MISSING_TABLE
        assert error.message == 'Can\'t find table "ghosts"'

    def test_missing_field(self) -> None:
        error = build_error({"tables": self._tables(),
                             "refs": [raw_ref(raw_endpoint("posts", ["author_id"]), raw_endpoint("users", ["id"]))]})

        assert error.kind == ErrorKind.MISSING_FIELD

    def test_same_endpoints(self) -> None:
        error = build_error({"tables": self._tables(),
                             "refs": [raw_ref(raw_endpoint("users", ["id"]), raw_endpoint("users", ["id"]))]})

        assert (error.kind, error.message) == (ErrorKind.INVALID_REF, "Two endpoints are the same")

    def test_unequal_field_count(self) -> None:
        ref = raw_ref(raw_endpoint("posts", ["user_id", "editor_id"]), raw_endpoint("users", ["id"]))

        assert build_error({"tables": self._tables(), "refs": [ref]}).kind == ErrorKind.INVALID_REF

    def test_exactly_two_endpoints(self) -> None:
        error = build_error({"tables": self._tables(), "refs": [{"endpoints": [raw_endpoint("users", ["id"])]}]})

        assert error.kind == ErrorKind.INVALID_REF
        null_error = build_error({"tables": self._tables(), "refs": [{"endpoints": None}]})
        assert null_error.message == "Reference must have exactly two endpoints"

    def test_ref_in_named_schema_resolves_default_schema_tables(self) -> None:
        ref = raw_ref(raw_endpoint("posts", ["user_id"], schema="public"), raw_endpoint("users", ["id"]),
                      schema="links")
        database = Database({"tables": [dict(t, schemaName="public") for t in self._tables()], "refs": [ref]})

        assert database.has_default_schema is True
        assert len(database.lookup_schema("links").refs) == 1


class TestTableGroup:
    def test_members(self, ecommerce) -> None:
        schema = ecommerce.lookup_schema("public")
        group = schema.table_groups[0]

        assert [t.name for t in group.tables] == ["orders", "order_items"]
        assert schema.find_table("orders").group is group
        assert schema.find_table("users").group is None
        assert group.export()["tables"] == [
            {"tableName": "orders", "schemaName": "public"},
            {"tableName": "order_items", "schemaName": "public"},
        ]

    def test_unknown_table(self) -> None:
        error = build_error({"tables": [raw_table("a")],
                             "tableGroups": [{"name": "g", "tables": [{"name": "b", "schemaName": "public"}]}]})

        assert error.kind == ErrorKind.MISSING_TABLE

    def test_unknown_schema(self) -> None:
        error = build_error({"tables": [raw_table("a")],
                             "tableGroups": [{"name": "g", "tables": [{"name": "a", "schemaName": "ghost"}]}]})

        assert error.kind == ErrorKind.MISSING_SCHEMA

    def test_table_listed_twice(self) -> None:
        error = build_error({"tables": [raw_table("a")],
                             "tableGroups": [{"name": "g", "tables": [{"name": "a"}, {"name": "a"}]}]})

        assert error.kind == ErrorKind.TABLE_GROUP_CONFLICT

    def test_table_in_two_groups(self) -> None:
        error = build_error({"tables": [raw_table("a")],
                             "tableGroups": [{"name": "g1", "tables": [{"name": "a"}]},
                                             {"name": "g2", "tables": [{"name": "a"}]}]})

        assert error.kind == ErrorKind.TABLE_GROUP_CONFLICT
        assert error.message == 'Table "a" is already in group "g1"'

    def test_null_tables_make_an_empty_group(self) -> None:
        database = Database({"tableGroups": [{"name": "g", "tables": None}]})

        assert database.schemas[0].table_groups[0].tables == []


@pytest.mark.parametrize("module", [
    "table", "field", "tag", "ref", "endpoint", "indexes", "index_column",
    "enum_value", "table_group", "enums", "utils",
])
def test_element_modules_are_documented(module) -> None:
    assert importlib.import_module(f"model_structure.{module}").__doc__
