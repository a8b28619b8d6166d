import pytest

from modelhelper.casing import abbreviate
from modelhelper.file_source import FileEntitySource, load_file_entities

CUSTOMER = """\
name: Customer
schema: dbo
description: People who buy
rows: 1200
columns:
  Id:
    id: 1
    type: int
    primary: true
    identity: true
  Name:
    id: 2
    type: nvarchar
"""

ORDER = """\
name: OrderLine
schema: sales
rows: 5
columns:
  Id: {id: 1, type: int, primary: true}
  CustomerId:
    id: 2
    type: int
    references: {table: Customer, column: Id}
"""


@pytest.fixture
def entity_dir(tmp_path):
    (tmp_path / "b_order.yaml").write_text(ORDER, encoding="utf-8")
    (tmp_path / "a_customer.yaml").write_text(CUSTOMER, encoding="utf-8")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "ignored.yaml").write_text("name: Hidden\n", encoding="utf-8")
    return tmp_path


def test_load_file_entities_in_file_name_order(entity_dir):
    names = [entity.name for entity in load_file_entities(entity_dir)]
    assert names == ["Customer", "OrderLine"]


def test_load_file_entities_missing_directory_is_empty(tmp_path):
    assert load_file_entities(tmp_path / "absent") == []


def test_load_file_entities_invalid_yaml_raises(tmp_path):
    (tmp_path / "bad.yaml").write_text("name: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_file_entities(tmp_path)


def test_load_file_entities_non_mapping_raises(tmp_path):
    (tmp_path / "list.yaml").write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_file_entities(tmp_path)


def test_entity_lookup_ignores_case(entity_dir):
    entity = FileEntitySource(entity_dir).entity("customer")
    assert entity.name == "Customer"
    assert entity.alias == abbreviate("Customer")
    assert entity.column_count == len(entity.columns)


def test_entity_unknown_returns_none(entity_dir):
    assert FileEntitySource(entity_dir).entity("Nothing") is None


def test_entities_carry_relation_counts(entity_dir):
    by_name = {e.name: e for e in FileEntitySource(entity_dir).entities("")}
    customer, order = by_name["Customer"], by_name["OrderLine"]
    assert customer.child_relation_count == len(customer.child_relations) == 1
    assert customer.parent_relation_count == 0
    assert order.parent_relation_count == 1
    assert order.parent_relations[0].name == "Customer"
    assert order.alias == abbreviate("OrderLine")


def test_entities_from_names_follows_given_order(entity_dir):
    source = FileEntitySource(entity_dir)
    found = source.entities_from_names(["OrderLine", "Customer", "Missing"])
    assert [entity.name for entity in found] == ["OrderLine", "Customer"]


def test_entities_from_names_is_case_sensitive(entity_dir):
    assert FileEntitySource(entity_dir).entities_from_names(["customer"]) == []


def test_entities_from_column_lists_everything(entity_dir):
    source = FileEntitySource(entity_dir)
    assert source.entities_from_column("Id") == source.entities("")


def test_empty_source_has_no_entities(tmp_path):
    source = FileEntitySource(tmp_path / "absent")
    assert source.entities("") == []
    assert source.entity("Customer") is None