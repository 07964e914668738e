from pathlib import Path

import pytest

from burger_builder.burger import BurgerBuilder
from burger_builder.order_parser import (
    DEMO_ORDER,
    BurgerOrder,
    OrderError,
    parse_order,
    parse_order_text,
)


def test_parse_plain_yaml(tmp_path: Path) -> None:
    path = tmp_path / "order.yaml"
    path.write_text("bread: Rye\npatty: Beef\ncheese: true\nlettuce: false\n", encoding="utf-8")
    assert parse_order(path) == BurgerOrder(bread="Rye", patty="Beef", cheese=True, lettuce=False)


def test_parse_markdown_frontmatter(tmp_path: Path) -> None:
    path = tmp_path / "order.md"
    path.write_text("---\nburger:\n  bread: Brioche\n  lettuce: yes\n---\n# Tonight's order\n", encoding="utf-8")
    assert parse_order(path) == BurgerOrder(bread="Brioche", lettuce=True)


def test_frontmatter_closing_at_end_of_file() -> None:
    assert parse_order_text("---\npatty: Veg\n---", markdown=True) == BurgerOrder(patty="Veg")


def test_markdown_without_frontmatter_is_rejected() -> None:
    with pytest.raises(OrderError, match="frontmatter"):
        parse_order_text("# order\nbread: Rye\n", markdown=True)


def test_unterminated_frontmatter_is_rejected() -> None:
    with pytest.raises(OrderError, match="closing"):
        parse_order_text("---\nbread: Rye\n", markdown=True)


def test_yaml_document_marker_is_not_frontmatter() -> None:
    assert parse_order_text("---\nbread: Rye\n") == BurgerOrder(bread="Rye")


def test_missing_keys_stay_unset_and_unknown_keys_are_ignored() -> None:
    order = parse_order_text("patty: Veg\nsauce: ketchup\n")
    assert order == BurgerOrder(patty="Veg")


def test_empty_document_is_an_empty_order() -> None:
    assert parse_order_text("") == BurgerOrder()


def test_scalars_become_strings() -> None:
    assert parse_order_text("bread: 7\npatty: null\n") == BurgerOrder(bread="7")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("'yes'", True), ("'OFF'", False), ("1", True), ("0", False), ("'true'", True), ("false", False)],
)
def test_flag_spellings(raw: str, expected: bool) -> None:
    assert parse_order_text(f"cheese: {raw}\n").cheese is expected


def test_invalid_flag_is_rejected() -> None:
    with pytest.raises(OrderError, match="cheese"):
        parse_order_text("cheese: extra\n")


def test_non_scalar_text_field_is_rejected() -> None:
    with pytest.raises(OrderError, match="bread"):
        parse_order_text("bread: [a, b]\n")


def test_top_level_must_be_mapping() -> None:
    with pytest.raises(OrderError, match="mapping"):
        parse_order_text("- bread\n- patty\n")


def test_invalid_yaml_is_rejected() -> None:
    with pytest.raises(OrderError, match="YAML"):
        parse_order_text("bread: [unclosed\n")


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OrderError, match="does not exist"):
        parse_order(tmp_path / "nope.yaml")


def test_merged_prefers_set_fields_of_other() -> None:
    merged = DEMO_ORDER.merged(BurgerOrder(patty="Beef", cheese=False))
    assert merged == BurgerOrder(bread="Whole Wheat", patty="Beef", cheese=False, lettuce=True)


def test_apply_only_sets_specified_fields() -> None:
    builder = BurgerBuilder().set_bread("Rye").set_lettuce(True)
    BurgerOrder(patty="Veg").apply(builder)
    assert builder.build().describe() == "Burger with Rye, Veg, Lettuce"


def test_demo_order_builds_demo_burger() -> None:
    burger = DEMO_ORDER.apply(BurgerBuilder()).build()
    assert burger.describe() == "Burger with Whole Wheat, Veg, Cheese, Lettuce"


def test_empty_frontmatter_is_an_empty_order() -> None:
    assert parse_order_text("---\n---\n# title\n", markdown=True) == BurgerOrder()
    assert parse_order_text("---\n---", markdown=True) == BurgerOrder()


def test_frontmatter_stops_at_first_closing_delimiter() -> None:
    text = "---\nbread: Rye\n---\n# notes\n---\npatty: ignored\n"
    assert parse_order_text(text, markdown=True) == BurgerOrder(bread="Rye")


@pytest.mark.parametrize("value", ["0", "''", "false", "Rye"])
def test_burger_key_must_be_a_mapping(value: str) -> None:
    with pytest.raises(OrderError, match="`burger` must be an object/mapping"):
        parse_order_text(f"burger: {value}\n")


def test_null_burger_key_is_an_empty_order() -> None:
    assert parse_order_text("burger:\nbread: ignored\n") == BurgerOrder()


def test_directory_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(OrderError, match="Cannot read order file"):
        parse_order(tmp_path)


def test_invalid_utf8_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "order.yaml"
    path.write_bytes(b"bread: \xff\xfe\n")
    with pytest.raises(OrderError, match="Cannot read order file") as excinfo:
        parse_order(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
