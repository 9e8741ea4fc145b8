"""
Tests for the product catalog and menu resolution.
"""

from urllib.parse import urlparse

import pytest
from pydantic import ValidationError

from installer_cli.exceptions import InvalidSelectionError
from installer_cli.models.catalog import (
    CATALOG,
    Action,
    Product,
    all_products,
    get_product,
    parse_action,
    product_menu_labels,
    resolve_selection,
)


class TestCatalogEntries:
    @pytest.mark.parametrize("key", [1, 2, 3])
    def test_lookup_returns_complete_product(self, key):
        product = get_product(key)
        assert product.key == key
        assert product.name
        assert product.output_file_name
        parsed = urlparse(product.url)
        assert parsed.scheme == "https"
        assert parsed.netloc

    def test_unknown_key(self):
        with pytest.raises(InvalidSelectionError):
            get_product(7)

    def test_all_products_in_declared_order(self):
        assert [p.key for p in all_products()] == [1, 2, 3]

    def test_exactly_one_server(self):
        servers = [p for p in CATALOG if p.is_server]
        assert [p.name for p in servers] == ["EzServer"]

    def test_products_are_immutable(self):
        with pytest.raises(ValidationError):
            CATALOG[0].url = "https://example.com/other.exe"


class TestProductValidation:
    def test_rejects_plain_http(self):
        with pytest.raises(ValidationError):
            Product(
                key=9,
                name="X",
                url="http://example.com/x.exe",
                output_file_name="x.exe",
                search_pattern="X",
            )

    def test_rejects_directory_in_output_name(self):
        with pytest.raises(ValidationError):
            Product(
                key=9,
                name="X",
                url="https://example.com/x.exe",
                output_file_name="sub/x.exe",
                search_pattern="X",
            )


class TestResolveSelection:
    @pytest.mark.parametrize("choice,key", [("1", 1), ("2", 2), ("3", 3)])
    def test_single_entries(self, choice, key):
        assert resolve_selection(choice) == (get_product(key),)

    def test_clients_only(self):
        selection = resolve_selection("4")
        assert [p.name for p in selection] == ["EzDent-i", "Ez3D-i"]
        assert not any(p.is_server for p in selection)

    def test_all_puts_server_first(self):
        selection = resolve_selection("5")
        assert [p.name for p in selection] == ["EzServer", "EzDent-i", "Ez3D-i"]

    def test_surrounding_whitespace_is_ignored(self):
        assert resolve_selection(" 5\n") == resolve_selection("5")

    @pytest.mark.parametrize("choice", ["0", "6", "", "all", "1,2"])
    def test_invalid_choice(self, choice):
        with pytest.raises(InvalidSelectionError):
            resolve_selection(choice)

    def test_menu_labels_cover_every_choice(self):
        labels = dict(product_menu_labels())
        assert list(labels) == ["1", "2", "3", "4", "5"]
        assert labels["4"] == "EzDent-i & Ez3D-i only"


class TestParseAction:
    def test_valid_actions(self):
        assert parse_action("1") is Action.DOWNLOAD_AND_INSTALL
        assert parse_action("2") is Action.DOWNLOAD_ONLY
        assert parse_action("3 ") is Action.INSTALL_ONLY

    @pytest.mark.parametrize("choice", ["9", "0", "", "install"])
    def test_invalid_action(self, choice):
        with pytest.raises(InvalidSelectionError):
            parse_action(choice)
