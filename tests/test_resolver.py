"""
==============================================================================
Navigation Resolver Tests
==============================================================================
"""

from decimal import Decimal

import pytest

from shopcart.catalog import CatalogStore, Product, ProductService
from shopcart.navigation import (
    CategoryFound,
    NavigationResolver,
    NotFound,
    NotFoundReason,
    ProductFound,
)


class TestCategoryFlow:
    """Tests for category resolution."""
    
    @pytest.mark.parametrize("segment", ["FROZEN", "frozen", "  Frozen "])
    def test_category_found(self, resolver: NavigationResolver, segment: str):
        """A matching category resolves to its products in catalog order."""
        result = resolver.resolve_category(segment)
        assert isinstance(result, CategoryFound)
        assert result.category == "FROZEN"
        assert [p.product_id for p in result.products] == [1, 2, 3, 4, 5]
    
    def test_category_keeps_catalog_casing(self, resolver: NavigationResolver):
        """The resolved name uses the catalog's casing."""
        result = resolver.resolve_category("office supplies")
        assert result.category == "OFFICE SUPPLIES"
        assert len(result.products) == 5
    
    @pytest.mark.parametrize("segment", [None, "", "   "])
    def test_missing_category(self, resolver: NavigationResolver, segment):
        """Missing or blank segments are not found."""
        result = resolver.resolve_category(segment)
        assert isinstance(result, NotFound)
        assert result.reason is NotFoundReason.MISSING_CATEGORY
    
    def test_unknown_category(self, resolver: NavigationResolver):
        """Unmatched categories are not found."""
        result = resolver.resolve_category("doesnotexist")
        assert isinstance(result, NotFound)
        assert result.reason is NotFoundReason.UNKNOWN_CATEGORY


class TestProductLookupFlow:
    """Tests for product-lookup resolution."""
    
    def test_found_without_quantity(self, resolver: NavigationResolver):
        """No quantity segment yields the product with no total."""
        result = resolver.resolve_product("1")
        assert isinstance(result, ProductFound)
        assert result.product.product_name == "Ice Cream"
        assert result.quantity is None
        assert result.total_price is None
        assert not result.has_total
    
    def test_found_with_quantity(self, resolver: NavigationResolver):
        """A valid quantity prices the line item."""
        result = resolver.resolve_product("1", "3")
        assert isinstance(result, ProductFound)
        assert result.quantity == Decimal("3")
        assert result.total_price == Decimal("7.5")
        assert result.has_total
    
    def test_fractional_quantity(self, resolver: NavigationResolver):
        """Fractional quantities multiply exactly."""
        result = resolver.resolve_product("25", "3")
        assert result.total_price == Decimal("4.5")
        result = resolver.resolve_product("24", "0.5")
        assert result.total_price == Decimal("1.75")
    
    def test_whitespace_id(self, resolver: NavigationResolver):
        """Surrounding whitespace on the id is ignored."""
        result = resolver.resolve_product(" 9 ", "2")
        assert result.product.product_name == "Chair"
        assert result.total_price == Decimal("200")
    
    @pytest.mark.parametrize("qty", ["0", "-2", "abc", ""])
    def test_invalid_quantity(self, resolver: NavigationResolver, qty: str):
        """Non-numeric, empty or non-positive quantities are not found."""
        result = resolver.resolve_product("1", qty)
        assert isinstance(result, NotFound)
        assert result.reason is NotFoundReason.INVALID_QUANTITY
    
    @pytest.mark.parametrize("id_segment", ["abc", "", "1.5", None])
    def test_invalid_id(self, resolver: NavigationResolver, id_segment):
        """Non-integer ids are not found."""
        result = resolver.resolve_product(id_segment)
        assert isinstance(result, NotFound)
        assert result.reason is NotFoundReason.INVALID_ID
    
    @pytest.mark.parametrize("id_segment", ["9999", "0", "-1"])
    def test_unknown_id(self, resolver: NavigationResolver, id_segment: str):
        """Ids missing from the catalog are not found."""
        result = resolver.resolve_product(id_segment)
        assert isinstance(result, NotFound)
        assert result.reason is NotFoundReason.UNKNOWN_ID
    
    def test_unknown_id_checked_before_quantity(self, resolver: NavigationResolver):
        """An unknown id is reported even when the quantity is also bad."""
        result = resolver.resolve_product("9999", "abc")
        assert result.reason is NotFoundReason.UNKNOWN_ID
    
    def test_resolution_is_idempotent(self, resolver: NavigationResolver):
        """Identical inputs give identical results."""
        assert resolver.resolve_product("1", "3") == resolver.resolve_product("1", "3")
        assert resolver.resolve_category("fruits") == resolver.resolve_category("fruits")


class TestQuantityRange:
    """Tests for quantities at the edges of the numeric range."""
    
    @pytest.mark.parametrize("qty", ["1e400", "1e-400", "1e999999999999999999"])
    def test_unrepresentable_quantity(self, resolver: NavigationResolver, qty: str):
        """Quantities that cannot be emitted faithfully are not found."""
        result = resolver.resolve_product("1", qty)
        assert isinstance(result, NotFound)
        assert result.reason is NotFoundReason.INVALID_QUANTITY
    
    def test_total_overflow(self, resolver: NavigationResolver):
        """A representable quantity whose total overflows is not found."""
        result = resolver.resolve_product("9", "1e308")
        assert isinstance(result, NotFound)
        assert result.reason is NotFoundReason.INVALID_QUANTITY
    
    def test_large_total_within_range(self, resolver: NavigationResolver):
        """Large totals that fit are priced."""
        result = resolver.resolve_product("9", "1e300")
        assert isinstance(result, ProductFound)
        assert result.total_price == Decimal("1e302")
    
    def test_total_underflow(self):
        """A total too small to emit as a non-zero number is not found."""
        store = CatalogStore([
            Product(
                product_id=1,
                product_category="Bulk",
                product_name="Grain",
                unit_price="0.01",
                image="https://example.com/grain.png",
            ),
        ])
        result = NavigationResolver(ProductService(store)).resolve_product("1", "1e-323")
        assert isinstance(result, NotFound)
        assert result.reason is NotFoundReason.INVALID_QUANTITY
    
    def test_free_product_total_is_zero(self):
        """A zero unit price still yields a found zero total."""
        store = CatalogStore([
            Product(
                product_id=1,
                product_category="Samples",
                product_name="Sticker",
                unit_price="0",
                image="https://example.com/sticker.png",
            ),
        ])
        result = NavigationResolver(ProductService(store)).resolve_product("1", "4")
        assert isinstance(result, ProductFound)
        assert result.total_price == 0
    
    def test_non_ascii_id(self, resolver: NavigationResolver):
        """An Arabic-Indic one is not product 1."""
        result = resolver.resolve_product("١")
        assert isinstance(result, NotFound)
        assert result.reason is NotFoundReason.INVALID_ID
