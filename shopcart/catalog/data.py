"""
==============================================================================
Catalog Seed Data
==============================================================================

The fixed set of products served by the catalog. Built once at import and
never modified.

==============================================================================
"""

from typing import Tuple

from .models import Product


def _product(product_id: int, category: str, name: str, price: str, slug: str) -> Product:
    return Product(
        product_id=product_id,
        product_category=category,
        product_name=name,
        unit_price=price,
        image=f"https://picsum.photos/seed/{slug}/200",
    )


PRODUCTS: Tuple[Product, ...] = (
    _product(1, "FROZEN", "Ice Cream", "2.5", "icecream"),
    _product(2, "FROZEN", "Green Peas", "2", "peas"),
    _product(3, "FROZEN", "Corn", "2", "corn"),
    _product(4, "FROZEN", "Meat", "5", "meat"),
    _product(5, "FROZEN", "Pizza", "4", "pizza"),

    _product(6, "OFFICE SUPPLIES", "Paper", "5", "paper"),
    _product(7, "OFFICE SUPPLIES", "Pens", "4", "pens"),
    _product(8, "OFFICE SUPPLIES", "Ink", "5", "ink"),
    _product(9, "OFFICE SUPPLIES", "Chair", "100", "chair"),
    _product(10, "OFFICE SUPPLIES", "Folder", "2", "folder"),

    _product(11, "Kitchen", "Plates", "3", "plates"),
    _product(12, "Kitchen", "Bowls", "3", "bowls"),
    _product(13, "Kitchen", "Spoon", "1", "spoon"),
    _product(14, "Kitchen", "Fork", "1", "fork"),
    _product(15, "Kitchen", "Napkins", "4", "napkins"),

    _product(16, "FRUITS", "Apple", "2", "apple"),
    _product(17, "FRUITS", "Banana", "1", "banana"),
    _product(18, "FRUITS", "Pear", "2", "pear"),
    _product(19, "FRUITS", "Grapes", "3", "grapes"),
    _product(20, "FRUITS", "Watermelon", "5", "watermelon"),

    _product(21, "Home Goods", "Bulbs", "3", "bulbs"),
    _product(22, "Home Goods", "Cleaning Liquid", "4", "cleaning"),
    _product(23, "Home Goods", "Wipes", "3", "wipes"),
    _product(24, "Home Goods", "Air Freshner", "3.5", "airfreshner"),
    _product(25, "Home Goods", "Batteries", "1.5", "batteries"),
)
