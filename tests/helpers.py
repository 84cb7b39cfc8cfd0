"""Shared request bodies for API tests."""


def product_payload(**overrides):
    """A valid product body in wire (camelCase) form."""
    payload = {
        "name": "Test Product",
        "description": "A product used in tests.",
        "price": 99.99,
        "category": "Electronics",
        "brand": "Test Brand",
        "stockQuantity": 10,
        "rating": 4.0,
        "isFeatured": False,
        "isOnSale": False,
    }
    payload.update(overrides)
    return payload
