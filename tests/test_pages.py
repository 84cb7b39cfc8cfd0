"""Tests for the shop UI pages."""


def test_home_page_lists_featured_products(seeded_client):
    """Test the landing page shows featured products only."""
    response = seeded_client.get("/shop")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "Divine Leather Handbag" in response.text
    assert "Divine Perfume" not in response.text


def test_product_list_page(seeded_client):
    """Test the listing page renders the first page sorted by name."""
    response = seeded_client.get("/shop/products")

    assert response.status_code == 200
    assert "8 products found" in response.text
    assert response.text.index("Divine Designer Sunglasses") < response.text.index("Divine Smartphone")


def test_product_list_page_filters(seeded_client):
    """Test filters from the query string narrow the listing."""
    response = seeded_client.get("/shop/products?Category=Beauty")

    assert response.status_code == 200
    assert "2 products found" in response.text
    assert "Divine Perfume" in response.text
    assert "Divine Smartphone" not in response.text


def test_product_list_page_ignores_empty_fields(seeded_client):
    """Test an unfilled filter form behaves like no filters."""
    response = seeded_client.get("/shop/products?Category=&MinPrice=&MaxPrice=&SortBy=name")

    assert response.status_code == 200
    assert "8 products found" in response.text


def test_product_list_page_reports_invalid_filters(seeded_client):
    """Test invalid filters are dropped and reported instead of failing."""
    response = seeded_client.get("/shop/products?MinPrice=abc")

    assert response.status_code == 200
    assert "Some filters were invalid" in response.text
    assert "8 products found" in response.text


def test_product_list_page_pagination_links(client):
    """Test the pagination bar links to the following page."""
    for i in range(20):
        client.post(
            "/api/products",
            json={
                "name": f"Item {i:02d}",
                "description": "Paged item.",
                "price": 10 + i,
                "category": "Misc",
            },
        )

    response = client.get("/shop/products")

    assert response.status_code == 200
    assert "20 products found" in response.text
    assert "PageNumber=2" in response.text
    assert "Item 08" in response.text
    assert "Item 09" not in response.text


def test_product_detail_page(seeded_client):
    """Test the detail page shows the product and its saving."""
    response = seeded_client.get("/shop/products/7")

    assert response.status_code == 200
    assert "Divine Smartphone" in response.text
    assert "$899.99" in response.text
    assert "You save 10%" in response.text


def test_product_detail_page_not_found(seeded_client):
    """Test unknown products render a not-found page."""
    response = seeded_client.get("/shop/products/999")

    assert response.status_code == 404
    assert "The product may not exist." in response.text


def test_product_detail_page_id_out_of_range(seeded_client):
    """Test ids too large for the database render the not-found page too."""
    response = seeded_client.get("/shop/products/100000000000000000000")

    assert response.status_code == 404
    assert "The product may not exist." in response.text
