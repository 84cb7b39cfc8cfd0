"""Tests for listing query composition (filter, sort, page)."""
import math

from catalog.schemas.product import ProductQueryParameters
from catalog.services.product_query import list_products


def ids(products):
    return [p.id for p in products]


def test_no_filters_returns_everything_by_id(seeded_session):
    products, total = list_products(seeded_session, ProductQueryParameters())

    assert ids(products) == list(range(1, 9))
    assert total == 8


def test_category_is_exact_and_case_sensitive(seeded_session):
    products, total = list_products(seeded_session, ProductQueryParameters(category="Electronics"))
    assert ids(products) == [2, 4, 7]
    assert total == 3

    products, total = list_products(seeded_session, ProductQueryParameters(category="electronics"))
    assert products == []
    assert total == 0


def test_blank_category_is_ignored(seeded_session):
    _, total = list_products(seeded_session, ProductQueryParameters(category="   "))

    assert total == 8


def test_category_and_on_sale_combine(seeded_session):
    products, _ = list_products(seeded_session, ProductQueryParameters(category="Electronics", on_sale=True))
    assert all(p.category == "Electronics" and p.is_on_sale for p in products)
    assert ids(products) == [2, 4, 7]

    products, _ = list_products(seeded_session, ProductQueryParameters(category="Fashion", on_sale=True))

    assert ids(products) == [6]


def test_flag_filters_match_exactly(seeded_session):
    on_sale, _ = list_products(seeded_session, ProductQueryParameters(on_sale=True))
    not_on_sale, _ = list_products(seeded_session, ProductQueryParameters(on_sale=False))
    featured, _ = list_products(seeded_session, ProductQueryParameters(featured=True))

    assert ids(on_sale) == [1, 2, 4, 6, 7]
    assert ids(not_on_sale) == [3, 5, 8]
    assert ids(featured) == [1, 2, 3, 7]


def test_price_bounds_are_inclusive_on_effective_price(seeded_session):
    # Headphones list at 349.99 but sell at 299.99, so they fall outside
    products, _ = list_products(seeded_session, ProductQueryParameters(min_price=300, max_price=900))
    assert ids(products) == [1, 3, 7]
    assert all(300 <= p.effective_price <= 900 for p in products)

    products, _ = list_products(seeded_session, ProductQueryParameters(min_price=199.99, max_price=199.99))
    assert ids(products) == [5, 6]


def test_sort_by_price_uses_effective_price(seeded_session):
    products, _ = list_products(seeded_session, ProductQueryParameters(sort_by="price"))

    assert ids(products) == [8, 5, 6, 4, 2, 1, 3, 7]


def test_sort_descending_reverses_distinct_keys(seeded_session):
    params = dict(category="Electronics", sort_by="price")
    asc, _ = list_products(seeded_session, ProductQueryParameters(**params))
    desc, _ = list_products(seeded_session, ProductQueryParameters(sort_desc=True, **params))

    assert ids(desc) == list(reversed(ids(asc)))


def test_equal_keys_keep_ascending_id_order(seeded_session):
    products, _ = list_products(seeded_session, ProductQueryParameters(sort_by="rating", sort_desc=True))

    # 4.7 is shared by ids 5 and 7, 4.6 by ids 2 and 8
    assert ids(products) == [3, 1, 5, 7, 2, 8, 4, 6]


def test_sort_by_name_is_lexicographic(seeded_session):
    products, _ = list_products(seeded_session, ProductQueryParameters(sort_by="name"))

    names = [p.name for p in products]
    assert names == sorted(names)


def test_sort_by_date(seeded_session):
    products, _ = list_products(seeded_session, ProductQueryParameters(sort_by="date"))

    assert ids(products) == [1, 6, 5, 2, 8, 4, 3, 7]


def test_sort_key_ignores_case(seeded_session):
    upper, _ = list_products(seeded_session, ProductQueryParameters(sort_by="PRICE"))
    lower, _ = list_products(seeded_session, ProductQueryParameters(sort_by="price"))

    assert ids(upper) == ids(lower)


def test_unknown_sort_key_falls_back_to_id(seeded_session):
    products, _ = list_products(seeded_session, ProductQueryParameters(sort_by="popularity", sort_desc=True))

    assert ids(products) == list(range(8, 0, -1))


def test_pages_concatenate_to_the_full_listing(seeded_session):
    full, total = list_products(seeded_session, ProductQueryParameters(sort_by="price", page_size=50))
    page_size = 3
    total_pages = math.ceil(total / page_size)

    collected = []
    for page in range(1, total_pages + 1):
        products, page_total = list_products(
            seeded_session,
            ProductQueryParameters(sort_by="price", page=page, page_size=page_size),
        )
        assert page_total == total
        collected.extend(ids(products))

    assert collected == ids(full)


def test_page_beyond_end_is_empty(seeded_session):
    products, total = list_products(seeded_session, ProductQueryParameters(page=4, page_size=3))

    assert products == []
    assert total == 8
