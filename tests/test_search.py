from storefront.search import SearchIndex, PAGE_SIZE

from conftest import make_product, loaded_catalog


async def _index(products) -> SearchIndex:
    return SearchIndex(await loaded_catalog(products))


async def test_empty_query_all_categories_is_whole_catalog(products):
    index = await _index(products)

    assert index.search("", "all") == products
    assert index.search("   ", "همه") == products


async def test_category_then_query():
    products = [
        make_product("a", name="Rose Cream", category="مراقبت پوست"),
        make_product("b", name="Rose Perfume", category="عطر"),
        make_product("c", name="Day cream", category="مراقبت پوست"),
    ]
    index = await _index(products)

    assert [p.id for p in index.search("", "مراقبت پوست")] == ["a", "c"]
    assert [p.id for p in index.search("CREAM", "مراقبت پوست")] == ["a", "c"]
    assert [p.id for p in index.search("rose", "all")] == ["a", "b"]
    assert index.search("rose", "کتاب") == []


async def test_query_matches_code_and_descriptions():
    products = [
        make_product("a", code="SH-01"),
        make_product("b", description="بدون سولفات"),
        make_product("c"),
    ]
    index = await _index(products)

    assert [p.id for p in index.search("sh-01", "all")] == ["a"]
    assert [p.id for p in index.search("سولفات", "all")] == ["b"]


async def test_query_results_are_subset_of_category_results(products):
    index = await _index(products)
    for category in ("all", "مراقبت مو", "بهداشتی"):
        everything = index.search("", category)
        assert all(p in everything for p in index.search("o", category))


async def test_pagination_45_results():
    index = await _index([make_product(f"p{i:02d}") for i in range(45)])
    index.search("", "all")

    assert index.total_pages() == 3
    assert len(index.paginate()) == PAGE_SIZE

    index.page = 3
    assert len(index.paginate()) == 5

    index.page = 4
    assert index.paginate() == []


async def test_no_results_means_zero_pages(products):
    index = await _index(products)
    index.search("nothing matches this", "all")

    assert index.total_pages() == 0
    assert index.paginate() == []


async def test_search_resets_page():
    index = await _index([make_product(f"p{i:02d}") for i in range(45)])
    index.search("", "all")
    index.go_to(3)

    index.search("p0", "all")
    assert index.page == 1


async def test_navigation_is_clamped():
    index = await _index([make_product(f"p{i:02d}") for i in range(45)])
    index.search("", "all")

    index.previous_page()
    assert index.page == 1
    index.go_to(99)
    assert index.page == 3
    index.next_page()
    assert index.page == 3
    assert [p.id for p in index.previous_page()][0] == "p20"


async def test_reset_clears_query_and_category(products):
    index = await _index(products)
    index.search("soap", "بهداشتی")

    assert index.reset() == products
    assert index.query == ""
    assert index.category == "all"
