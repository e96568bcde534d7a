from scent_search.normalize import build_search_context
from scent_search.ranking import (
    coalesce_search_results,
    search_journal_entries,
    search_products,
    title_collation_key,
)


def test_empty_query_returns_everything_in_title_order(make_product, sauvage, miss_dior):
    products = [
        make_product("edt", "Bleu De Chanel Eau de Toilette", brand="Chanel"),
        miss_dior,
        make_product("edp", "Bleu De Chanel Eau de Parfum", brand="Chanel"),
        sauvage,
    ]
    results = search_products(products, build_search_context(""))
    assert [r.title for r in results] == [
        "Bleu De Chanel Eau de Parfum",
        "Bleu De Chanel Eau de Toilette",
        "Dior Sauvage Eau de Toilette",
        "Miss Dior",
    ]
    assert all(r.score == 0 for r in results)


def test_multi_token_query_requires_every_token(sauvage, miss_dior):
    results = search_products([miss_dior, sauvage], build_search_context("dior sauvage"))
    assert [r.id for r in results] == ["dior-sauvage-edt"]


def test_dior_scenario(sauvage, miss_dior):
    results = search_products([miss_dior, sauvage], build_search_context("dior"))
    assert [r.title for r in results] == ["Dior Sauvage Eau de Toilette", "Miss Dior"]
    assert [r.score for r in results] == [2.25, 1.75]


def test_title_matches_outrank_description_matches(make_product):
    products = [
        make_product("velvet", "Velvet Night", description="a rose heart"),
        make_product("wild", "Wild Rose", heart=["Oud"]),
        make_product("prick", "Rose Prick", heart=["Oud"]),
    ]
    results = search_products(products, build_search_context("rose"))
    assert [r.id for r in results] == ["prick", "wild", "velvet"]
    assert [r.score for r in results] == [2.0, 1.5, 1.0]


def test_ties_break_on_title_collation(make_product):
    products = [
        make_product("z", "Zest"),
        make_product("elan", "Élan"),
        make_product("night", "amber Night"),
        make_product("eden", "Eden"),
        make_product("dawn", "Amber Dawn"),
    ]
    results = search_products(products, build_search_context(""))
    assert [r.title for r in results] == ["Amber Dawn", "amber Night", "Eden", "Élan", "Zest"]


def test_title_collation_key_puts_lower_case_first():
    assert title_collation_key("rose") < title_collation_key("Rose")


def test_case_insensitive_queries_match(sauvage, miss_dior, journal_entries):
    upper = coalesce_search_results([sauvage, miss_dior], journal_entries, "DIOR")
    lower = coalesce_search_results([sauvage, miss_dior], journal_entries, "dior")
    assert upper.model_dump() == lower.model_dump()


def test_results_are_deterministic(sauvage, miss_dior, journal_entries):
    first = coalesce_search_results([sauvage, miss_dior], journal_entries, "rose")
    second = coalesce_search_results([sauvage, miss_dior], journal_entries, "rose")
    assert first.model_dump_json() == second.model_dump_json()


def test_coalesce_buckets_by_type(sauvage, miss_dior, journal_entries):
    payload = coalesce_search_results([sauvage, miss_dior], journal_entries, "  Rose ")
    assert payload.context.query == "rose"
    assert payload.context.tokens == ["rose"]
    # "Grasse Rose" heart note
    assert [r.id for r in payload.results.products] == ["miss-dior"]
    assert [r.id for r in payload.results.journal] == ["journal-sourcing"]
    assert all(r.type == "product" for r in payload.results.products)
    assert all(r.type == "journal" for r in payload.results.journal)


def test_product_result_fields(sauvage):
    (result,) = search_products([sauvage], build_search_context("sauvage"))
    assert result.href == "/products/dior-sauvage-edt"
    assert result.description == "Dior · For Men · Bergamot • Pepper • Lemon"
    assert result.badges == ["Dior", "For Men", "Bergamot", "Pepper", "Lavender"]
    assert result.meta == "₹9,850 • 4.6 ★ • 2048 reviews"
    assert result.image == "https://img.example/sauvage.jpg"


def test_journal_results_have_no_product_fields(journal_entries):
    results = search_journal_entries(journal_entries, build_search_context(""))
    assert [r.title for r in results] == [
        "Sourcing petals with regenerative farmers",
        "Three layering stories for autumn",
    ]
    assert all(r.badges is None and r.meta is None for r in results)


def test_inputs_are_not_mutated(sauvage, miss_dior):
    products = [miss_dior, sauvage]
    before = [p.model_dump() for p in products]
    coalesce_search_results(products, [], "dior")
    assert [p.model_dump() for p in products] == before
    assert products[0] is miss_dior


def test_no_candidates():
    payload = coalesce_search_results([], [], "dior")
    assert payload.results.products == []
    assert payload.results.journal == []
