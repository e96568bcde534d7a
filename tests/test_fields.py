from scent_search.fields import (
    compose_journal_entry,
    compose_product,
    gender_label,
    product_badges,
    product_description,
    product_meta,
    product_searchable_text,
)


def test_gender_label_mapping():
    assert gender_label("men") == "For Men"
    assert gender_label("women") == "For Women"
    assert gender_label("unisex") == "Unisex"
    assert gender_label("other") == "For All"
    assert gender_label("kids") == "For All"
    assert gender_label(None) == "For All"


def test_product_description_uses_first_three_top_notes(sauvage):
    assert product_description(sauvage) == "Dior · For Men · Bergamot • Pepper • Lemon"


def test_product_description_drops_empty_segments(make_product):
    bare = make_product("bare", "Bare", gender="unisex")
    assert product_description(bare) == "Unisex"


def test_product_badges_order_and_content(sauvage):
    assert product_badges(sauvage) == ["Dior", "For Men", "Bergamot", "Pepper", "Lavender"]


def test_product_badges_are_deduplicated(make_product):
    p = make_product("p", "P", brand="Rose", gender="men", top=["Rose", "Oud"], heart=["Oud"])
    assert product_badges(p) == ["Rose", "For Men", "Oud"]


def test_product_meta_with_and_without_price(sauvage, make_product):
    assert product_meta(sauvage) == "₹9,850 • 4.6 ★ • 2048 reviews"

    unpriced = make_product("u", "U", rating_avg=4.25, rating_count=77)
    assert product_meta(unpriced) == "4.3 ★ • 77 reviews"


def test_product_meta_uses_injected_formatter(sauvage):
    meta = product_meta(sauvage, format_price=lambda paise: f"{paise} paise")
    assert meta.startswith("985000 paise • ")


def test_product_searchable_text_includes_every_field(sauvage):
    text = product_searchable_text(sauvage)
    for piece in [
        "Dior Sauvage Eau de Toilette",
        "For Men",
        "juicy citrus",
        "Bergamot Pepper Lemon Mint",
        "Lavender",
        "Ambroxan",
    ]:
        assert piece in text


def test_compose_product_display_fields(sauvage, miss_dior):
    composed = compose_product(sauvage)
    assert composed.type == "product"
    assert composed.href == "/products/dior-sauvage-edt"
    assert composed.image == "https://img.example/sauvage.jpg"
    assert composed.badges == ("Dior", "For Men", "Bergamot", "Pepper", "Lavender")

    assert compose_product(miss_dior).image is None


def test_compose_journal_entry(journal_entries):
    composed = compose_journal_entry(journal_entries[0])
    assert composed.type == "journal"
    assert composed.description == journal_entries[0].excerpt
    assert composed.searchable_text.startswith("Sourcing petals")
    assert composed.badges is None
    assert composed.meta is None
    assert composed.href == "/journal/sourcing"

    assert compose_journal_entry(journal_entries[1]).image is None
