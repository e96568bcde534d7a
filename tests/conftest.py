import pytest

from scent_search.models import JournalEntry, Product


def _make_product(
    id,
    title,
    brand="",
    gender="other",
    description="",
    top=(),
    heart=(),
    base=(),
    low_price_paise=None,
    rating_avg=4.0,
    rating_count=10,
    media=(),
):
    return Product.model_validate(
        {
            "id": id,
            "slug": id,
            "title": title,
            "brand": {"name": brand},
            "gender": gender,
            "description": description,
            "notes": {"top": list(top), "heart": list(heart), "base": list(base)},
            "aggregates": {
                "lowPricePaise": low_price_paise,
                "ratingAvg": rating_avg,
                "ratingCount": rating_count,
            },
            "media": [{"url": url} for url in media],
        }
    )


@pytest.fixture
def make_product():
    return _make_product


@pytest.fixture
def sauvage():
    return _make_product(
        "dior-sauvage-edt",
        "Dior Sauvage Eau de Toilette",
        brand="Dior",
        gender="men",
        description="Fresh and raw with a juicy citrus opening.",
        top=["Bergamot", "Pepper", "Lemon", "Mint"],
        heart=["Lavender"],
        base=["Ambroxan"],
        low_price_paise=985000,
        rating_avg=4.6,
        rating_count=2048,
        media=["https://img.example/sauvage.jpg"],
    )


@pytest.fixture
def miss_dior():
    return _make_product(
        "miss-dior",
        "Miss Dior",
        brand="Dior",
        gender="women",
        description="A bouquet of peony over soft musk.",
        top=["Peony"],
        heart=["Grasse Rose"],
        base=["White Musk"],
    )


@pytest.fixture
def journal_entries():
    return [
        JournalEntry(
            id="journal-sourcing",
            title="Sourcing petals with regenerative farmers",
            excerpt="Meet the collectives powering our rose and jasmine harvests.",
            href="/journal/sourcing",
            image="https://img.example/petals.jpg",
        ),
        JournalEntry(
            id="journal-layering",
            title="Three layering stories for autumn",
            excerpt="Combinations that evolve from dusk cocktails to late-night galleries.",
            href="/journal/layering",
            image="",
        ),
    ]
