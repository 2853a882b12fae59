from __future__ import annotations

import pytest

from pyvocab.terms import english_missing_term_generator, split_words


@pytest.mark.parametrize(
    ("name", "words"),
    [
        ("Truck", ["Truck"]),
        ("grossWeight", ["gross", "Weight"]),
        ("HTTPServerConfig", ["HTTP", "Server", "Config"]),
        ("max_load_kg", ["max", "load", "kg"]),
        ("axle2Count", ["axle", "2", "Count"]),
    ],
)
def test_split_words(name: str, words: list[str]) -> None:
    assert split_words(name) == words


def test_declaration_label() -> None:
    assert english_missing_term_generator("org.acme", "en", "DeliveryTruck") == "Delivery Truck"


def test_property_label() -> None:
    assert english_missing_term_generator("org.acme", "en", "Truck", "grossWeight") == "Gross Weight of the Truck"


def test_acronyms_keep_case() -> None:
    assert english_missing_term_generator("org.acme", "en", "VINRecord", "id") == "Id of the VIN Record"
