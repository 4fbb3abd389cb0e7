"""Shared fixtures: sample NBP index lines and table markup."""
import pytest

INDEX_2023 = [
    "a051z230315",
    "h051z230315",
    "c051z230315",
    "c052z230316",
    "c053z230317",
    "b011z230315",
]


def make_table_xml(
    table_id="051/C/NBP/2023",
    listing="2023-03-14",
    publishing="2023-03-15",
    positions=(("dolar amerykański", "1", "USD", "4,3512", "4,4390"),),
    encoding="ISO-8859-2",
) -> bytes:
    items = "".join(
        "<pozycja>"
        f"<nazwa_waluty>{name}</nazwa_waluty>"
        f"<przelicznik>{mult}</przelicznik>"
        f"<kod_waluty>{code}</kod_waluty>"
        f"<kurs_kupna>{buy}</kurs_kupna>"
        f"<kurs_sprzedazy>{sell}</kurs_sprzedazy>"
        "</pozycja>"
        for name, mult, code, buy, sell in positions
    )
    text = (
        f'<?xml version="1.0" encoding="{encoding}"?>'
        '<tabela_kursow typ="C" uid="23c051">'
        f"<numer_tabeli>{table_id}</numer_tabeli>"
        f"<data_notowania>{listing}</data_notowania>"
        f"<data_publikacji>{publishing}</data_publikacji>"
        f"{items}"
        "</tabela_kursow>"
    )
    return text.encode(encoding)


@pytest.fixture
def index_lines():
    return list(INDEX_2023)


@pytest.fixture
def table_xml():
    return make_table_xml(
        positions=(
            ("dolar amerykański", "1", "USD", "4,3512", "4,4390"),
            ("euro", "1", "EUR", "4,6311", "4,7247"),
            ("jen (Japonia)", "100", "JPY", "3,2410", "3,3064"),
        )
    )
