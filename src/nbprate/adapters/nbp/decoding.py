# src/nbprate/adapters/nbp/decoding.py
"""
NBP Table Decoding - Index Text and Currency Table Markup

This module turns raw bytes fetched from the NBP remote folder into domain
objects. The XML field mapping is declared once on two pydantic models
(aliases are the Polish element names); prices go through an explicit
comma-decimal rule that never looks at the process locale.

Example table markup:
  <tabela_kursow typ="C">
    <numer_tabeli>73/C/NBP/2007</numer_tabeli>
    <data_notowania>2007-04-12</data_notowania>
    <data_publikacji>2007-04-13</data_publikacji>
    <pozycja>
      <nazwa_waluty>dolar amerykański</nazwa_waluty>
      <przelicznik>1</przelicznik>
      <kod_waluty>USD</kod_waluty>
      <kurs_kupna>2,8210</kurs_kupna>
      <kurs_sprzedazy>2,8780</kurs_sprzedazy>
    </pozycja>
  </tabela_kursow>

Files that USE this module:
- nbprate.adapters.nbp.fetcher (decode_index_lines, TableDecoder)
- tests.test_decoding (unit tests)

Files that this module USES:
- nbprate.domain.models (RateRecord, RateTable)
- nbprate.domain.errors (TableDecodeError)
"""
from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from datetime import date
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from nbprate.domain.errors import TableDecodeError
from nbprate.domain.models import RateRecord, RateTable

log = logging.getLogger(__name__)

ROOT_TAG = "tabela_kursow"
POSITION_TAG = "pozycja"
TABLE_TYPE_ATTR = "typ"

DecimalParser = Callable[[str], Decimal]

_DECIMAL_RE = re.compile(r"^[+-]?\d+(?:[.,]\d+)?$")


def parse_comma_decimal(text: str) -> Decimal:
    """
    Parse a price written with a comma (or dot) as the fractional separator.

    "3,9112" -> Decimal("3.9112"). Grouping separators are not accepted.

    Raises:
        ValueError: If the text is not a plain decimal number
    """
    cleaned = (text or "").strip()
    if not _DECIMAL_RE.match(cleaned):
        raise ValueError(f"Not a decimal number: {text!r}")
    return Decimal(cleaned.replace(",", "."))


class PositionSchema(BaseModel):
    """Mapping of one <pozycja> element."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    currency_name: str = Field(alias="nazwa_waluty")
    currency_code: str = Field(alias="kod_waluty", min_length=1)
    multiplier: int = Field(alias="przelicznik", gt=0)
    buying_price: Decimal = Field(alias="kurs_kupna")
    selling_price: Decimal = Field(alias="kurs_sprzedazy")

    @field_validator("buying_price", "selling_price", mode="before")
    @classmethod
    def _parse_price(cls, v: Any, info: ValidationInfo) -> Any:
        if not isinstance(v, str):
            return v
        parser: DecimalParser = (info.context or {}).get("decimal_parser", parse_comma_decimal)
        return parser(v)

    def to_domain(self) -> RateRecord:
        return RateRecord(
            currency_name=self.currency_name,
            currency_code=self.currency_code,
            multiplier=self.multiplier,
            buying_price=self.buying_price,
            selling_price=self.selling_price,
        )


class TableSchema(BaseModel):
    """Mapping of the <tabela_kursow> root element."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    table_id: str = Field(alias="numer_tabeli")
    table_type: str = Field(alias=TABLE_TYPE_ATTR, min_length=1)
    listing_date: date = Field(alias="data_notowania")
    publishing_date: date = Field(alias="data_publikacji")
    positions: List[PositionSchema] = Field(default_factory=list, alias=POSITION_TAG)

    def to_domain(self) -> RateTable:
        return RateTable(
            table_id=self.table_id,
            table_type=self.table_type,
            listing_date=self.listing_date,
            publishing_date=self.publishing_date,
            positions=tuple(p.to_domain() for p in self.positions),
        )


def _child_fields(element: ET.Element) -> Dict[str, Any]:
    """Collect text of leaf children keyed by tag."""
    return {child.tag: (child.text or "") for child in element if len(child) == 0}


class TableDecoder:
    """
    Decodes currency table markup into a RateTable.

    The decimal rule is injected so tests (or other publishers) can swap it;
    the default is parse_comma_decimal.
    """

    def __init__(self, decimal_parser: Optional[DecimalParser] = None):
        self.decimal_parser = decimal_parser or parse_comma_decimal

    def decode(self, body: bytes) -> RateTable:
        """
        Decode raw XML bytes.

        Bytes are handed to the parser as-is so the document's own encoding
        declaration (NBP uses ISO-8859-2) is honoured.

        Raises:
            TableDecodeError: On malformed markup or unconvertible fields
        """
        try:
            root = ET.fromstring(body)
        except (ET.ParseError, LookupError, ValueError) as e:
            # LookupError: unknown encoding in the XML declaration
            raise TableDecodeError(f"Malformed currency table markup: {e}") from e

        if root.tag != ROOT_TAG:
            raise TableDecodeError(f"Unexpected root element <{root.tag}>, expected <{ROOT_TAG}>")

        data = _child_fields(root)
        if TABLE_TYPE_ATTR in root.attrib:
            data[TABLE_TYPE_ATTR] = root.attrib[TABLE_TYPE_ATTR]
        data[POSITION_TAG] = [_child_fields(p) for p in root.findall(POSITION_TAG)]

        try:
            schema = TableSchema.model_validate(data, context={"decimal_parser": self.decimal_parser})
        except ValidationError as e:
            raise TableDecodeError(f"Invalid currency table content: {e}") from e

        table = schema.to_domain()
        log.debug("Decoded table %s with %d positions", table.table_id, len(table.positions))
        return table


def decode_index_lines(body: bytes, charset: str = "utf-8") -> List[str]:
    """
    Decode an index file into its lines.

    A leading byte-order mark is dropped; it is not part of the first entry.

    Raises:
        TableDecodeError: If the body is not valid text in ``charset``
    """
    try:
        text = body.decode(charset)
    except UnicodeDecodeError as e:
        raise TableDecodeError(f"Index file is not valid {charset}: {e}") from e
    return text.lstrip("\ufeff").splitlines()
