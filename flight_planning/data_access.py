"""Loaders that turn delimited airport and aircraft tables into reference records."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

import pandas as pd

from .config import DEFAULT_CURRENCY_SYMBOLS
from .errors import ReferenceDataError
from .schemas import AircraftRecord, AirportRecord, ReferenceTables

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_AIRPORTS_PATH = _DATA_DIR / "airports.csv"
DEFAULT_AIRCRAFT_PATH = _DATA_DIR / "aircraft.csv"

AIRPORT_MIN_FIELDS = 4
AIRCRAFT_MIN_FIELDS = 6

Row = Sequence[Any]


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _parse_number(value: Any, column: str, row_label: str) -> float:
    text = _text(value)
    try:
        number = float(text)
    except ValueError:
        raise ReferenceDataError(f"{row_label}: {column} '{text}' is not a number") from None
    if not math.isfinite(number) or number < 0:
        raise ReferenceDataError(f"{row_label}: {column} '{text}' must be a non-negative number")
    return number


def _parse_count(value: Any, column: str, row_label: str) -> int:
    number = _parse_number(value, column, row_label)
    if not number.is_integer():
        raise ReferenceDataError(f"{row_label}: {column} '{_text(value)}' must be a whole number")
    return int(number)


def strip_currency(value: Any, symbols: Iterable[str] = DEFAULT_CURRENCY_SYMBOLS) -> str:
    """Remove a leading currency symbol such as ``£`` from ``value``."""

    text = _text(value)
    for symbol in symbols:
        if symbol and text.startswith(symbol):
            return text[len(symbol):].strip()
    return text


def parse_airport_row(row: Row, *, line: Optional[int] = None) -> AirportRecord:
    label = f"Airport row {line}" if line is not None else "Airport row"
    if len(row) < AIRPORT_MIN_FIELDS:
        raise ReferenceDataError(f"{label}: expected {AIRPORT_MIN_FIELDS} fields, got {len(row)}")
    code = _text(row[0])
    if not code:
        raise ReferenceDataError(f"{label}: airport code is empty")
    return AirportRecord(
        code=code,
        name=_text(row[1]),
        distance_from_base_a=_parse_number(row[2], "distance from base A", label),
        distance_from_base_b=_parse_number(row[3], "distance from base B", label),
    )


def parse_aircraft_row(
    row: Row,
    *,
    line: Optional[int] = None,
    currency_symbols: Iterable[str] = DEFAULT_CURRENCY_SYMBOLS,
) -> AircraftRecord:
    label = f"Aircraft row {line}" if line is not None else "Aircraft row"
    if len(row) < AIRCRAFT_MIN_FIELDS:
        raise ReferenceDataError(f"{label}: expected {AIRCRAFT_MIN_FIELDS} fields, got {len(row)}")
    aircraft_type = _text(row[0])
    if not aircraft_type:
        raise ReferenceDataError(f"{label}: aircraft type is empty")
    return AircraftRecord(
        type=aircraft_type,
        running_cost=_parse_number(strip_currency(row[1], currency_symbols), "running cost", label),
        max_range=_parse_number(row[2], "max range", label),
        economy_capacity=_parse_count(row[3], "economy capacity", label),
        business_capacity=_parse_count(row[4], "business capacity", label),
        first_class_capacity=_parse_count(row[5], "first class capacity", label),
    )


def build_reference_tables(
    airport_rows: Iterable[Row],
    aircraft_rows: Iterable[Row],
    *,
    currency_symbols: Iterable[str] = DEFAULT_CURRENCY_SYMBOLS,
) -> ReferenceTables:
    """Parse pre-split rows into read-only airport and aircraft lookups.

    Keys are the trimmed airport code and aircraft type. When a key repeats,
    the first row wins and the duplicate is logged.
    """

    symbols = tuple(currency_symbols)

    airports: Dict[str, AirportRecord] = {}
    for index, row in enumerate(airport_rows, start=1):
        record = parse_airport_row(row, line=index)
        if record.code in airports:
            logger.warning("Duplicate airport code %s in row %d ignored", record.code, index)
            continue
        airports[record.code] = record

    aircraft: Dict[str, AircraftRecord] = {}
    for index, row in enumerate(aircraft_rows, start=1):
        record = parse_aircraft_row(row, line=index, currency_symbols=symbols)
        if record.type in aircraft:
            logger.warning("Duplicate aircraft type %s in row %d ignored", record.type, index)
            continue
        aircraft[record.type] = record

    logger.debug("Loaded %d airports and %d aircraft types", len(airports), len(aircraft))
    return ReferenceTables(airports=airports, aircraft=aircraft)


def read_table(path: str | Path, delimiter: str = ",") -> List[List[str]]:
    """Read a delimited file into rows of text fields, skipping the header row."""

    csv_path = Path(path)
    if not csv_path.exists():
        raise ReferenceDataError(f"Reference file not found: {csv_path}")
    try:
        header = pd.read_csv(csv_path, sep=delimiter, nrows=0, encoding="utf-8-sig")
        width = len(header.columns)
        # Rows longer than the header keep their leading fields only.
        df = pd.read_csv(
            csv_path,
            sep=delimiter,
            header=None,
            skiprows=1,
            names=list(range(width)),
            usecols=list(range(width)),
            index_col=False,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8-sig",
            engine="python",
        )
    except pd.errors.EmptyDataError:
        return []
    except pd.errors.ParserError as exc:
        raise ReferenceDataError(f"Could not parse {csv_path}: {exc}") from exc

    rows: List[List[str]] = []
    for values in df.fillna("").itertuples(index=False, name=None):
        fields = [str(value).strip() for value in values]
        if not any(fields):
            continue
        rows.append(fields)
    return rows


def load_reference_tables(
    airports_path: Optional[str | Path] = None,
    aircraft_path: Optional[str | Path] = None,
    *,
    delimiter: str = ",",
    currency_symbols: Iterable[str] = DEFAULT_CURRENCY_SYMBOLS,
) -> ReferenceTables:
    """Load both reference tables, defaulting to the bundled sample data."""

    airport_rows = read_table(airports_path or DEFAULT_AIRPORTS_PATH, delimiter)
    aircraft_rows = read_table(aircraft_path or DEFAULT_AIRCRAFT_PATH, delimiter)
    return build_reference_tables(airport_rows, aircraft_rows, currency_symbols=currency_symbols)
