"""
Movement table extractor.

The schedule page carries several tables and its layout is not stable:
column order, header wording, accents and casing change, and unrelated
columns come and go. The extractor therefore never relies on positions.
It picks the first table whose headers mention all six semantic columns,
maps each column by normalized keyword, and reads the rows through that
mapping.

Usage:
    from pilotage.extractor import extract
    records = extract(soup)
"""

import logging
import unicodedata
from typing import Dict, Iterable, List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from .errors import StructuralError
from .models import ColumnIndexMap, Failure, FIELD_NAMES, MovementRecord, Result, Success

logger = logging.getLogger(__name__)

# Keywords are matched as substrings of the normalized header text
COLUMN_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "date": ("data", "date"),
    "time": ("horario", "time"),
    "maneuver": ("manobra", "maneuver", "manoeuvre"),
    "berth": ("berco", "berth"),
    "vessel": ("navio", "vessel"),
    "status": ("situacao", "status"),
}


def normalize(text: Optional[str]) -> str:
    """Canonical form of header text for comparisons.

    Case-folds, strips diacritics and trims, so "  Situação " and
    "SITUACAO" both become "situacao". Applying it twice is a no-op.
    """
    if text is None:
        return ""
    decomposed = unicodedata.normalize("NFD", text.casefold())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.strip()


def cell_text(cell: Tag) -> str:
    """Visible text of a cell with inner whitespace collapsed."""
    return " ".join(cell.get_text(" ").split())


def matching_fields(header: str, keywords: Dict[str, Tuple[str, ...]] = COLUMN_KEYWORDS):
    """Yield every field whose keywords occur in an already normalized header."""
    for name in FIELD_NAMES:
        if any(keyword in header for keyword in keywords[name]):
            yield name


def covers_all_fields(headers: Iterable[str], keywords=COLUMN_KEYWORDS) -> bool:
    found = set()
    for header in headers:
        found.update(matching_fields(header, keywords))
    return found.issuperset(FIELD_NAMES)


def build_column_map(headers: List[str], keywords=COLUMN_KEYWORDS) -> ColumnIndexMap:
    """Map each field to the first header that mentions one of its keywords."""
    indices = {}
    for position, header in enumerate(headers):
        for name in matching_fields(header, keywords):
            indices.setdefault(name, position)
            logger.debug(f"Column '{header}' -> {name} (index {position})")
    return ColumnIndexMap(**indices)


def own_rows(table: Tag) -> List[Tag]:
    """Rows belonging to ``table`` itself, leaving out rows of nested tables."""
    return [row for row in table.find_all("tr") if row.find_parent("table") is table]


def header_texts(table: Tag) -> set:
    """Normalized header texts of a table: its own <th> cells plus its first row."""
    rows = own_rows(table)
    cells = [th for row in rows for th in row.find_all("th", recursive=False)]
    if rows:
        cells.extend(rows[0].find_all("td", recursive=False))
    return {normalize(cell_text(cell)) for cell in cells}


def qualifies(table: Tag, keywords=COLUMN_KEYWORDS) -> bool:
    return covers_all_fields(header_texts(table), keywords)


def find_movement_table(document: BeautifulSoup, keywords=COLUMN_KEYWORDS) -> Optional[Tag]:
    """Return the first table, in document order, whose headers cover every field.

    A layout table wrapping a qualifying table is passed over in favour of
    the innermost one.
    """
    tables = document.find_all("table")
    logger.debug(f"Found {len(tables)} tables in the document")

    for table in tables:
        if not qualifies(table, keywords):
            continue
        if any(qualifies(inner, keywords) for inner in table.find_all("table")):
            logger.debug("Skipping layout table wrapping a movement table")
            continue
        logger.info("Movement table identified")
        return table

    logger.warning("No table with the expected columns was found")
    return None


class MovementTableParser:
    """Turns a parsed schedule page into MovementRecord values.

    Attributes:
        keywords (dict): Field name to the keywords that identify its column.
            Defaults to COLUMN_KEYWORDS; every field must be present.
    """

    def __init__(self, keywords=None):
        self.keywords = {
            name: tuple(normalize(keyword) for keyword in words)
            for name, words in (keywords or COLUMN_KEYWORDS).items()
        }
        missing = [name for name in FIELD_NAMES if not self.keywords.get(name)]
        if missing:
            raise ValueError(f"No keywords configured for: {', '.join(missing)}")

    def extract(self, document: BeautifulSoup) -> List[MovementRecord]:
        """Return the movement records or raise StructuralError."""
        return self.try_extract(document).unwrap()

    def try_extract(self, document: BeautifulSoup) -> Result:
        """Extract the movement records as a Success, or a Failure on layout changes."""
        table = find_movement_table(document, self.keywords)
        if table is None:
            logger.error("Movement table not found in the received HTML")
            return Failure(StructuralError("table not found"))

        rows = own_rows(table)
        if not rows:
            return Failure(StructuralError("table not found"))

        header_cells = rows[0].find_all(["th", "td"], recursive=False)
        headers = [normalize(cell_text(cell)) for cell in header_cells]
        columns = build_column_map(headers, self.keywords)

        missing = columns.missing_fields()
        if missing:
            logger.error(
                f"Table structure changed. Headers found: {headers}. Column map: {columns}"
            )
            return Failure(StructuralError(f"required column missing: {missing[0]}"))

        movements = []
        for row_number, row in enumerate(rows[1:], 1):
            cells = row.find_all("td", recursive=False)
            if not cells:
                logger.debug(f"Row {row_number} has no data cells, skipping")
                continue

            movement = MovementRecord(
                **{name: self._cell_at(cells, getattr(columns, name)) for name in FIELD_NAMES}
            )
            movements.append(movement)
            logger.debug(f"Row {row_number} parsed: {movement}")

        logger.info(f"Parsing finished, {len(movements)} movements found")
        return Success(movements)

    @staticmethod
    def _cell_at(cells: List[Tag], index: int) -> str:
        # Short rows degrade to empty values instead of aborting the table
        if index >= len(cells):
            logger.debug(f"Index {index} out of range for a row of {len(cells)} cells")
            return ""
        return cell_text(cells[index])


_default_parser = MovementTableParser()


def extract(document: BeautifulSoup) -> List[MovementRecord]:
    """Extract movement records with the default keywords."""
    return _default_parser.extract(document)
