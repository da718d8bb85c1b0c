# gwp/data/schema.py

from dataclasses import dataclass
from typing import Tuple

# Dataset column layout:
# country, variableId, variableName, lineOfBusiness, Y2000..Y2015
FIRST_YEAR = 2000
LAST_YEAR = 2015
N_YEARS = LAST_YEAR - FIRST_YEAR + 1

COUNTRY_COL = 0
LOB_COL = 3
FIRST_YEAR_COL = 4
N_FIELDS = FIRST_YEAR_COL + N_YEARS

DELIMITER = ","


@dataclass(frozen=True)
class Record:
    country: str
    line_of_business: str
    # exactly N_YEARS values, 0.0 where the cell was empty or unparseable
    yearly_values: Tuple[float, ...]


@dataclass(frozen=True)
class Table:
    """
    Immutable, load-ordered collection of dataset records.
    """

    records: Tuple[Record, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)
