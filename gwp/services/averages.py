# gwp/services/averages.py

from typing import Dict, Iterable, List

from gwp.data.schema import Record, Table


def index_country(table: Table, country: str) -> Dict[str, Record]:
    """
    Map line of business -> Record for one country (case-insensitive).

    When the dataset repeats a line of business, the first record in load
    order is kept.
    """
    wanted = country.lower()
    index: Dict[str, Record] = {}
    for record in table:
        if record.country.lower() != wanted:
            continue
        index.setdefault(record.line_of_business, record)
    return index


def average_positive(values: Iterable[float]) -> float:
    positives: List[float] = [v for v in values if v > 0]
    if not positives:
        return 0.0
    return sum(positives) / len(positives)


def compute_averages(
    table: Table,
    country: str,
    lines_of_business: Iterable[str],
) -> Dict[str, float]:
    """
    Average GWP per requested line of business for a country.

    Unknown countries, unknown lines of business and records without any
    positive yearly value all yield 0.
    """
    index = index_country(table, country)

    averages: Dict[str, float] = {}
    for lob in lines_of_business:
        record = index.get(lob)
        if record is None:
            averages[lob] = 0.0
        else:
            averages[lob] = average_positive(record.yearly_values)
    return averages
