# gwp/api/premiums.py

from typing import Dict

from fastapi import APIRouter, Depends

from gwp.data.schema import Table
from gwp.data.store import get_table
from gwp.models.premiums import GwpRequest
from gwp.services.averages import compute_averages

router = APIRouter(prefix="/server_api/insurance", tags=["insurance"])


@router.post("/country/gwp", response_model=Dict[str, float])
def average_gwp(
    body: GwpRequest,
    table: Table = Depends(get_table),
) -> Dict[str, float]:
    """
    Average gross written premium per requested line of business, over the
    years 2000-2015 that have a positive value.
    """
    return compute_averages(table, body.country, body.lob)
