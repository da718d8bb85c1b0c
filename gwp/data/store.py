# gwp/data/store.py

from fastapi import Request

from gwp.data.schema import Table


def get_table(request: Request) -> Table:
    # populated once by the application lifespan, read-only afterwards
    return request.app.state.table
