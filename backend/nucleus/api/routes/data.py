"""Data Routes — source lookup with an optional, unvalidated query filter.

Invariants:
    - `source` is 3-10 ASCII letters, enforced by the router (mismatch → 404)
    - The filter is echoed back as bound; no rules apply to it
"""

from datetime import date

from fastapi import APIRouter, Depends, Path, Query, status

from nucleus.api.convertors import SOURCE_SEGMENT
from nucleus.api.versioning import resolve_api_version
from nucleus.schemas.data import DataQueryFilter, DataQueryResponse

router = APIRouter(tags=["data"], dependencies=[Depends(resolve_api_version)])


def data_query_filter(
    tags: list[str] | None = Query(
        None,
        description="A collection of tags to filter the data by. Can be provided multiple times.",
        examples=[["temp", "humidity"]],
    ),
    start_date: date | None = Query(
        None, alias="startDate",
        description="The starting date to filter the data from.",
        examples=["2025-10-28"],
    ),
    sort_by: str | None = Query(
        None, alias="sortBy",
        description="The field to sort the data by.",
        examples=["timestamp"],
    ),
) -> DataQueryFilter:
    """Bind the query string into a DataQueryFilter."""
    return DataQueryFilter(tags=tags, start_date=start_date, sort_by=sort_by)


@router.get(
    f"/data/{SOURCE_SEGMENT}",
    response_model=DataQueryResponse,
    summary="Retrieves data from a specified source, with optional filtering.",
    description=(
        "The data source is specified in the URL path and must conform to "
        "the defined constraints."
    ),
    response_description="Returns a summary of the requested data and applied filters.",
    responses={
        status.HTTP_404_NOT_FOUND: {
            "description": "Returned if the source name does not meet the route constraints.",
        },
    },
)
async def read_data(
    source: str = Path(
        description="The name of the data source. Must be 3 to 10 alphabetic characters.",
        examples=["sensor"],
    ),
    query_filter: DataQueryFilter = Depends(data_query_filter),
):
    return DataQueryResponse(source=source, filter=query_filter)
