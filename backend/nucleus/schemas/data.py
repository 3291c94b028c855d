"""Data Query Schemas — optional filter bound from the query string, echoed back.

Invariants:
    - Every DataQueryFilter field is optional; no rules are declared for it
    - Serialized keys are camelCase (tags, startDate, sortBy)
    - tags keeps the order (and repeats) of the query string
"""

from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DataQueryFilter(BaseModel):
    """Optional filter applied to a data source query."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True,
    )

    tags: list[str] | None = None
    start_date: date | None = None
    sort_by: str | None = None


class DataQueryResponse(BaseModel):
    """Echo of the requested source and the applied filter."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    source: str
    filter: DataQueryFilter
