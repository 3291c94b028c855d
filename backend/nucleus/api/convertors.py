"""URL Convertors — path constraints enforced by the router, not by handlers.

Invariants:
    - A path segment that fails a convertor never matches the route (404)
    - Convertors are registered on import, before any route using them is declared

Design Decisions:
    - Starlette convertors over Path(pattern=...): a pattern mismatch is a routing
      failure (404), not a 400/422 binding error
"""

from starlette.convertors import Convertor, register_url_convertor


class ApiVersionConvertor(Convertor):
    """`1` or `1.0` style version segment."""
    regex = r"[0-9]+(?:\.[0-9]+)?"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return str(value)


class DataSourceConvertor(Convertor):
    """Alphabetic data source name, 3 to 10 characters."""
    regex = r"[a-zA-Z]{3,10}"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return str(value)


register_url_convertor("apiversion", ApiVersionConvertor())
register_url_convertor("datasource", DataSourceConvertor())

VERSION_SEGMENT = "{version:apiversion}"
SOURCE_SEGMENT = "{source:datasource}"
