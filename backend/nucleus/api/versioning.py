"""API Versioning — URL-segment version resolution and supported-version reporting.

Invariants:
    - `v1` and `v1.0` name the same version
    - A route reached without a version segment assumes settings.default_api_version
    - An unsupported version raises UnsupportedApiVersionError (400) before the handler
    - The resolved version is stored on request.state.api_version

Design Decisions:
    - Version resolved by a router-level dependency: handlers never see the raw segment
    - Reporting header added by middleware so short-circuited responses carry it too
"""

import logging
from dataclasses import dataclass

from fastapi import FastAPI, Request

from nucleus.api.convertors import VERSION_SEGMENT
from nucleus.config import Settings, get_settings
from nucleus.core.errors import ErrorContext, UnsupportedApiVersionError

logger = logging.getLogger(__name__)

VERSIONED_PREFIX = f"/api/v{VERSION_SEGMENT}"
UNVERSIONED_PREFIX = "/api"
SUPPORTED_VERSIONS_HEADER = "api-supported-versions"


@dataclass(frozen=True, order=True)
class ApiVersion:
    """Major/minor API version."""
    major: int
    minor: int = 0

    @classmethod
    def parse(cls, text: str) -> "ApiVersion":
        major, _, minor = text.strip().lstrip("vV").partition(".")
        if not major.isdigit() or (minor and not minor.isdigit()):
            raise ValueError(f"Invalid API version: {text!r}")
        return cls(int(major), int(minor) if minor else 0)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


def supported_versions(settings: Settings) -> list[ApiVersion]:
    return sorted(ApiVersion.parse(v) for v in settings.supported_api_versions)


def resolve_api_version(request: Request) -> ApiVersion:
    """Dependency: resolve and check the requested API version."""
    settings = get_settings()
    raw = request.path_params.get("version")
    requested = raw if raw is not None else settings.default_api_version
    version = ApiVersion.parse(requested)
    supported = supported_versions(settings)
    if version not in supported:
        logger.warning(
            f"Unsupported API version {requested} on {request.url.path}",
            extra={"api_version": requested, "path": request.url.path},
        )
        raise UnsupportedApiVersionError(
            requested, [str(v) for v in supported],
            ErrorContext(path=request.url.path, api_version=requested),
        )
    request.state.api_version = version
    return version


def add_version_reporting(app: FastAPI, settings: Settings) -> None:
    """Advertise supported versions on every /api response."""
    if not settings.report_api_versions:
        return
    header_value = ", ".join(str(v) for v in supported_versions(settings))

    @app.middleware("http")
    async def report_api_versions(request: Request, call_next):
        response = await call_next(request)
        if request.url.path.startswith(UNVERSIONED_PREFIX):
            response.headers[SUPPORTED_VERSIONS_HEADER] = header_value
        return response
