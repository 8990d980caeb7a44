"""Manifest (``agent.json``) schema.

Validation is exposed as a result value rather than an exception:
:func:`validate_manifest` returns a :class:`ManifestValidation` that holds
either the parsed :class:`Manifest` or a list of human-readable errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

from pydantic import (
    AnyUrl,
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

SourceType = Literal["url", "local", "mixed"]
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
AuthKind = Literal["none", "api_key", "oauth", "unknown"]

_any_url = TypeAdapter(AnyUrl)
_aware_datetime = TypeAdapter(AwareDatetime)


def _check_url(value: Optional[str]) -> Optional[str]:
    """Validate *value* as an http(s) URL but keep the caller's spelling.

    ``AnyUrl`` is used rather than ``HttpUrl`` so long URLs are not capped.
    """
    if value is None:
        return value
    url = _any_url.validate_python(value)
    if url.scheme not in ("http", "https") or not url.host:
        raise ValueError("URL must be an absolute http(s) URL")
    return value


class Capability(BaseModel):
    name: str
    description: Optional[str] = None
    url: Optional[str] = None

    @field_validator("url")
    @classmethod
    def check_url(cls, value: Optional[str]) -> Optional[str]:
        return _check_url(value)


class Endpoint(BaseModel):
    path: str
    method: HttpMethod = "GET"
    description: Optional[str] = None
    auth: AuthKind = "unknown"


class PageSummary(BaseModel):
    source: str
    title: str
    summary: str
    keywords: List[str] = Field(default_factory=list)


class Manifest(BaseModel):
    """The structured metadata artifact describing a documentation corpus."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str
    description: str
    source_type: SourceType = Field(alias="sourceType")
    homepage: Optional[str] = None
    docs: List[PageSummary]
    capabilities: List[Capability] = Field(default_factory=list)
    endpoints: List[Endpoint] = Field(default_factory=list)
    pricing: Optional[str] = None
    auth: Optional[str] = None
    generated_at: str = Field(alias="generatedAt")
    metadata: Dict[str, str] = Field(default_factory=dict)

    @field_validator("homepage")
    @classmethod
    def check_homepage(cls, value: Optional[str]) -> Optional[str]:
        return _check_url(value)

    @field_validator("generated_at")
    @classmethod
    def check_generated_at(cls, value: str) -> str:
        _aware_datetime.validate_python(value)
        return value

    def to_json_dict(self) -> Dict[str, Any]:
        """Serialise with camelCase keys, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


@dataclass
class ManifestValidation:
    """Outcome of validating a manifest payload."""

    manifest: Optional[Manifest] = None
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.manifest is not None


def validate_manifest(payload: Dict[str, Any]) -> ManifestValidation:
    """Validate *payload* against :class:`Manifest`."""
    try:
        return ManifestValidation(manifest=Manifest.model_validate(payload))
    except ValidationError as exc:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        ]
        return ManifestValidation(errors=errors)
