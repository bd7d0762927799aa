"""
Search parameter schema for the Perplexity Search API.

Defines the Pydantic model describing which inputs are legal, how they map to
wire fields, and the JSON schema published to agents for tool discovery.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationError, ValidationInfo, field_validator

from .exceptions import PerplexitySearchError

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 10
DEFAULT_MAX_TOKENS_PER_PAGE = 1024
DATE_PATTERN = r"^[0-9]{1,2}/[0-9]{1,2}/[0-9]{4}$"

QueryString = Annotated[str, StringConstraints(min_length=1, max_length=500)]
LanguageCode = Annotated[str, StringConstraints(min_length=2, max_length=2)]
RecencyFilter = Literal["day", "week", "month", "year"]

# Optional wire keys; sent only when the value is present and non-empty.
_OPTIONAL_FIELDS = (
    "country",
    "domain_filter",
    "language_filter",
    "after_date",
    "before_date",
    "recency_filter",
)


class SearchParameters(BaseModel):
    """Validated input for a single Perplexity search."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    query: Union[QueryString, Annotated[List[QueryString], Field(min_length=1, max_length=5)]] = Field(
        ...,
        description=(
            "Search query (string) or multiple queries (array of up to 5 strings). "
            "Multi-query searches return combined results from all queries."
        ),
    )
    max_results: int = Field(
        default=DEFAULT_MAX_RESULTS,
        strict=True,
        ge=1,
        le=20,
        description="Maximum number of search results to return (1-20, default: 10)",
    )
    max_tokens_per_page: int = Field(
        default=DEFAULT_MAX_TOKENS_PER_PAGE,
        strict=True,
        ge=256,
        le=2048,
        description="Maximum number of tokens to extract per search result page (256-2048, default: 1024)",
    )
    country: Optional[str] = Field(
        default=None,
        min_length=2,
        max_length=2,
        description="Two-letter ISO 3166-1 alpha-2 country code for regional search results (e.g., 'US', 'GB', 'FR')",
    )
    domain_filter: Optional[List[str]] = Field(
        default=None,
        alias="search_domain_filter",
        max_length=20,
        description=(
            "List of domains to include or exclude from search results (max 20). "
            "To include: ['nature.com', 'science.org']. To exclude: ['-example.com', '-spam.net']"
        ),
    )
    language_filter: Optional[List[LanguageCode]] = Field(
        default=None,
        alias="search_language_filter",
        max_length=10,
        description="List of ISO 639-1 language codes to filter results (max 10, lowercase). Examples: ['en', 'fr', 'de']",
    )
    after_date: Optional[str] = Field(
        default=None,
        alias="search_after_date",
        pattern=DATE_PATTERN,
        description=(
            "Include only results published after this date. Format: 'MM/DD/YYYY' (e.g., '3/1/2025'). "
            "Cannot be used with search_recency_filter."
        ),
    )
    before_date: Optional[str] = Field(
        default=None,
        alias="search_before_date",
        pattern=DATE_PATTERN,
        description=(
            "Include only results published before this date. Format: 'MM/DD/YYYY' (e.g., '3/15/2025'). "
            "Cannot be used with search_recency_filter."
        ),
    )
    recency_filter: Optional[RecencyFilter] = Field(
        default=None,
        alias="search_recency_filter",
        description="Filter results by relative time period. Cannot be used with search_after_date or search_before_date.",
    )

    @field_validator("max_results", "max_tokens_per_page", mode="before")
    @classmethod
    def null_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        # Tool callers often send null for optional arguments.
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @property
    def queries(self) -> List[str]:
        """The query normalised to a list of strings."""
        if isinstance(self.query, str):
            return [self.query]
        return list(self.query)

    @property
    def has_date_range(self) -> bool:
        return self.after_date is not None or self.before_date is not None

    def to_request_body(self) -> Dict[str, Any]:
        """Build the JSON body sent to the search endpoint."""
        body: Dict[str, Any] = {
            "query": self.query if isinstance(self.query, str) else list(self.query),
            "max_results": self.max_results,
            "max_tokens_per_page": self.max_tokens_per_page,
        }
        for name in _OPTIONAL_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, list):
                if not value:
                    continue
                value = list(value)
            wire_key = type(self).model_fields[name].alias or name
            body[wire_key] = value
        return body


def _describe_errors(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "parameters"
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


def validate_parameters(params: Mapping[str, Any]) -> SearchParameters:
    """Validate raw tool arguments, raising ``invalid_input`` on failure."""
    try:
        parameters = SearchParameters.model_validate(dict(params))
    except ValidationError as exc:
        raise PerplexitySearchError(
            code="invalid_input",
            message=f"Invalid search parameters: {_describe_errors(exc)}",
            meta={
                "errors": [
                    {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
                    for err in exc.errors()
                ]
            },
        ) from exc

    if parameters.recency_filter is not None and parameters.has_date_range:
        logger.warning(
            "search_recency_filter combined with a date range; forwarding both to the API",
            extra={"recency_filter": parameters.recency_filter},
        )
    return parameters


def parameters_schema() -> Dict[str, Any]:
    """JSON schema describing the tool arguments (wire keys)."""
    return SearchParameters.model_json_schema(by_alias=True)
