"""RFC 9457 Problem Details for HTTP APIs.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ProblemDetails: Error response schema
    PROBLEM_JSON_MEDIA_TYPE: Media type of problem documents
"""

from pydantic import BaseModel, Field

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/not-found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="ALPS profiles are disabled",
        ...     instance="/profile",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/not-found"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Resource Not Found"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[404],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Unknown resource 'people'"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/profile/people"],
    )
