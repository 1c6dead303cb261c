"""RFC 9457 Problem Details for HTTP APIs.

Every error response of the API uses this body, with the request trace id
attached.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> ErrorDetail(
        ...     field="amount",
        ...     code="greater_than",
        ...     message="Input should be greater than 0",
        ... )
    """

    field: str = Field(..., description="Field name as sent by the client")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details body.

    Attributes:
        type: URI reference identifying the problem type.
        title: Short, human-readable summary of the problem type.
        status: HTTP status code for this occurrence.
        detail: Explanation specific to this occurrence.
        instance: Request path of this occurrence.
        errors: Field-level violations (validation failures only).
        trace_id: Request trace id.
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:4000/errors/forbidden"],
    )
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", examples=[403])
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["new row violates row-level security policy"],
    )
    instance: str = Field(
        ..., description="Request path", examples=["/transactions"]
    )
    errors: list[ErrorDetail] | None = Field(
        None, description="List of field-specific errors"
    )
    trace_id: str | None = Field(None, description="Request trace ID")
