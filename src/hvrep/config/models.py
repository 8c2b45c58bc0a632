from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

ScalarName = Literal["float64", "float32", "longdouble", "fraction"]
OutputFormat = Literal["tsv", "json"]


class SelectionConfig(BaseModel):
    num: int = Field(..., ge=1, description="Number of points to return")
    reference: list[float] | None = Field(
        default=None,
        description="Reference point, one value per objective. Defaults to the chain's lower-left corner",
    )
    dtype: ScalarName = Field("float64", description="Scalar type used for the geometry")
    precision: int = Field(12, ge=0, le=30, description="Decimals in tab-separated output")
    input: str | None = Field(
        default=None, description="Segment file; stdin is used when not set"
    )
    output_format: OutputFormat = Field("tsv", description="Output rendering")

    @field_validator("input")
    @classmethod
    def non_empty_input(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("input path must not be empty")
        return v

    @classmethod
    def json_schema(cls) -> dict:
        return cls.model_json_schema()


def validate_config_payload(payload: dict) -> SelectionConfig:
    try:
        return SelectionConfig.model_validate(payload)
    except ValidationError as e:
        # Raise a ValueError with concise message suitable for CLI output
        raise ValueError(e) from e
