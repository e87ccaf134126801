from pydantic import BaseModel, ConfigDict, Field, model_validator


class Token(BaseModel):
    """A token and the [start, end) code-point range it covers in its document."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, description="Normalized token text")
    start: int = Field(..., ge=0, description="Offset of the first code point")
    end: int = Field(..., ge=0, description="Offset one past the last code point")

    @model_validator(mode="after")
    def validate_range(self) -> "Token":
        """A token always covers at least one code point."""
        if self.end <= self.start:
            raise ValueError(
                f"Token range [{self.start}, {self.end}) must not be empty"
            )
        return self
