"""Pydantic schemas for parsed application rows."""

from pydantic import BaseModel, ConfigDict, Field

from corgi_cover.models.domain.application import Application


class ApplicationRow(BaseModel):
    """
    One row of an application table keyed by its header tokens.

    Name and state arrive as the raw token text. Counts must already be
    integers (the reader coerces integer-looking tokens) and are never
    negative. Columns beyond the application fields, such as the rejected
    stream's ``reason``, are ignored.
    """

    name: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    corgi_count: int = Field(..., ge=0, strict=True, alias="corgi-count")
    policy_count: int = Field(..., ge=0, strict=True, alias="policy-count")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_domain(self) -> Application:
        """Convert the validated row into an Application."""
        return Application(
            name=self.name,
            state=self.state,
            corgi_count=self.corgi_count,
            policy_count=self.policy_count,
        )
