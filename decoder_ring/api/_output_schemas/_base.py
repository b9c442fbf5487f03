"""Fields shared by every command output."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Common shape of a command's ``StageResult.output``.

    A failed command reports its message in errors; warnings are reserved for
    non-fatal notes and are empty for every current mode.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Failure messages; empty on success")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal notes")
