"""Report models for working-tree status."""

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class StatusReport(BaseModel):
    model_config = ConfigDict(frozen=False)

    added: set[str] = Field(default_factory=set)      # staged, never committed
    modified: set[str] = Field(default_factory=set)   # fingerprint differs from last commit
    deleted: set[str] = Field(default_factory=set)    # committed, missing from disk

    @property
    def is_clean(self) -> bool:
        return not (self.added or self.modified or self.deleted)

    @field_serializer("added", "modified", "deleted")
    def _serialize_sorted(self, names: set[str]) -> list[str]:
        return sorted(names)
