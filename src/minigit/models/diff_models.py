"""Models for representing line-level file deltas."""

from pydantic import BaseModel, ConfigDict


class FileDelta(BaseModel):
    """Positional line-level change between two versions of one file."""

    model_config = ConfigDict(frozen=True)

    filename: str
    added_lines: tuple[str, ...] = ()
    deleted_lines: tuple[str, ...] = ()
    modified_line_indices: tuple[int, ...] = ()  # 0-based

    @property
    def is_empty(self) -> bool:
        return not (self.added_lines or self.deleted_lines or self.modified_line_indices)
