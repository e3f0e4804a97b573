"""
Frontmatter metadata for transcript documents.

Builds the "---" delimited header that is written at the top of every
transcript file. The header layout is consumed by downstream tooling, so
the rendered text must not change byte-for-byte.
"""

from typing import Iterable, Optional, Sequence, Tuple
from pydantic import BaseModel, ConfigDict, Field

FRONTMATTER_DELIMITER = "---"


def format_list(keyword: str, values: Iterable[str]) -> str:
    """Render "keyword: v1, v2" with each value stripped."""
    return f"{keyword}: {', '.join(value.strip() for value in values)}\n"


class Metadata(BaseModel):
    """
    Transcript frontmatter.

    Scalar fields are written verbatim. Optional lists are written only
    when given (an empty list still produces its key). Lists are stored
    as tuples, so the rendered block cannot change after construction.

    Example:
        >>> meta = Metadata("Talk", "alice", "http://x", tags=["a", " b "])
        >>> "tags: a, b" in meta.to_string()
        True
    """
    file_title: str = Field(..., description="Transcript title")
    username: str = Field(..., description="Who transcribed the media")
    source: str = Field(..., description="Media URL")
    tags: Optional[Tuple[str, ...]] = None
    speakers: Optional[Tuple[str, ...]] = None
    categories: Optional[Tuple[str, ...]] = None

    model_config = ConfigDict(frozen=True)

    def __init__(
        self,
        file_title: str,
        username: str,
        source: str,
        tags: Optional[Sequence[str]] = None,
        speakers: Optional[Sequence[str]] = None,
        categories: Optional[Sequence[str]] = None,
    ):
        super().__init__(
            file_title=file_title,
            username=username,
            source=source,
            tags=tags,
            speakers=speakers,
            categories=categories,
        )

    def to_string(self) -> str:
        """Return the rendered frontmatter block."""
        # trailing space after the username is part of the format
        text = (
            f"{FRONTMATTER_DELIMITER}\n"
            f"title: {self.file_title}\n"
            f"transcript_by: {self.username} \n"
            f"media: {self.source}\n"
        )

        if self.tags is not None:
            text += format_list("tags", self.tags)

        if self.speakers is not None:
            text += format_list("speakers", self.speakers)

        if self.categories is not None:
            text += format_list("categories", self.categories)

        return text

    def __str__(self) -> str:
        return self.to_string()
