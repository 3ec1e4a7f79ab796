"""Domain models for records, query terms, and prepared match text."""

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, field_validator


class Record(BaseModel):
    """A page candidate: its title and URL as plain strings."""

    title: str = ""
    url: str = ""

    @field_validator("title", "url", mode="before")
    @classmethod
    def absent_text_is_empty(cls, v: object) -> object:
        return "" if v is None else v


class QueryTerm(BaseModel):
    """One whitespace-delimited query token and its case policy."""

    model_config = ConfigDict(frozen=True)

    term: str
    ignore_case: bool

    @classmethod
    def from_token(cls, token: str) -> "QueryTerm":
        """Build a term, ignoring case only when the token has no uppercase letters."""
        return cls(term=token, ignore_case=token == token.lower())


class MatchText(NamedTuple):
    """A field prepared for matching: original-case text and its lowercase copy."""

    text: str
    lower: str
