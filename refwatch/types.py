"""Data types for remote references and their deltas."""

from dataclasses import dataclass, field
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

RemoteState = Literal["new", "updated", "deleted"]


class ReferenceRecord(BaseModel):
  """One line of `git ls-remote` output."""

  model_config = ConfigDict(frozen=True)

  name: str = Field(..., description="Reference path, e.g. `refs/heads/master`")
  hash: str = Field(
    ...,
    description="Object id the reference points to, e.g. "
    "`8e5423e991e8cd0988d0c4a3f4ac4ca1af7d148a`",
  )


class ReferenceDelta(BaseModel):
  """A single change between two reference snapshots."""

  model_config = ConfigDict(frozen=True)

  state: RemoteState
  record: ReferenceRecord


@dataclass
class ParseFailure:
  """A line that failed validation.

  Attributes:
      raw_line: The offending line, as read
      reason: The validator's error
  """

  raw_line: str
  reason: ValueError


@dataclass
class ParseResult:
  records: list[ReferenceRecord] = field(default_factory=list)
  failures: list[ParseFailure] = field(default_factory=list)


# Snapshot of one fetch; order is kept for stable logs and tests
ReferenceSnapshot = list[ReferenceRecord]
