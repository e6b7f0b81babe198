"""Parser for `git ls-remote` output.

Each line is `<hash><whitespace><refname>`. Lines are validated one by one with
a pluggable validator; malformed lines are collected instead of aborting the
parse.
"""

from typing import Annotated, Callable, Optional

from pydantic import StringConstraints, TypeAdapter

from refwatch.types import ParseFailure, ParseResult, ReferenceRecord

ObjectHash = Annotated[str, StringConstraints(pattern=r"^[0-9a-fA-F]{4,64}$")]
RefName = Annotated[str, StringConstraints(min_length=1, pattern=r"^\S+$")]

RemoteInfoTuple = tuple[ObjectHash, RefName]

# Takes the whitespace-split tokens of one line, returns (hash, name).
# Must raise ValueError (pydantic.ValidationError is one) on bad input.
TupleValidator = Callable[[list[str]], tuple[str, str]]

_remote_info_adapter = TypeAdapter(RemoteInfoTuple)


def validate_remote_tuple(tokens: list[str]) -> tuple[str, str]:
  """Default validator: exactly two tokens, a hex object id then a ref name."""
  return _remote_info_adapter.validate_python(tokens)


class RemoteOutputParser:
  """Splits ls-remote output into ReferenceRecords and ParseFailures."""

  def __init__(self, validator: Optional[TupleValidator] = None):
    self.validator = validator or validate_remote_tuple

  def parse(self, raw_output: str) -> ParseResult:
    """Parse the whole output blob.

    Args:
        raw_output: Captured stdout of `git ls-remote`

    Returns:
        ParseResult with records and failures, both in encounter order
    """
    result = ParseResult()

    for line in raw_output.split("\n"):
      if not line.strip():
        continue

      tokens = line.split()
      try:
        hash_, name = self.validator(tokens)
      except ValueError as e:
        result.failures.append(ParseFailure(raw_line=line, reason=e))
        continue

      result.records.append(ReferenceRecord(hash=hash_, name=name))

    return result
