"""refwatch: list remote git references over SSH and diff snapshots of them."""

from .differ import RemoteDiffer, find_remote_updates
from .exceptions import KeyProvisionError, RefwatchError, RemoteFetchError
from .fetcher import RemoteFetcher
from .keys import KeyMaterialHandler
from .parser import RemoteOutputParser, validate_remote_tuple
from .types import (
  ParseFailure,
  ParseResult,
  ReferenceDelta,
  ReferenceRecord,
  ReferenceSnapshot,
  RemoteState,
)

__all__ = [
  "KeyMaterialHandler",
  "KeyProvisionError",
  "ParseFailure",
  "ParseResult",
  "ReferenceDelta",
  "ReferenceRecord",
  "ReferenceSnapshot",
  "RefwatchError",
  "RemoteDiffer",
  "RemoteFetchError",
  "RemoteFetcher",
  "RemoteOutputParser",
  "RemoteState",
  "find_remote_updates",
  "validate_remote_tuple",
]
