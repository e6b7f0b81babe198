"""Compare two reference snapshots."""

from typing import Iterable

from refwatch.types import ReferenceDelta, ReferenceRecord


class RemoteDiffer:
  """Computes new/updated/deleted references between two snapshots.

  Output order: new and updated entries in the order of the new snapshot,
  followed by deleted entries in the order of the old snapshot.
  """

  def diff(
    self,
    old_snapshot: Iterable[ReferenceRecord],
    new_snapshot: Iterable[ReferenceRecord],
  ) -> list[ReferenceDelta]:
    old_snapshot = list(old_snapshot)
    old_hashes = {record.name: record.hash for record in old_snapshot}
    deltas: list[ReferenceDelta] = []
    seen: set[str] = set()

    for record in new_snapshot:
      seen.add(record.name)
      old_hash = old_hashes.get(record.name)
      if old_hash == record.hash:
        continue
      state = "new" if old_hash is None else "updated"
      deltas.append(ReferenceDelta(state=state, record=record))

    for record in old_snapshot:
      if record.name not in seen:
        deltas.append(ReferenceDelta(state="deleted", record=record))

    return deltas


async def find_remote_updates(
  old_snapshot: Iterable[ReferenceRecord],
  new_snapshot: Iterable[ReferenceRecord],
) -> list[ReferenceDelta]:
  """Coroutine form of RemoteDiffer.diff for async callers."""
  return RemoteDiffer().diff(old_snapshot, new_snapshot)
