"""JSON (de)serialization of snapshots and deltas for the command line."""

from pathlib import Path

from pydantic import TypeAdapter

from refwatch.types import ReferenceDelta, ReferenceRecord, ReferenceSnapshot

_snapshot_adapter = TypeAdapter(list[ReferenceRecord])
_delta_adapter = TypeAdapter(list[ReferenceDelta])


def dump_snapshot(snapshot: ReferenceSnapshot) -> str:
  return _snapshot_adapter.dump_json(snapshot, indent=2).decode()


def load_snapshot(path: Path) -> ReferenceSnapshot:
  """Read a snapshot file; a missing file is an empty snapshot."""
  if not path.exists():
    return []
  return _snapshot_adapter.validate_json(path.read_text())


def save_snapshot(path: Path, snapshot: ReferenceSnapshot) -> None:
  tmp_path = path.with_suffix(path.suffix + ".tmp")
  try:
    tmp_path.write_text(dump_snapshot(snapshot) + "\n")
    tmp_path.replace(path)
  except OSError:
    tmp_path.unlink(missing_ok=True)
    raise


def dump_deltas(deltas: list[ReferenceDelta]) -> str:
  return _delta_adapter.dump_json(deltas, indent=2).decode()
