"""Ephemeral on-disk private keys for a single git invocation."""

import asyncio
import logging
import os
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from refwatch.config import RefwatchConfig
from refwatch.exceptions import KeyProvisionError

logger = logging.getLogger(__name__)

KEY_FILE_MODE = 0o600


def _normalize_key(key: str) -> str:
  return key.rstrip("\n") + "\n"


def _write_key(path: Path, contents: str) -> None:
  # O_EXCL: a fresh uuid path must never already exist
  fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, KEY_FILE_MODE)
  try:
    with os.fdopen(fd, "w") as f:
      f.write(contents)
    os.chmod(path, KEY_FILE_MODE)
  except BaseException:
    path.unlink(missing_ok=True)
    raise


class KeyMaterialHandler:
  """Writes a private key to a unique, owner-only file and removes it again."""

  def __init__(self, key_dir: Optional[str | Path] = None):
    self.key_dir = Path(key_dir or RefwatchConfig.KEY_DIR)

  def new_key_path(self) -> Path:
    return self.key_dir / f"{uuid.uuid4()}.key"

  async def provision(self, key: str) -> Path:
    """Write `key` to a fresh `<key_dir>/<uuid>.key` with mode 600.

    Raises:
      KeyProvisionError: If the file cannot be written or restricted
    """
    path = self.new_key_path()
    write = asyncio.ensure_future(
      asyncio.to_thread(_write_key, path, _normalize_key(key))
    )
    try:
      await asyncio.shield(write)
    except asyncio.CancelledError:
      # The worker thread keeps writing; wait for it, then remove the file
      await asyncio.wait([write])
      if write.exception() is None:
        await self.release(path)
      raise
    except OSError as e:
      raise KeyProvisionError.from_exception(
        e, context=f"Failed to write private key file {path}"
      ) from e
    return path

  async def release(self, path: Path) -> None:
    """Delete the key file. Failures are logged, never raised."""
    try:
      await asyncio.to_thread(path.unlink)
    except OSError as e:
      logger.warning(f"Failed to delete private key file {path}\n{e}")

  @asynccontextmanager
  async def ephemeral_key(self, key: str) -> AsyncIterator[Path]:
    """Provision a key for the duration of the block.

    The file is released on every exit path, cancellation included.
    """
    path = await self.provision(key)
    try:
      yield path
    finally:
      await self.release(path)
