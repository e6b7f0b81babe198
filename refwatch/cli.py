#!/usr/bin/env python3
"""Command line entry point for refwatch.

Subcommands:
  ls    print the references of a remote repository as JSON
  diff  print the delta between two snapshot files
  poll  fetch, diff against a snapshot file, then overwrite it
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from refwatch.config import RefwatchConfig, get_private_key
from refwatch.differ import RemoteDiffer
from refwatch.exceptions import RefwatchError
from refwatch.fetcher import RemoteFetcher
from refwatch.snapshot_io import (
  dump_deltas,
  dump_snapshot,
  load_snapshot,
  save_snapshot,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(
    prog="refwatch",
    description="List and diff branch/tag references of remote git repositories",
  )
  subparsers = parser.add_subparsers(dest="command", required=True)

  ls_parser = subparsers.add_parser("ls", help="List remote references")
  ls_parser.add_argument("repository_url", help="SSH URL of the repository")
  ls_parser.add_argument("--key-file", type=Path, help="Path to SSH private key")
  ls_parser.add_argument(
    "--output", type=Path, help="Write the snapshot to this file instead of stdout"
  )

  diff_parser = subparsers.add_parser("diff", help="Diff two snapshot files")
  diff_parser.add_argument("old", type=Path, help="Older snapshot (JSON)")
  diff_parser.add_argument("new", type=Path, help="Newer snapshot (JSON)")

  poll_parser = subparsers.add_parser(
    "poll", help="Fetch, print changes since the last snapshot, store the new one"
  )
  poll_parser.add_argument("repository_url", help="SSH URL of the repository")
  poll_parser.add_argument(
    "--snapshot", type=Path, required=True, help="Snapshot file to diff against"
  )
  poll_parser.add_argument("--key-file", type=Path, help="Path to SSH private key")

  return parser


async def run(args: argparse.Namespace, fetcher: Optional[RemoteFetcher] = None) -> int:
  fetcher = fetcher or RemoteFetcher()

  if args.command == "diff":
    deltas = RemoteDiffer().diff(load_snapshot(args.old), load_snapshot(args.new))
    print(dump_deltas(deltas))
    return 0

  private_key = get_private_key(args.key_file)
  snapshot = await fetcher.fetch(args.repository_url, private_key)
  logger.info(f"Fetched {len(snapshot)} references from {args.repository_url}")

  if args.command == "ls":
    if args.output:
      save_snapshot(args.output, snapshot)
    else:
      print(dump_snapshot(snapshot))
    return 0

  # poll
  previous = load_snapshot(args.snapshot)
  deltas = RemoteDiffer().diff(previous, snapshot)
  print(dump_deltas(deltas))
  save_snapshot(args.snapshot, snapshot)
  return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
  """Main entry point."""
  args = build_parser().parse_args(argv)

  logging.basicConfig(
    level=RefwatchConfig.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
  )

  try:
    return asyncio.run(run(args))
  except RefwatchError as e:
    logger.debug(f"{e.name} ({e.source}): {e.caused_by}")
    print(f"Error: {e.description}", file=sys.stderr)
    return 1
  except (ValueError, OSError) as e:
    print(f"Error: {e}", file=sys.stderr)
    return 1


if __name__ == "__main__":
  sys.exit(main())
