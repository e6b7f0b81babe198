"""List the references of a remote repository over SSH."""

import asyncio
import logging
import shlex
from pathlib import Path
from typing import Callable, Optional

from git import Git
from git.exc import CommandError

from refwatch.config import RefwatchConfig
from refwatch.exceptions import RemoteFetchError
from refwatch.keys import KeyMaterialHandler
from refwatch.parser import RemoteOutputParser
from refwatch.types import ReferenceSnapshot

logger = logging.getLogger(__name__)

# (repository_url, environment overrides) -> captured stdout
LsRemoteInvoker = Callable[[str, dict[str, str]], str]


def build_ssh_command(key_path: Path, ssh_executable: Optional[str] = None) -> str:
  """SSH transport command that forces the given identity file.

  Host key checking is disabled on purpose: fetches run on short-lived agents
  with no known_hosts, so the first contact with a host is trusted.
  """
  ssh = ssh_executable or RefwatchConfig.SSH_EXECUTABLE
  return f"{ssh} -i {shlex.quote(str(key_path))} -o StrictHostKeyChecking=no"


def git_ls_remote(repository_url: str, env: dict[str, str]) -> str:
  """Run `git ls-remote <url>` with extra environment variables."""
  git = Git()
  with git.custom_environment(**env):
    return git.execute(
      [RefwatchConfig.GIT_EXECUTABLE, "ls-remote", repository_url],
      strip_newline_in_stdout=False,
    )


class RemoteFetcher:
  """Fetches a validated reference snapshot for one repository URL."""

  def __init__(
    self,
    key_handler: Optional[KeyMaterialHandler] = None,
    parser: Optional[RemoteOutputParser] = None,
    invoker: Optional[LsRemoteInvoker] = None,
  ):
    self.key_handler = key_handler or KeyMaterialHandler()
    self.parser = parser or RemoteOutputParser()
    self.invoker = invoker or git_ls_remote

  async def fetch(self, repository_url: str, private_key: str) -> ReferenceSnapshot:
    """
    List remote references of `repository_url`.

    Even if the repository is public, a private key is still required: many
    providers (GitHub in particular) reject SSH connections without one. The
    key only has to be known to the provider, e.g. as a deploy key of any
    repository.

    Args:
        repository_url: SSH URL of the repository
        private_key: Private key contents (not a path)

    Returns:
        Parsed references; malformed lines are logged and skipped

    Raises:
        KeyProvisionError: If the key file cannot be written
        RemoteFetchError: If git ls-remote fails
    """
    async with self.key_handler.ephemeral_key(private_key) as key_path:
      env = {"GIT_SSH_COMMAND": build_ssh_command(key_path)}
      try:
        output = await asyncio.to_thread(self.invoker, repository_url, env)
      except (CommandError, OSError) as e:
        raise RemoteFetchError.from_exception(
          e, context=f"git ls-remote {repository_url} failed"
        ) from e

      result = self.parser.parse(output)
      for failure in result.failures:
        logger.warning(
          f"Failed to parse git ls-remote output:\n{failure.reason}\n"
          f'Offending value: "{failure.raw_line}"'
        )
      return result.records
