"""
Custom exceptions for refwatch
"""

from typing import Literal, Optional


# Where a fetch-level error originated
ErrorSource = Literal[
  "keys",  # Ephemeral private key provisioning
  "git",  # git ls-remote invocation
]


class RefwatchError(Exception):
  """
  Base exception for fetch-level failures.
  Subclasses set `name` (stable identifier) and `source`.
  """

  name: str
  source: ErrorSource

  def __init__(self, description: str, caused_by: Optional[str] = None):
    """
    Initialize a refwatch error

    Args:
        description: Human-readable error message
        caused_by: Original error details if this wraps another error
    """
    self.description: str = description
    self.caused_by: Optional[str] = caused_by
    super().__init__(description)

  @classmethod
  def from_exception(
    cls, e: Exception, context: Optional[str] = None
  ) -> "RefwatchError":
    """
    Create an error from an existing exception

    Args:
        e: The original exception
        context: Additional context to prepend to the description

    Returns:
        Error with original exception details preserved
    """
    original_msg = str(e)
    description = f"{context}: {original_msg}" if context else original_msg

    return cls(description, caused_by=f"{e.__class__.__name__}: {original_msg}")


class KeyProvisionError(RefwatchError):
  """The ephemeral private key could not be written or restricted"""

  name = "KEY_PROVISION_FAILED"
  source = "keys"


class RemoteFetchError(RefwatchError):
  """git ls-remote failed (bad URL, auth rejected, network, missing git...)"""

  name = "REMOTE_FETCH_FAILED"
  source = "git"
