"""
Configuration module for refwatch
Handles environment settings and private key lookup
"""

import os
import logging
import tempfile
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()

PRIVATE_KEY_ENV = "REFWATCH_PRIVATE_KEY"
PRIVATE_KEY_FILE_ENV = "REFWATCH_PRIVATE_KEY_FILE"


class RefwatchConfig:
  """Runtime settings"""

  # Where ephemeral key files are written
  KEY_DIR = os.getenv("REFWATCH_KEY_DIR", tempfile.gettempdir())

  # Executables
  GIT_EXECUTABLE = os.getenv("REFWATCH_GIT_EXECUTABLE", "git")
  SSH_EXECUTABLE = os.getenv("REFWATCH_SSH_EXECUTABLE", "ssh")

  # Logging
  LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def get_private_key(key_file: Optional[Path] = None) -> str:
  """
  Resolve the SSH private key used for ls-remote

  Lookup order: explicit file, REFWATCH_PRIVATE_KEY_FILE, REFWATCH_PRIVATE_KEY.

  Args:
    key_file: Optional path to a private key file

  Returns:
    The private key contents

  Raises:
    ValueError: If no key is configured
  """
  if key_file is None and os.getenv(PRIVATE_KEY_FILE_ENV):
    key_file = Path(os.environ[PRIVATE_KEY_FILE_ENV])

  if key_file is not None:
    logger.debug(f"Reading private key from {key_file}")
    return key_file.read_text()

  value = os.getenv(PRIVATE_KEY_ENV)
  if value:
    logger.debug(f"Private key read from {PRIVATE_KEY_ENV}")
    return value

  raise ValueError(
    "Private key not found. Pass --key-file or set "
    f"{PRIVATE_KEY_FILE_ENV} / {PRIVATE_KEY_ENV}"
  )
