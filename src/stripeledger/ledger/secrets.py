"""1Password secret reference resolution."""

import logging
import shutil
import subprocess
from typing import Optional

from stripeledger.domain.errors import SecretResolutionError, secret_reference_failed

logger = logging.getLogger(__name__)


class OnePasswordResolver:
    """Resolve ``op://vault/item/field`` references with the 1Password CLI."""

    def __init__(self, executable: str = "op", timeout: Optional[float] = 30.0):
        self.executable = executable
        self.timeout = timeout

    def resolve(self, reference: str) -> str:
        """Read a secret reference.

        Raises:
            SecretResolutionError: If the CLI is missing, fails or returns nothing
        """
        path = shutil.which(self.executable)
        if path is None:
            raise SecretResolutionError(
                secret_reference_failed(reference, f"'{self.executable}' executable not found on PATH")
            )

        logger.debug("Resolving secret reference %s", reference)
        try:
            completed = subprocess.run(
                [path, "read", "--no-newline", reference],
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise SecretResolutionError(secret_reference_failed(reference, str(e))) from e

        if completed.returncode != 0:
            detail = completed.stderr.strip() or f"exit status {completed.returncode}"
            raise SecretResolutionError(secret_reference_failed(reference, detail))

        secret = completed.stdout.strip()
        if not secret:
            raise SecretResolutionError(secret_reference_failed(reference, "empty value"))
        return secret
