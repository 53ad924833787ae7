"""
Execution of the Build Tools installer.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional

from msbuildkit.core.exceptions import InstallerExecutionError
from msbuildkit.core.interfaces import Node, RemoteFileHandle

logger = logging.getLogger(__name__)

# 3010: success, reboot required
SUCCESS_EXIT_CODES = frozenset({0, 3010})


def is_success(exit_code: int) -> bool:
    """Whether an installer exit code means success."""
    return exit_code in SUCCESS_EXIT_CODES


class InstallerRunner(ABC):
    """Runs an installer command line on a node."""

    @abstractmethod
    def run(
        self, node: Node, command: List[str], cwd: Optional[RemoteFileHandle] = None
    ) -> int:
        """
        Run a command on a node and wait for it.

        Args:
            node: Node to run on
            command: Executable followed by its arguments
            cwd: Working directory

        Returns:
            Process exit code
        """
        pass


class SubprocessRunner(InstallerRunner):
    """Runs the installer on the local machine."""

    def __init__(self, timeout: Optional[float] = None):
        """
        Args:
            timeout: Seconds to wait for the installer (default: no limit)
        """
        self.timeout = timeout

    def run(
        self, node: Node, command: List[str], cwd: Optional[RemoteFileHandle] = None
    ) -> int:
        logger.info(f"Running on {node.name}: {subprocess.list2cmdline(command)}")
        try:
            result = subprocess.run(
                command,
                cwd=cwd.remote if cwd is not None else None,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise InstallerExecutionError(
                f"Installer not found: {command[0]}"
            ) from e
        except subprocess.TimeoutExpired as e:
            raise InstallerExecutionError(
                f"Installer did not finish within {self.timeout}s"
            ) from e

        if result.stdout:
            logger.debug(result.stdout)
        if result.stderr:
            logger.debug(result.stderr)
        logger.debug(f"Installer exited with code {result.returncode}")
        return result.returncode
