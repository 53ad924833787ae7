"""
Protection of the MSBuild program-database server from process reaping.

Build orchestrators kill every process a build left behind. `mspdbsrv.exe`
is shared between concurrent builds on a node, and killing it breaks the
builds still using it (JENKINS-9104). The veto below exempts it.
"""

import re
from dataclasses import dataclass
from typing import Optional, Sequence

MSPDBSRV_IMAGE = "mspdbsrv.exe"
VETO_MESSAGE = (
    "MSBuild Plugin vetoes killing mspdbsrv.exe, see JENKINS-9104 for all the details"
)

_PATH_SEPARATORS = re.compile(r"[\\/]")


@dataclass(frozen=True)
class ProcessSnapshot:
    """Command line of a process about to be killed; element 0 is the executable."""

    arguments: Sequence[str] = ()


@dataclass(frozen=True)
class VetoCause:
    """Reason a process must not be killed."""

    message: str


class MsBuildKillingVeto:
    """Vetoes killing mspdbsrv.exe. Stateless, safe to share between threads."""

    def veto_process_killing(
        self, process: Optional[ProcessSnapshot]
    ) -> Optional[VetoCause]:
        """
        Decide whether a process must be spared.

        Args:
            process: Process snapshot, may be None

        Returns:
            VetoCause for mspdbsrv.exe, None for anything else
        """
        if process is None or not process.arguments:
            return None

        executable = process.arguments[0]
        if not executable:
            return None

        image = _PATH_SEPARATORS.split(executable)[-1]
        if image.lower() == MSPDBSRV_IMAGE:
            return VetoCause(VETO_MESSAGE)
        return None
