"""
Veto command implementation.

Lets process-reaping scripts ask whether a process may be killed.
"""

import logging

from msbuildkit.process.killing_veto import MsBuildKillingVeto, ProcessSnapshot

logger = logging.getLogger(__name__)

VETOED_EXIT_CODE = 3


def run(args) -> int:
    """
    Run the veto command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if the process may be killed, 3 if vetoed)
    """
    arguments = list(args.process_arguments)
    if arguments and arguments[0] == "--":
        arguments = arguments[1:]

    cause = MsBuildKillingVeto().veto_process_killing(ProcessSnapshot(arguments))
    if cause is None:
        logger.debug(f"No veto for {arguments[:1]}")
        return 0

    print(cause.message)
    return VETOED_EXIT_CODE
