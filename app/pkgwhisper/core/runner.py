"""Installer process execution."""

import logging

from pkgwhisper.core.errors import LaunchError
from pkgwhisper.core.interfaces import ProcessController

logger = logging.getLogger(__name__)


def run_process(controller: ProcessController, executable: str, arguments: str) -> int:
    """Start an installer and block until it exits.

    No timeout is applied and nothing is retried: an installer that never
    exits blocks the caller.

    Args:
        controller: Process controller used to spawn and wait.
        executable: Executable to launch.
        arguments: Argument string for the executable.

    Returns:
        The process's exit code, unmodified.

    Raises:
        LaunchError: If the process could not be started or the argument
            string cannot be split into a command line.
    """
    logger.debug("Starting %s %s", executable, arguments)
    try:
        handle = controller.start(executable, arguments)
    except (OSError, ValueError) as e:
        raise LaunchError(executable, e) from e

    logger.info("Waiting for installation to complete ...")
    exit_code = controller.wait_for_exit(handle)
    logger.debug("%s exited with code %d", executable, exit_code)
    return exit_code
