"""Process spawning utilities.

Provides the subprocess-backed process controller used to launch
external installers.
"""

import os
import shlex
import subprocess


def build_command(executable: str, arguments: str) -> list[str] | str:
    """Build the Popen command for an executable and an argument string.

    Windows installers parse their own command line, so on Windows the
    argument string is passed through verbatim. Elsewhere it is split
    with POSIX shell rules.

    Args:
        executable: Executable to launch.
        arguments: Space-separated argument string.

    Returns:
        A command line string on Windows, an argument list otherwise.
    """
    if os.name == "nt":
        return f'"{executable}" {arguments}'.strip()
    return [executable, *shlex.split(arguments)]


class SubprocessController:
    """Process controller backed by :class:`subprocess.Popen`.

    The child inherits the terminal so interactive installers can show
    their UI.
    """

    def start(self, path: str, arguments: str) -> subprocess.Popen[bytes]:
        """Start a process without waiting for it.

        Raises:
            FileNotFoundError: If the executable does not exist.
            OSError: If the executable cannot be started.
            ValueError: If the argument string has unbalanced quotes.
        """
        return subprocess.Popen(build_command(path, arguments))  # nosec: B603

    def wait_for_exit(self, handle: subprocess.Popen[bytes]) -> int:
        """Block until the process exits and return its exit code."""
        return handle.wait()
