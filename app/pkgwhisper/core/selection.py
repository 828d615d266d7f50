"""Default installer candidate selection."""

import platform

from pkgwhisper.models.package import InstallerCandidate

_ARCH_ALIASES: dict[str, str] = {
    "amd64": "x64",
    "x86_64": "x64",
    "arm64": "arm64",
    "aarch64": "arm64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
}


def normalize_architecture(value: str) -> str:
    """Normalize an architecture name (e.g. ``AMD64`` -> ``x64``)."""
    lowered = value.strip().lower()
    return _ARCH_ALIASES.get(lowered, lowered)


class FirstInstallerSelector:
    """Picks the first candidate built for the host architecture.

    Falls back to the first candidate when none declares a matching
    architecture.
    """

    def __init__(self, architecture: str | None = None) -> None:
        self._architecture = normalize_architecture(architecture or platform.machine())

    def best_installer(self, candidates: list[InstallerCandidate]) -> InstallerCandidate:
        """Return the preferred candidate.

        Raises:
            ValueError: If there are no candidates.
        """
        if not candidates:
            msg = "Package declares no installers"
            raise ValueError(msg)

        for candidate in candidates:
            if candidate.architecture and normalize_architecture(candidate.architecture) == self._architecture:
                return candidate
        return candidates[0]
