"""pkgwhisper - drive third-party installers through a uniform protocol."""

__version__ = "0.1.0"
