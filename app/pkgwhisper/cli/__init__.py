"""Command-line interface for pkgwhisper."""
