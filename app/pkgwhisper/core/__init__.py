"""Core orchestration for pkgwhisper."""
