"""Utility helpers for pkgwhisper."""
