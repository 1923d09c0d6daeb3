"""Shared utilities for zustand-lint."""

from __future__ import annotations

from pathlib import Path

from zustand_lint.ir import is_supported
from zustand_lint.ir.estree_frontend import ESTREE_SUFFIX

# Directories to skip during file discovery
SKIP_DIRS = {
    ".git", "node_modules", "dist", "build", "out", "coverage",
    ".next", ".nuxt", ".turbo", ".cache", ".expo", ".svelte-kit",
    ".vercel", ".output", "storybook-static",
}

# Maximum file size to read (skip bundles and generated code)
MAX_FILE_SIZE = 2 * 1024 * 1024  # 2 MB


def discover_files(workspace: Path) -> list[Path]:
    """Walk workspace for lintable files, skipping ignored dirs and large files."""
    if workspace.is_file():
        return [workspace] if is_supported(workspace) else []
    files: list[Path] = []
    for item in workspace.rglob("*"):
        if item.is_dir():
            continue
        if any(part in SKIP_DIRS for part in item.relative_to(workspace).parts):
            continue
        if not is_supported(item) or item.name.endswith(".d.ts"):
            continue
        # an ESTree dump next to its source stands in for it
        if item.with_name(item.name + ESTREE_SUFFIX).exists():
            continue
        try:
            if item.stat().st_size > MAX_FILE_SIZE:
                continue
        except OSError:
            continue
        files.append(item)
    return sorted(files)
