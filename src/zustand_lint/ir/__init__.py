"""IR (Intermediate Representation) package for zustand-lint.

Provides:
    load_module(fpath, workspace) -> Module
"""

from __future__ import annotations

import logging
from pathlib import Path

from zustand_lint.ir import estree_frontend, treesitter_frontend
from zustand_lint.ir.nodes import Module

log = logging.getLogger(__name__)


def is_supported(fpath: Path) -> bool:
    """True for source files and typescript-estree JSON dumps."""
    if fpath.name.endswith(estree_frontend.ESTREE_SUFFIX):
        return True
    return fpath.suffix.lower() in treesitter_frontend.SOURCE_SUFFIXES


def load_module(fpath: Path, workspace: Path | None = None) -> Module:
    """Parse one file with the frontend matching its name.

    Args:
        fpath: File to parse.
        workspace: Root directory (for computing relative paths).

    Returns:
        Module holding the file's calls, declarations and imports.
    """
    rel = str(fpath)
    if workspace is not None and fpath.is_relative_to(workspace):
        rel = str(fpath.relative_to(workspace))
    if fpath.name.endswith(estree_frontend.ESTREE_SUFFIX):
        module = estree_frontend.parse_file(fpath, rel)
    else:
        module = treesitter_frontend.parse_file(fpath, rel)
    log.debug(
        "%s: %d calls, %d declarations, %d imports",
        rel, len(module.calls), len(module.declarations), len(module.imports),
    )
    return module


__all__ = ["load_module", "is_supported", "Module"]
