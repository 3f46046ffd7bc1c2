"""fs_shell package: an interactive shell for a fixed set of local filesystem commands.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
