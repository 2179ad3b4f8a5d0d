"""Allow running semverkit as ``python -m semverkit``."""

from .cli import main

main()
