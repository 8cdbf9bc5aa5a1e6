"""Stage, commit and push in one step."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence
from typing import Optional

USAGE = 'Usage: gite "commit message"'


def build_command(message: str) -> str:
    """Return the shell command that adds, commits with message and pushes."""
    return f'git add . && git commit -m "{message}" && git push'


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the add/commit/push command for the first argument as message."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE)
        return 1
    subprocess.run(build_command(args[0]), shell=True, check=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())