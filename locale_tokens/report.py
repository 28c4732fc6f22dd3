"""Console diagnostics: progress on stdout, warnings and errors on stderr."""

import sys


class Reporter:
    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    def debug(self, *parts: object) -> None:
        """Only printed in verbose mode."""
        if self.verbose:
            print(*parts, flush=True)

    def info(self, *parts: object) -> None:
        print(*parts, flush=True)

    def warn(self, *parts: object) -> None:
        print("[WARN]", *parts, file=sys.stderr, flush=True)

    def error(self, *parts: object) -> None:
        print("[ERROR]", *parts, file=sys.stderr, flush=True)
