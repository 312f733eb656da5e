"""Run parameters for the lid-driven cavity solver and command-line parsing."""

from __future__ import annotations

import getopt
import re
from dataclasses import dataclass, replace
from typing import Sequence

DEFAULT_BASENAME = "out/lid-cavity"

_SHORT_OPTS = "x:n:f:do:cvh"
_LONG_OPTS = [
    "cells=",
    "iters=",
    "freq=",
    "noio",
    "output=",
    "checkpoint",
    "verbose",
    "help",
]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class UsageError(Exception):
    """Raised when the command line cannot be parsed."""


class HelpRequested(Exception):
    """Raised when the user asks for the help message."""


@dataclass
class Config:
    """Domain, discretisation, physical and output settings for one run."""

    X: float = 2.0
    Y: float = 2.0
    nx: int = 500
    ny: int = 500
    n_iters: int = 5000
    nit: int = 100
    rho: float = 1.0
    nu: float = 0.1
    output_freq: int = 100
    no_output: bool = False
    enable_checkpoints: bool = False
    verbose: bool = False
    basename: str = DEFAULT_BASENAME

    @property
    def dx(self) -> float:
        """Grid spacing along the first axis."""
        return self.X / (self.nx - 1)

    @property
    def dy(self) -> float:
        """Grid spacing along the second axis."""
        return self.Y / (self.ny - 1)

    @property
    def dt(self) -> float:
        """Time step chosen from the grid spacing for stability."""
        dx, dy = self.dx, self.dy
        return 1.0 / (1.0 / (dx * dx) + 1.0 / (dy * dy)) * 0.9 / 2.0


def _atoi(text: str) -> int:
    """Read a leading integer the lenient way: junk yields 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_args(argv: Sequence[str]) -> Config:
    """Build a Config from command-line arguments (without the program name).

    Raises HelpRequested for -h/--help and UsageError for anything
    that cannot be parsed.
    """
    try:
        opts, _ = getopt.gnu_getopt(list(argv), _SHORT_OPTS, _LONG_OPTS)
    except getopt.GetoptError as exc:
        raise UsageError(str(exc)) from exc

    config = Config()
    for opt, value in opts:
        if opt in ("-x", "--cells"):
            cells = _atoi(value)
            config = replace(config, nx=cells, ny=cells)
        elif opt in ("-n", "--iters"):
            config = replace(config, n_iters=_atoi(value))
        elif opt in ("-f", "--freq"):
            config = replace(config, output_freq=_atoi(value))
        elif opt in ("-d", "--noio"):
            config = replace(config, no_output=True)
        elif opt in ("-o", "--output"):
            config = replace(config, basename=value)
        elif opt in ("-c", "--checkpoint"):
            config = replace(config, enable_checkpoints=True)
        elif opt in ("-v", "--verbose"):
            config = replace(config, verbose=True)
        elif opt in ("-h", "--help"):
            raise HelpRequested()
    return config


def format_help(progname: str) -> str:
    """Return the usage message for the given program name."""
    lines = [
        "A simple 2D solver for Maxwell's equations, using Yee method",
        f"Usage: {progname} [options]",
        "Options and arguments:",
        "  -x N, --cells=N         Cells in X- and Y-dimensions",
        "  -n N, --iters=N         Iterations",
        "  -f N, --freq=N          Output frequency (i.e. steps between output)",
        "  -d, --noio              Disable file I/O",
        "  -o FILE, --output=FILE  Set base filename for output "
        "(final output will be in BASENAME.vtk",
        "  -c, --checkpoint        Enable checkpointing, checkpoints will be "
        "in BASENAME-ITERATION.vtk",
        "  -v, --verbose           Set verbose output",
        "  -h, --help              Print this message and exit",
        "",
    ]
    return "\n".join(lines) + "\n"


def format_options(config: Config) -> str:
    """Return the banner listing the parameters a run started with."""
    rule = "======================================="
    lines = [
        rule,
        "Started with the following options",
        rule,
        f"  nx                 = {config.nx:14d}",
        f"  ny                 = {config.ny:14d}",
        f"  steps              = {config.n_iters:14d}",
        f"  output_freq        = {config.output_freq:14d}",
        f"  no_output          = {int(config.no_output):14d}",
        f"  enable_checkpoints = {int(config.enable_checkpoints):14d}",
        f"  basename           = {config.basename}-%d.vtr",
        f"  verbose            = {int(config.verbose):14d}",
        rule,
    ]
    return "\n".join(lines) + "\n"