"""Finite-difference solver for the two-dimensional lid-driven cavity."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, fields
from typing import Iterator

import numpy as np

from .config import Config


@dataclass
class Timers:
    """Wall-clock seconds accumulated in each phase of a time step."""

    build_rhs: float = 0.0
    solve_poissons: float = 0.0
    update_velocities: float = 0.0
    apply_boundary: float = 0.0

    @contextmanager
    def measure(self, phase: str) -> Iterator[None]:
        """Add the time spent inside the block to the named phase."""
        if phase not in {f.name for f in fields(self)}:
            raise ValueError(f"unknown phase: {phase!r}")
        start = time.perf_counter()
        try:
            yield
        finally:
            setattr(self, phase, getattr(self, phase) + time.perf_counter() - start)


class Cavity:
    """Velocity and pressure fields of a cavity whose far wall moves.

    Arrays are indexed ``[i, j]`` with ``i`` along ``nx`` and ``j`` along
    ``ny``; the row ``i = nx - 1`` is the moving lid.
    """

    def __init__(self, config: Config) -> None:
        self.config = config
        nx, ny = config.nx, config.ny
        self.dx = config.dx
        self.dy = config.dy
        self.dt = config.dt
        self.u = np.zeros((nx, ny))
        self.v = np.zeros((nx, ny))
        self.p = np.zeros((nx, ny))
        self.b = np.zeros((nx, ny))
        self.x = np.arange(nx) * (2.0 / (nx - 1))
        self.y = np.arange(ny) * (2.0 / (ny - 1))
        self.timers = Timers()

    def build_rhs(self) -> None:
        """Build the right-hand side of the pressure Poisson equation."""
        with self.timers.measure("build_rhs"):
            u, v = self.u, self.v
            dx, dy, dt, rho = self.dx, self.dy, self.dt, self.config.rho
            du_dj = (u[1:-1, 2:] - u[1:-1, :-2]) / (2 * dx)
            dv_di = (v[2:, 1:-1] - v[:-2, 1:-1]) / (2 * dy)
            du_di = (u[2:, 1:-1] - u[:-2, 1:-1]) / (2 * dy)
            dv_dj = (v[1:-1, 2:] - v[1:-1, :-2]) / (2 * dx)
            self.b[1:-1, 1:-1] = (
                rho * (1 / dt) * (du_dj + dv_di)
                - du_dj**2
                - 2 * (du_di * dv_dj)
                - dv_di**2
            )

    def solve_poissons(self) -> None:
        """Relax the pressure field with ``config.nit`` Jacobi sweeps."""
        with self.timers.measure("solve_poissons"):
            p, b = self.p, self.b
            dx2, dy2 = self.dx * self.dx, self.dy * self.dy
            denom = 2 * (dx2 + dy2)
            for _ in range(self.config.nit):
                pn = p.copy()
                p[1:-1, 1:-1] = (
                    (
                        (pn[1:-1, 2:] + pn[1:-1, :-2]) * dy2
                        + (pn[2:, 1:-1] + pn[:-2, 1:-1]) * dx2
                    )
                    / denom
                    - dx2 * dy2 / denom * b[1:-1, 1:-1]
                )
                p[:, -1] = p[:, -2]
                p[:, 0] = p[:, 1]
                p[0, :] = p[1, :]
                p[-1, :] = 0.0

    def update_velocities(self) -> None:
        """Advance the interior velocities by one time step."""
        with self.timers.measure("update_velocities"):
            un = self.u.copy()
            vn = self.v.copy()
            p = self.p
            dx, dy, dt = self.dx, self.dy, self.dt
            rho, nu = self.config.rho, self.config.nu

            c = (slice(1, -1), slice(1, -1))
            jp = (slice(1, -1), slice(2, None))
            jm = (slice(1, -1), slice(None, -2))
            ip = (slice(2, None), slice(1, -1))
            im = (slice(None, -2), slice(1, -1))

            self.u[c] = (
                un[c]
                - un[c] * dt / dx * (un[c] - un[jm])
                - vn[c] * dt / dy * (un[c] - un[im])
                - dt / (2 * rho * dx) * (p[jp] - p[jm])
                + nu
                * (
                    dt / (dx * dx) * (un[jp] - 2 * un[c] + un[jm])
                    + dt / (dy * dy) * (un[ip] - 2 * un[c] + un[im])
                )
            )
            self.v[c] = (
                vn[c]
                - un[c] * dt / dx * (vn[c] - vn[jm])
                - vn[c] * dt / dy * (vn[c] - vn[im])
                - dt / (2 * rho * dy) * (p[ip] - p[im])
                + nu
                * (
                    dt / (dx * dx) * (vn[jp] - 2 * vn[c] + vn[jm])
                    + dt / (dy * dy) * (vn[ip] - 2 * vn[c] + vn[im])
                )
            )

    def apply_boundary(self) -> None:
        """Impose no-slip walls and a unit-velocity lid."""
        with self.timers.measure("apply_boundary"):
            u, v = self.u, self.v
            u[:, 0] = 0
            u[:, -1] = 0
            v[:, 0] = 0
            v[:, -1] = 0
            u[0, :] = 0
            u[-1, :] = 1
            v[0, :] = 0
            v[-1, :] = 0

    def step(self) -> None:
        """Run one complete time step."""
        self.build_rhs()
        self.solve_poissons()
        self.update_velocities()
        self.apply_boundary()