# common/interpolation.py
"""
Rectilinear Grid Interpolation
==============================

N-dimensional lookup tables for tabulated aerodynamic data.

A table is a set of N strictly increasing axes plus one result array laid
out row-major (first axis varying slowest). Queries blend the 2^N corners
of the bracketing grid cell with per-axis linear weights. Out-of-range
coordinates are either clamped to the boundary sample or linearly
extrapolated, independently per axis.

Tables are immutable once built and can be shared between any number of
models and threads.
"""

import numpy as np
from scipy.interpolate import RegularGridInterpolator
from typing import Optional, Sequence, Tuple, Union


class InterpolationError(ValueError):
    """Base class for lookup table errors."""


class InvalidTableShape(InterpolationError):
    """Axis lengths and result array do not describe the same grid."""


class NonMonotonicAxis(InterpolationError):
    """Axis samples are not finite and strictly increasing."""


class PreconditionViolation(InterpolationError):
    """Query does not match the table (arity, flags or non-finite values)."""


ExtrapolationPolicy = Optional[Union[bool, Sequence[bool]]]


def _read_only(values: np.ndarray) -> np.ndarray:
    values.setflags(write=False)
    return values


class Axis:
    """
    One dimension's sample points.

    Parameters:
    -----------
    points : sequence of float
        Strictly increasing, finite sample values (at least one)
    name : str, optional
        Label used in messages and reports
    """

    __slots__ = ('_points', 'name')

    def __init__(self, points: Sequence[float], name: str = ""):
        pts = np.array(points, dtype=float)
        if pts.ndim != 1:
            raise InvalidTableShape(f"Axis '{name}' must be one-dimensional, got shape {pts.shape}")
        if pts.size == 0:
            raise InvalidTableShape(f"Axis '{name}' must contain at least one sample")
        if not np.all(np.isfinite(pts)):
            raise NonMonotonicAxis(f"Axis '{name}' contains non-finite samples")

        steps = np.diff(pts)
        if np.any(steps <= 0):
            bad = int(np.argmax(steps <= 0))
            raise NonMonotonicAxis(
                f"Axis '{name}' must be strictly increasing: "
                f"sample {bad + 1} ({pts[bad + 1]}) follows {pts[bad]}"
            )

        self._points = _read_only(pts)
        self.name = name

    @property
    def points(self) -> np.ndarray:
        """Read-only sample values."""
        return self._points

    @property
    def lower(self) -> float:
        return float(self._points[0])

    @property
    def upper(self) -> float:
        return float(self._points[-1])

    @property
    def is_degenerate(self) -> bool:
        """True for a single-sample axis (no interpolation along it)."""
        return self._points.size == 1

    def contains(self, x: float) -> bool:
        """Check x against the closed sampled range [lower, upper]."""
        return self.lower <= x <= self.upper

    def __len__(self) -> int:
        return int(self._points.size)

    def __repr__(self) -> str:
        label = f"'{self.name}', " if self.name else ""
        return f"Axis({label}n={len(self)}, range=[{self.lower:g}, {self.upper:g}])"


class InterpolationTable:
    """
    Immutable N-dimensional rectilinear lookup table.

    Interpolation is delegated to scipy's RegularGridInterpolator over the
    non-degenerate axes. Clamping is applied per axis before the lookup, so
    axes that extrapolate use the end segment's slope while clamped axes pin
    to the boundary sample.

    Parameters:
    -----------
    axes : sequence of Axis or sequence of float sequences
        Grid axes, first axis varying slowest in `results`
    results : sequence of float
        Flattened result values, length equal to the product of axis lengths
    name : str, optional
        Table label
    """

    def __init__(self, axes: Sequence[Union[Axis, Sequence[float]]],
                 results: Sequence[float], name: str = ""):
        self.name = name
        self._axes = tuple(a if isinstance(a, Axis) else Axis(a) for a in axes)
        if not self._axes:
            raise InvalidTableShape(f"Table '{name}' needs at least one axis")

        flat = np.array(results, dtype=float)
        if flat.ndim != 1:
            raise InvalidTableShape(
                f"Table '{name}' expects a flattened result array, got shape {flat.shape}; "
                "use InterpolationTable.from_grid for N-D data"
            )

        expected = int(np.prod(self.shape))
        if flat.size != expected:
            raise InvalidTableShape(
                f"Table '{name}' has {flat.size} results but axes "
                f"{'x'.join(str(n) for n in self.shape)} require {expected}"
            )
        if not np.all(np.isfinite(flat)):
            raise InvalidTableShape(f"Table '{name}' contains non-finite results")

        self._results = _read_only(flat)

        # Length-1 axes carry no slope; interpolate over the remaining ones
        self._active = tuple(i for i, axis in enumerate(self._axes) if not axis.is_degenerate)
        if self._active:
            active_shape = tuple(len(self._axes[i]) for i in self._active)
            self._interpolator = RegularGridInterpolator(
                tuple(self._axes[i].points for i in self._active),
                flat.reshape(active_shape).copy(),
                method='linear',
                bounds_error=False,
                fill_value=None
            )
        else:
            self._interpolator = None

    @classmethod
    def from_grid(cls, axes: Sequence[Union[Axis, Sequence[float]]],
                  grid: Union[Sequence, np.ndarray], name: str = "") -> "InterpolationTable":
        """
        Build a table from an N-D result array.

        Parameters:
        -----------
        axes : sequence of Axis or sequence of float sequences
            Grid axes
        grid : array-like
            Results with shape equal to the axis lengths

        Returns:
        --------
        InterpolationTable
        """
        axes = tuple(a if isinstance(a, Axis) else Axis(a) for a in axes)
        values = np.asarray(grid, dtype=float)
        shape = tuple(len(a) for a in axes)
        if values.shape != shape:
            raise InvalidTableShape(
                f"Table '{name}' grid has shape {values.shape}, axes require {shape}"
            )
        return cls(axes, values.ravel(), name=name)

    @property
    def axes(self) -> Tuple[Axis, ...]:
        return self._axes

    @property
    def ndim(self) -> int:
        return len(self._axes)

    @property
    def shape(self) -> Tuple[int, ...]:
        return tuple(len(a) for a in self._axes)

    @property
    def results(self) -> np.ndarray:
        """Read-only flattened results."""
        return self._results

    def _policy(self, extrapolate: ExtrapolationPolicy) -> Tuple[bool, ...]:
        if extrapolate is None:
            return (False,) * self.ndim
        if isinstance(extrapolate, (bool, np.bool_)):
            return (bool(extrapolate),) * self.ndim

        flags = tuple(bool(f) for f in extrapolate)
        if len(flags) != self.ndim:
            raise PreconditionViolation(
                f"Table '{self.name}' needs {self.ndim} extrapolation flags, got {len(flags)}"
            )
        return flags

    def interpolate_many(self, points: Union[Sequence, np.ndarray],
                         extrapolate: ExtrapolationPolicy = None) -> np.ndarray:
        """
        Evaluate the table at several query points.

        Parameters:
        -----------
        points : array-like
            Query coordinates, shape (n, ndim). One-dimensional tables also
            accept a flat array of n coordinates.
        extrapolate : bool or sequence of bool, optional
            Per-axis out-of-range policy: False clamps to the boundary
            sample, True extrapolates linearly. None clamps every axis.

        Returns:
        --------
        np.ndarray
            Interpolated values, shape (n,)
        """
        pts = np.array(points, dtype=float)
        if pts.ndim == 1 and self.ndim == 1:
            pts = pts[:, np.newaxis]
        if pts.ndim != 2 or pts.shape[1] != self.ndim:
            raise PreconditionViolation(
                f"Table '{self.name}' expects points of shape (n, {self.ndim}), got {pts.shape}"
            )
        if not np.all(np.isfinite(pts)):
            raise PreconditionViolation(f"Table '{self.name}' query contains non-finite coordinates")

        flags = self._policy(extrapolate)
        for i, axis in enumerate(self._axes):
            if not flags[i]:
                np.clip(pts[:, i], axis.lower, axis.upper, out=pts[:, i])

        if self._interpolator is None:
            return np.full(pts.shape[0], self._results[0])
        return np.asarray(self._interpolator(pts[:, list(self._active)]), dtype=float)

    def interpolate(self, coords: Sequence[float],
                    extrapolate: ExtrapolationPolicy = None) -> float:
        """
        Evaluate the table at one point.

        Parameters:
        -----------
        coords : sequence of float
            One coordinate per axis
        extrapolate : bool or sequence of bool, optional
            Per-axis out-of-range policy (see interpolate_many)

        Returns:
        --------
        float
            Multilinear interpolated value
        """
        query = np.array(coords, dtype=float).reshape(-1)
        if query.size != self.ndim:
            raise PreconditionViolation(
                f"Table '{self.name}' expects {self.ndim} coordinates, got {query.size}"
            )
        return float(self.interpolate_many(query[np.newaxis, :], extrapolate)[0])

    def __call__(self, *coords: float, extrapolate: ExtrapolationPolicy = None) -> float:
        return self.interpolate(coords, extrapolate)

    def in_range(self, coords: Sequence[float]) -> Tuple[bool, ...]:
        """Per-axis check of coords against the closed sampled ranges."""
        query = np.array(coords, dtype=float).reshape(-1)
        if query.size != self.ndim:
            raise PreconditionViolation(
                f"Table '{self.name}' expects {self.ndim} coordinates, got {query.size}"
            )
        return tuple(axis.contains(float(x)) for axis, x in zip(self._axes, query))

    def __repr__(self) -> str:
        dims = "x".join(str(n) for n in self.shape)
        return f"InterpolationTable('{self.name}', {dims})"
