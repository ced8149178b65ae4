# common/flight_state.py
"""
Flight State and Step Context
=============================

Per-step inputs for the coefficient models.

FlightState is the immutable snapshot of measured/derived flight variables
for one simulation step. StepContext wraps it together with the values the
coefficient models publish for each other during that step (for example the
pitching moment due to elevator, which the lift model consumes).
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

# Published value keys
CM_ELEV = "cm_elev"     # Pitching moment due to elevator [-]
C_LIFT = "c_lift"       # Total lift coefficient [-]
CL_STAR = "cl_star"     # Basic + dynamic lift [-]

EXTERNAL_OWNER = "external"


class MissingUpstreamValue(KeyError):
    """A model read a value nobody has published for this step."""


class OwnershipViolation(RuntimeError):
    """A model tried to write a value owned by another model."""


@dataclass(frozen=True)
class FlightState:
    """Flight variables for one simulation step."""
    alpha_deg: float = 0.0          # Body angle of attack [deg]
    alpha_dot_rps: float = 0.0      # Angle-of-attack rate [rad/s]
    q_rps: float = 0.0              # Pitch rate [rad/s]
    flap_pct: float = 0.0           # Actual flap deflection [%]
    flap_avg_pct: float = 0.0       # Average commanded flap deflection [%]
    tcx: float = 0.0                # Symmetric thrust coefficient [-]
    tcd: float = 0.0                # Differential thrust coefficient [-]
    c_hat: float = 0.0              # Reference chord factor c/(2V) [s]
    h_gear: float = 0.0             # Landing gear height above ground [ft]
    ice_factor: float = 0.0         # Ice accretion factor [0..1]

    def __post_init__(self):
        if not 0.0 <= self.ice_factor <= 1.0:
            raise ValueError(f"Ice factor must be within [0, 1], got {self.ice_factor}")

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FlightState":
        """Build a state from a mapping, ignoring keys that are not state fields."""
        return cls(**{name: float(data[name]) for name in cls.field_names() if name in data})

    def replace(self, **changes) -> "FlightState":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)


class StepContext:
    """
    Shared state for one simulation step.

    Parameters:
    -----------
    state : FlightState
        Flight variables for this step
    published : dict, optional
        Values provided by collaborators outside the schedule (owned by
        "external"), e.g. {"cm_elev": -0.02}
    step : int
        Step index
    time : float
        Simulation time [s]
    """

    def __init__(self, state: FlightState, published: Optional[Mapping[str, float]] = None,
                 step: int = 0, time: float = 0.0):
        self.state = state
        self.step = step
        self.time = time
        self._values: Dict[str, float] = {}
        self._owners: Dict[str, str] = {}

        for key, value in (published or {}).items():
            self.publish(key, value, owner=EXTERNAL_OWNER)

    def read(self, key: str) -> float:
        """Read a published value; raises MissingUpstreamValue if absent."""
        try:
            return self._values[key]
        except KeyError:
            raise MissingUpstreamValue(
                f"'{key}' has not been published for step {self.step}"
            ) from None

    def publish(self, key: str, value: float, owner: str) -> None:
        """Publish a value. Each key may only be written by one owner."""
        current = self._owners.get(key)
        if current is not None and current != owner:
            raise OwnershipViolation(f"'{key}' is owned by '{current}', not '{owner}'")
        self._owners[key] = owner
        self._values[key] = float(value)

    def has(self, key: str) -> bool:
        return key in self._values

    def owner_of(self, key: str) -> Optional[str]:
        return self._owners.get(key)

    def snapshot(self) -> Dict[str, float]:
        """Copy of all published values."""
        return dict(self._values)

    def __repr__(self) -> str:
        return f"StepContext(step={self.step}, t={self.time:.3f}, published={sorted(self._values)})"
