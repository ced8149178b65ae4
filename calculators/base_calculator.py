# calculators/base_calculator.py

from abc import ABC, abstractmethod
from typing import Dict, Tuple

from common.flight_state import StepContext


class CoefficientModel(ABC):
    """
    Base class for aerodynamic coefficient models.

    A model reads the step context, computes its named partial terms, sums
    them (plus a constant bias) into the coefficient and publishes the total
    under `publish_key`. The last computed partials and total are kept for
    read-back until the next call.
    """

    # Key the aggregate is published under
    publish_key: str = ""

    # Published keys this model reads (must be available before compute)
    requires: Tuple[str, ...] = ()

    def __init__(self, bias: float = 0.0):
        """Initialize model with a constant bias term."""
        self.bias = float(bias)
        self.partials: Dict[str, float] = {}
        self.coefficient = 0.0

    @abstractmethod
    def compute_partials(self, ctx: StepContext) -> Dict[str, float]:
        """
        Compute the named partial terms for this step.

        Parameters:
        -----------
        ctx : StepContext
            Flight state and values published earlier in the step

        Returns:
        --------
        Dict[str, float]
            Partial terms in summation order (bias excluded)
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get name of coefficient model (owner of its published values)."""
        pass

    def provides(self) -> Tuple[str, ...]:
        """Published keys written by this model."""
        return (self.publish_key,)

    def compute(self, ctx: StepContext) -> float:
        """
        Compute, publish and return the coefficient for this step.

        Parameters:
        -----------
        ctx : StepContext
            Step context; receives the published coefficient

        Returns:
        --------
        float
            Sum of all partial terms and the bias
        """
        partials = dict(self.compute_partials(ctx))
        partials['bias'] = self.bias

        total = 0.0
        for value in partials.values():
            total += value

        self.partials = partials
        self.coefficient = total

        ctx.publish(self.publish_key, total, owner=self.get_name())
        self._publish_extra(ctx)
        return total

    def _publish_extra(self, ctx: StepContext) -> None:
        """Hook for publishing sub-sums needed by other models."""
        pass

    def get_partials(self) -> Dict[str, float]:
        """Copy of the partial terms from the last compute."""
        return dict(self.partials)

    def reset(self) -> None:
        """Forget the last computed values."""
        self.partials = {name: 0.0 for name in self.partials}
        self.coefficient = 0.0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(coefficient={self.coefficient:.4f})"
