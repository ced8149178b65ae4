# calculators/schedule.py
"""
Coefficient Evaluation Schedule
===============================

Ordered list of coefficient models evaluated once per simulation step.
The order is checked when the schedule is built: every value a model reads
must be published by an earlier model or supplied from outside.
"""

from typing import Dict, Iterable, Iterator, List, Sequence

from common.flight_state import StepContext
from calculators.base_calculator import CoefficientModel


class ScheduleOrderError(ValueError):
    """Models are ordered so that a required value is not yet available."""


class CoefficientSchedule:
    """
    Evaluation order for coefficient models.

    Parameters:
    -----------
    models : sequence of CoefficientModel
        Models in evaluation order
    external_inputs : iterable of str
        Published keys supplied by collaborators outside the schedule
    """

    def __init__(self, models: Sequence[CoefficientModel], external_inputs: Iterable[str] = ()):
        self._models: List[CoefficientModel] = list(models)
        self.external_inputs = tuple(external_inputs)
        self._validate_order()

    def _validate_order(self) -> None:
        available = {key: 'external' for key in self.external_inputs}
        names = set()

        for model in self._models:
            name = model.get_name()
            if name in names:
                raise ScheduleOrderError(f"Model '{name}' appears more than once")
            names.add(name)

            missing = [key for key in model.requires if key not in available]
            if missing:
                raise ScheduleOrderError(
                    f"Model '{name}' requires {missing} but no earlier model "
                    "or external input provides them"
                )

            for key in model.provides():
                if key in available:
                    raise ScheduleOrderError(
                        f"'{key}' is provided by both '{available[key]}' and '{name}'"
                    )
                available[key] = name

    def run_step(self, ctx: StepContext) -> Dict[str, float]:
        """
        Compute every model for one step.

        Returns:
        --------
        Dict[str, float]
            Aggregate coefficient per publish key
        """
        return {model.publish_key: model.compute(ctx) for model in self._models}

    def get_model(self, name: str) -> CoefficientModel:
        for model in self._models:
            if model.get_name() == name:
                return model
        raise KeyError(f"No model named '{name}' in schedule")

    @property
    def models(self) -> List[CoefficientModel]:
        return list(self._models)

    def __iter__(self) -> Iterator[CoefficientModel]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)

    def __repr__(self) -> str:
        order = " -> ".join(m.get_name() for m in self._models)
        return f"CoefficientSchedule({order})"
