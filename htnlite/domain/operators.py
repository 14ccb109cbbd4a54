from htnlite.common.imports.typing import *
from htnlite.domain.network_element import NetworkElement


class Operator(NetworkElement):
    """
    A primitive, directly executable task.

    :param name: Name of the operator, unique among the domain's operators
    :param effect: Function mapping a state to the state after the operator is applied.
        It must return a new value and never mutate its argument.
    :param condition: Precondition over the state, or None for an unconditional operator
    """

    def __init__(self,
                 name: str,
                 effect: Effect,
                 condition: Optional[Condition] = None) -> None:
        super().__init__(name, condition)
        self.type = 'operator'
        self.effect = effect

    def apply(self, state: Any) -> Any:
        return self.effect(state)

    def _get_str(self):
        return f'Operator(name={self.name})'
