from htnlite.common.imports.typing import *
from htnlite.domain.network_element import NetworkElement


class Method(NetworkElement):
    """
    One decomposition recipe for a compound task.

    :param name: Name of the method, used for lookup and tracing
    :param subtasks: Ordered task names the method expands into
    :param condition: Precondition over the state, or None for an unconditional method
    """

    def __init__(self,
                 name: str,
                 subtasks: Sequence[str],
                 condition: Optional[Condition] = None) -> None:
        super().__init__(name, condition)
        if isinstance(subtasks, str):
            raise TypeError("Method subtasks must be a sequence of task names, not a single string")
        self.type = 'method'
        self.subtasks = tuple(subtasks)

    def _get_str(self):
        return f'Method(name={self.name}, subtasks={list(self.subtasks)})'
