from htnlite.common.imports.typing import *
from htnlite.domain.method import Method


class CompoundTask:
    """
    An abstract task resolved by trying its methods in order.

    :param name: Name of the task
    :param methods: Methods for this task, tried in registration order
    """
    def __init__(self,
                 name: str,
                 methods: List[Method] = None):
        self.type = 'task'
        self.name = name
        self.methods = methods if methods is not None else []

    def add_method(self, method: Method) -> None:
        self.methods.append(method)

    def has_applicable_method(self, state: Any) -> bool:
        return any(m.applicable(state) for m in self.methods)

    def __str__(self):
        return self._get_str()

    def __repr__(self):
        return self._get_str()

    def _get_str(self):
        return f'CompoundTask(name={self.name}, methods={[m.name for m in self.methods]})'
