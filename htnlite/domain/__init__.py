from .network_element import NetworkElement
from .operators import Operator
from .method import Method
from .task import CompoundTask
from .domain import Domain
from .domain import TaskKind


__all__ = ['NetworkElement', 'Operator', 'Method', 'CompoundTask', 'Domain', 'TaskKind']
