from abc import ABC, abstractmethod
from uuid import uuid4
from htnlite.common.imports.typing import *


class NetworkElement(ABC):
    """
    Abstract base class for network elements like Methods and Operators.

    :param name: The name of this element
    :param condition: Predicate over the world state that must hold for the element to be applicable.
        ``None`` means the element is always applicable.

    :attribute id: Unique identifier for the element
    :attribute name: The name of this element
    :attribute condition: Applicability predicate, or None
    """

    def __init__(self,
                 name: str,
                 condition: Optional[Condition] = None) -> None:
        if not isinstance(name, str):
            raise TypeError(f"Element name must be a string, got {type(name)}")
        self.id = str(uuid4()).replace('-', '')
        self.name = name
        self.condition = condition

    def applicable(self, state: Any) -> bool:
        """
        Determines if this element is applicable in the given state.
        """
        if self.condition is None:
            return True
        return bool(self.condition(state))

    @abstractmethod
    def _get_str(self) -> str:
        raise NotImplementedError('Subclasses must implement this method.')

    def __str__(self):
        return self._get_str()

    def __repr__(self):
        return self._get_str()
