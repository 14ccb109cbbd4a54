from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar, Union

State = TypeVar('State')
Condition = Callable[[Any], bool]
Effect = Callable[[Any], Any]

__all__ = ['Any', 'Callable', 'Dict', 'Iterable', 'List', 'Optional', 'Sequence', 'Tuple', 'TypeVar', 'Union',
           'State', 'Condition', 'Effect']
