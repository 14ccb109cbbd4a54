from dataclasses import dataclass, replace

import pytest

from htnlite.domain import Domain, Method, Operator


@dataclass(frozen=True)
class RobotState:
    location: str = 'Hall'
    has_item: bool = False
    battery: int = 100


class MockEnvironment:
    """Executes a plan step by step, recording what ran."""
    def __init__(self, state: RobotState):
        self.state = state
        self.execution_log = []

    def execute_action(self, operator):
        if not operator.applicable(self.state):
            return False
        self.execution_log.append(operator.name)
        self.state = operator.apply(self.state)
        return True

    def get_state(self):
        return self.state


@pytest.fixture
def initial_state():
    return RobotState()


@pytest.fixture
def coffee_domain():
    """MoveToKitchen, PourCoffee and ReturnToStart composed into FetchCoffee."""
    return (Domain()
            .register_operator(Operator(
                'MoveToKitchen',
                effect=lambda s: replace(s, location='Kitchen', battery=s.battery - 10),
                condition=lambda s: s.battery > 0 and s.location != 'Kitchen'))
            .register_operator(Operator(
                'PourCoffee',
                effect=lambda s: replace(s, has_item=True),
                condition=lambda s: s.location == 'Kitchen' and not s.has_item))
            .register_operator(Operator(
                'ReturnToStart',
                effect=lambda s: replace(s, location='Start', battery=s.battery - 10),
                condition=lambda s: s.has_item))
            .register_operator(Operator(
                'Recharge',
                effect=lambda s: replace(s, battery=100),
                condition=lambda s: s.battery < 100))
            .register_method('FetchCoffee', Method('StandardFetch', ['MoveToKitchen', 'PourCoffee', 'ReturnToStart'])))


@pytest.fixture
def env_factory():
    return MockEnvironment
