import unittest
import logging

from htnlite.domain import CompoundTask, Domain, Method, Operator, TaskKind
from htnlite.exceptions import DomainValidationException, PlannerException

logger = logging.getLogger('test_domain')


def move_effect(state):
    return {**state, 'location': 'kitchen'}


def grab_effect(state):
    return {**state, 'has_item': True}


class TestDomainRegistration(unittest.TestCase):
    def setUp(self):
        """Called before each test method"""
        self.move = Operator(name='Move', effect=move_effect, condition=lambda s: s['battery'] > 0)
        self.grab = Operator(name='Grab', effect=grab_effect, condition=lambda s: not s['has_item'])
        self.walk = Method(name='WalkToKitchen', subtasks=['Move'], condition=lambda s: s['battery'] > 0)
        self.roll = Method(name='RollToKitchen', subtasks=['Move'])
        logger.info("Domain fixtures created")

    def test_register_operator_stores_by_name(self):
        domain = Domain()
        domain.register_operator(self.move)
        self.assertIs(domain.get_operator('Move'), self.move)
        self.assertIs(domain.operators['Move'], self.move)

    def test_register_operator_returns_domain_for_chaining(self):
        domain = Domain()
        self.assertIs(domain.register_operator(self.move), domain)

    def test_register_multiple_operators(self):
        domain = Domain().register_operator(self.move).register_operator(self.grab)
        self.assertIs(domain.get_operator('Move'), self.move)
        self.assertIs(domain.get_operator('Grab'), self.grab)

    def test_register_operator_overwrites_same_name(self):
        replacement = Operator(name='Move', effect=move_effect)
        domain = Domain().register_operator(self.move).register_operator(replacement)
        self.assertIs(domain.get_operator('Move'), replacement)
        self.assertEqual(len(domain.operators), 1)

    def test_register_operator_rejects_empty_name(self):
        with self.assertRaises(ValueError):
            Domain().register_operator(Operator(name='', effect=move_effect))

    def test_get_operator_unknown_returns_none(self):
        domain = Domain().register_operator(self.move)
        self.assertIsNone(domain.get_operator('Fly'))

    def test_register_method_creates_compound_task(self):
        domain = Domain().register_method('GoToKitchen', self.walk)
        task = domain.get_compound_task('GoToKitchen')
        self.assertIsInstance(task, CompoundTask)
        self.assertEqual(task.name, 'GoToKitchen')
        self.assertEqual(task.methods, [self.walk])

    def test_register_method_appends_in_registration_order(self):
        domain = Domain()
        domain.register_method('GoToKitchen', self.walk)
        domain.register_method('GoToKitchen', self.roll)
        self.assertEqual([m.name for m in domain.compound_tasks['GoToKitchen'].methods],
                         ['WalkToKitchen', 'RollToKitchen'])

    def test_register_method_keeps_same_task_object(self):
        domain = Domain().register_method('GoToKitchen', self.walk)
        task = domain.compound_tasks['GoToKitchen']
        domain.register_method('GoToKitchen', self.roll)
        self.assertIs(domain.compound_tasks['GoToKitchen'], task)
        self.assertEqual(len(task.methods), 2)

    def test_register_method_returns_domain_for_chaining(self):
        domain = Domain()
        self.assertIs(domain.register_method('GoToKitchen', self.walk), domain)

    def test_register_method_independent_tasks(self):
        domain = Domain().register_method('A', self.walk).register_method('B', self.roll)
        self.assertEqual(domain.compound_tasks['A'].methods, [self.walk])
        self.assertEqual(domain.compound_tasks['B'].methods, [self.roll])

    def test_register_method_rejects_empty_names(self):
        with self.assertRaises(ValueError):
            Domain().register_method('', self.walk)
        with self.assertRaises(ValueError):
            Domain().register_method('GoToKitchen', Method(name='', subtasks=['Move']))

    def test_get_method_by_name(self):
        domain = Domain().register_method('GoToKitchen', self.walk)
        self.assertIs(domain.get_method('WalkToKitchen'), self.walk)

    def test_get_method_from_second_task(self):
        domain = Domain().register_method('A', self.walk).register_method('B', self.roll)
        self.assertIs(domain.get_method('RollToKitchen'), self.roll)

    def test_get_method_unknown_returns_none(self):
        self.assertIsNone(Domain().get_method('Anything'))
        domain = Domain().register_method('A', self.walk)
        self.assertIsNone(domain.get_method('Teleport'))

    def test_lookup_resolves_kind(self):
        domain = Domain().register_operator(self.move).register_method('GoToKitchen', self.walk)
        self.assertEqual(domain.lookup('Move'), (TaskKind.OPERATOR, self.move))
        kind, task = domain.lookup('GoToKitchen')
        self.assertEqual(kind, TaskKind.COMPOUND)
        self.assertIs(task, domain.compound_tasks['GoToKitchen'])
        self.assertEqual(domain.lookup('Nope'), (TaskKind.UNKNOWN, None))

    def test_lookup_prefers_operator_on_name_clash(self):
        domain = Domain().register_operator(self.move).register_method('Move', self.roll)
        self.assertEqual(domain.lookup('Move'), (TaskKind.OPERATOR, self.move))

    def test_inherited_attribute_names_do_not_resolve(self):
        domain = Domain().register_operator(self.move)
        for name in ('__class__', '__init__', 'keys', 'get'):
            self.assertNotIn(name, domain)
            self.assertEqual(domain.lookup(name), (TaskKind.UNKNOWN, None))

    def test_contains_and_len(self):
        domain = Domain().register_operator(self.move).register_method('GoToKitchen', self.walk)
        self.assertIn('Move', domain)
        self.assertIn('GoToKitchen', domain)
        self.assertEqual(len(domain), 2)

    def test_constructor_accepts_plain_mappings(self):
        task = CompoundTask('GoToKitchen', [self.walk])
        domain = Domain(operators={'Move': self.move}, compound_tasks={'GoToKitchen': task})
        self.assertIs(domain.get_operator('Move'), self.move)
        self.assertIs(domain.get_compound_task('GoToKitchen'), task)


class TestDomainValidate(unittest.TestCase):
    def setUp(self):
        self.move = Operator(name='Move', effect=move_effect)

    def test_validate_returns_domain(self):
        domain = Domain().register_operator(self.move).register_method('Go', Method('Walk', ['Move']))
        self.assertIs(domain.validate(), domain)

    def test_validate_accepts_compound_subtasks(self):
        domain = (Domain()
                  .register_operator(self.move)
                  .register_method('Go', Method('Walk', ['Move']))
                  .register_method('Errand', Method('DoErrand', ['Go', 'Move'])))
        domain.validate()

    def test_validate_raises_on_unresolved_subtask(self):
        domain = Domain().register_operator(self.move).register_method('Go', Method('Walk', ['Move', 'Mvoe']))
        with self.assertRaises(DomainValidationException) as ctx:
            domain.validate()
        self.assertEqual(ctx.exception.unresolved_task, 'Mvoe')
        self.assertIn('Mvoe', str(ctx.exception))
        self.assertIsInstance(ctx.exception, PlannerException)

    def test_validate_reports_first_unresolved_subtask(self):
        domain = Domain().register_method('Go', Method('Walk', ['First', 'Second']))
        with self.assertRaises(DomainValidationException) as ctx:
            domain.validate()
        self.assertEqual(ctx.exception.unresolved_task, 'First')

    def test_validate_rejects_inherited_attribute_names(self):
        domain = Domain().register_method('Go', Method('Walk', ['__class__']))
        with self.assertRaises(DomainValidationException):
            domain.validate()

    def test_validate_empty_domain(self):
        domain = Domain()
        self.assertIs(domain.validate(), domain)


class TestNetworkElements(unittest.TestCase):
    def test_operator_without_condition_is_applicable(self):
        op = Operator(name='Noop', effect=lambda s: s)
        self.assertTrue(op.applicable({}))

    def test_operator_condition_and_effect(self):
        op = Operator(name='Grab', effect=grab_effect, condition=lambda s: not s['has_item'])
        state = {'has_item': False}
        self.assertTrue(op.applicable(state))
        self.assertEqual(op.apply(state), {'has_item': True})
        self.assertFalse(op.applicable({'has_item': True}))
        self.assertEqual(state, {'has_item': False})

    def test_method_subtasks_are_stored_as_tuple(self):
        subtasks = ['A', 'B']
        method = Method(name='M', subtasks=subtasks)
        subtasks.append('C')
        self.assertEqual(method.subtasks, ('A', 'B'))

    def test_method_rejects_single_string_subtasks(self):
        with self.assertRaises(TypeError):
            Method(name='M', subtasks='Move')

    def test_element_rejects_non_string_name(self):
        with self.assertRaises(TypeError):
            Operator(name=None, effect=lambda s: s)

    def test_elements_have_unique_ids(self):
        a = Operator(name='A', effect=lambda s: s)
        b = Operator(name='A', effect=lambda s: s)
        self.assertNotEqual(a.id, b.id)
        self.assertNotEqual(a, b)

    def test_repr(self):
        self.assertEqual(repr(Operator(name='Move', effect=move_effect)), 'Operator(name=Move)')
        self.assertEqual(str(Method(name='Walk', subtasks=['Move'])), "Method(name=Walk, subtasks=['Move'])")
        self.assertEqual(repr(CompoundTask('Go', [Method('Walk', ['Move'])])),
                         "CompoundTask(name=Go, methods=['Walk'])")


if __name__ == '__main__':
    unittest.main()
