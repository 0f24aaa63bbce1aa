from django.test import TestCase
from automaton.fsa_model import DFA
from automaton.fsa_properties import is_complete, validate_nfa_description


class TestValidateNfaDescription(TestCase):
    """Test cases for validation of wire-format NFA descriptions"""

    def setUp(self):
        self.valid_nfa = {
            'states': [0, 1, 2],
            'alphabet': ['a', 'b'],
            'transitions': [
                [0, None, [1]],
                [1, 'a', [1, 2]],
                [2, 'b', [0]]
            ],
            'start': 0,
            'accept': [2]
        }

    def assertInvalid(self, description, fragment, **kwargs):
        result = validate_nfa_description(description, **kwargs)
        self.assertFalse(result['valid'])
        self.assertIn(fragment, result['error'])

    def test_valid_description(self):
        result = validate_nfa_description(self.valid_nfa)
        self.assertTrue(result['valid'])
        self.assertNotIn('error', result)

    def test_not_an_object(self):
        self.assertInvalid([1, 2, 3], 'JSON object')

    def test_missing_required_key(self):
        for key in ['states', 'alphabet', 'transitions', 'start', 'accept']:
            description = dict(self.valid_nfa)
            del description[key]
            self.assertInvalid(description, key)

    def test_wrong_container_type(self):
        self.valid_nfa['states'] = '012'
        self.assertInvalid(self.valid_nfa, 'states must be a list')

    def test_empty_states(self):
        self.valid_nfa.update(states=[], transitions=[], accept=[])
        self.assertInvalid(self.valid_nfa, 'at least one state')

    def test_empty_alphabet(self):
        self.valid_nfa.update(alphabet=[], transitions=[[0, None, [1]]])
        self.assertInvalid(self.valid_nfa, 'at least one symbol')

    def test_invalid_state_ids(self):
        for bad_state in [-1, 'S0', 1.5, True]:
            self.valid_nfa['states'] = [0, 1, 2, bad_state]
            self.assertInvalid(self.valid_nfa, 'not a non-negative integer')

    def test_invalid_symbols(self):
        for bad_symbol in ['ab', '', 1, None]:
            self.valid_nfa['alphabet'] = ['a', 'b', bad_symbol]
            self.assertInvalid(self.valid_nfa, 'not a single character')

    def test_start_not_declared(self):
        self.valid_nfa['start'] = 7
        self.assertInvalid(self.valid_nfa, 'Start state 7 not in states list')

    def test_accepting_state_not_declared(self):
        self.valid_nfa['accept'] = [2, 9]
        self.assertInvalid(self.valid_nfa, 'Accepting state 9 not in states list')

    def test_malformed_transition_record(self):
        self.valid_nfa['transitions'].append([0, 'a'])
        self.assertInvalid(self.valid_nfa, 'Transition 3 must be a [from, symbol, [to, ...]] list')

    def test_undeclared_source_state(self):
        self.valid_nfa['transitions'].append([5, 'a', [0]])
        self.assertInvalid(self.valid_nfa, 'undeclared state 5')

    def test_undeclared_symbol(self):
        self.valid_nfa['transitions'].append([0, 'c', [1]])
        self.assertInvalid(self.valid_nfa, "undeclared symbol 'c'")

    def test_malformed_transition_symbol(self):
        """A bad transition symbol gets the same reason as a bad alphabet symbol"""
        for bad_symbol in ['', 'ab', 7]:
            self.valid_nfa['transitions'] = [[0, bad_symbol, [1]]]
            self.assertInvalid(self.valid_nfa, f'symbol {bad_symbol!r} is not a single character')

    def test_empty_destination_list(self):
        self.valid_nfa['transitions'].append([0, 'a', []])
        self.assertInvalid(self.valid_nfa, 'at least one destination')

    def test_undeclared_destination_state(self):
        self.valid_nfa['transitions'].append([0, 'a', [1, 4]])
        self.assertInvalid(self.valid_nfa, 'leads to undeclared state 4')

    def test_state_limit(self):
        self.assertTrue(validate_nfa_description(self.valid_nfa, max_states=3)['valid'])
        self.assertInvalid(self.valid_nfa, 'the limit is 2', max_states=2)

    def test_zero_limit_disables_check(self):
        self.valid_nfa['states'] = list(range(500))
        self.assertTrue(validate_nfa_description(self.valid_nfa, max_states=0)['valid'])


class TestIsComplete(TestCase):
    """Test cases for the DFA completeness check"""

    def test_complete_dfa(self):
        dfa = DFA.build([0, 1], ['a'], {(0, 'a'): 1, (1, 'a'): 0}, 0, [1])
        self.assertTrue(is_complete(dfa))

    def test_incomplete_dfa(self):
        dfa = DFA.build([0, 1], ['a'], {(0, 'a'): 1}, 0, [1])
        self.assertFalse(is_complete(dfa))
