from typing import Dict

from .fsa_model import DFA

REQUIRED_KEYS = ['states', 'alphabet', 'transitions', 'start', 'accept']


def _is_state_id(value) -> bool:
    # bool is a subclass of int but never a valid state id
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_symbol(value) -> bool:
    return isinstance(value, str) and len(value) == 1


def validate_nfa_description(description, max_states: int = 0) -> Dict:
    """
    Validates a wire-format NFA description before it is handed to the core.

    The description must look like:
        {
            'states': [0, 1, ...],
            'alphabet': ['a', 'b', ...],
            'transitions': [[from, symbol or None, [to, ...]], ...],
            'start': 0,
            'accept': [1, ...]
        }
    where a None symbol denotes an epsilon transition.

    Args:
        description: The decoded JSON body
        max_states: Largest number of states accepted; 0 disables the limit

    Returns:
        Dict: Validation result with 'valid' boolean and optional 'error' message
    """
    if not isinstance(description, dict):
        return {'valid': False, 'error': 'NFA must be a JSON object'}

    for key in REQUIRED_KEYS:
        if key not in description:
            return {'valid': False, 'error': f'Missing required key: {key}'}

    for key in ('states', 'alphabet', 'transitions', 'accept'):
        if not isinstance(description[key], list):
            return {'valid': False, 'error': f'{key} must be a list'}

    states = description['states']
    alphabet = description['alphabet']

    for state in states:
        if not _is_state_id(state):
            return {'valid': False, 'error': f'State {state!r} is not a non-negative integer'}

    for symbol in alphabet:
        if not _is_symbol(symbol):
            return {'valid': False, 'error': f'Symbol {symbol!r} is not a single character'}

    if not states:
        return {'valid': False, 'error': 'NFA must have at least one state'}

    if not alphabet:
        return {'valid': False, 'error': 'Alphabet must have at least one symbol'}

    declared_states = set(states)
    declared_symbols = set(alphabet)

    if max_states and len(declared_states) > max_states:
        return {
            'valid': False,
            'error': f'NFA has {len(declared_states)} states, the limit is {max_states}'
        }

    start = description['start']
    if not _is_state_id(start) or start not in declared_states:
        return {'valid': False, 'error': f'Start state {start!r} not in states list'}

    for state in description['accept']:
        if not _is_state_id(state) or state not in declared_states:
            return {'valid': False, 'error': f'Accepting state {state!r} not in states list'}

    for position, record in enumerate(description['transitions']):
        if not isinstance(record, list) or len(record) != 3:
            return {
                'valid': False,
                'error': f'Transition {position} must be a [from, symbol, [to, ...]] list'
            }

        source, symbol, targets = record

        if not _is_state_id(source) or source not in declared_states:
            return {'valid': False, 'error': f'Transition {position} starts at undeclared state {source!r}'}

        if symbol is not None and not _is_symbol(symbol):
            return {'valid': False, 'error': f'Transition {position} symbol {symbol!r} is not a single character'}

        if symbol is not None and symbol not in declared_symbols:
            return {'valid': False, 'error': f'Transition {position} uses undeclared symbol {symbol!r}'}

        if not isinstance(targets, list) or not targets:
            return {'valid': False, 'error': f'Transition {position} must have at least one destination state'}

        for target in targets:
            if not _is_state_id(target) or target not in declared_states:
                return {'valid': False, 'error': f'Transition {position} leads to undeclared state {target!r}'}

    return {'valid': True}


def is_complete(dfa: DFA) -> bool:
    """
    Checks if the DFA is complete.

    A DFA is complete if for each state and each symbol there is a transition.
    """
    return all(
        dfa.target(state, symbol) is not None
        for state in dfa.states
        for symbol in dfa.alphabet
    )
