from typing import Dict, List, Tuple, Union

from .fsa_closure import epsilon_closure, move
from .fsa_model import DFA, NFA, State


def simulate_deterministic_fsa(dfa: DFA, input_string: str) -> Union[List[Tuple[State, str, State]], Dict]:
    """
    Simulates a DFA with the given input string.

    Args:
        dfa: The DFA to run. Its transition function may be partial.
        input_string: The input string to simulate

    Returns:
        If the input is accepted, returns a list of transitions in the format:
        [(current_state, symbol, next_state), ...].
        If the input is rejected, returns a dictionary with:
        {
            'accepted': False,
            'path': [(current_state, symbol, next_state), ...],  # Path up to rejection
            'rejection_reason': str,  # Why rejected
            'rejection_position': int  # Position where rejection occurred
        }
    """
    current_state = dfa.start
    execution_path = []

    for position, symbol in enumerate(input_string):
        if symbol not in dfa.alphabet:
            return {
                'accepted': False,
                'path': execution_path,
                'rejection_reason': f"Symbol '{symbol}' not in alphabet",
                'rejection_position': position
            }

        next_state = dfa.target(current_state, symbol)

        # A missing transition rejects immediately
        if next_state is None:
            return {
                'accepted': False,
                'path': execution_path,
                'rejection_reason': f"No transition defined for symbol '{symbol}' from state {current_state}",
                'rejection_position': position
            }

        execution_path.append((current_state, symbol, next_state))
        current_state = next_state

    if dfa.is_accepting(current_state):
        return execution_path

    return {
        'accepted': False,
        'path': execution_path,
        'rejection_reason': f"Final state {current_state} is not an accepting state",
        'rejection_position': len(input_string)
    }


def simulate_nondeterministic_fsa(nfa: NFA, input_string: str) -> Union[List[List[State]], Dict]:
    """
    Simulates an NFA by tracking the set of states it can be in.

    Each step applies move on the next symbol followed by the epsilon closure.

    Returns:
        If the input is accepted, the sorted state set after each prefix of the
        input, starting with the closure of the starting state. Otherwise a
        dictionary with 'accepted', 'trace', 'rejection_reason' and
        'rejection_position'.
    """
    current_states = epsilon_closure(nfa, {nfa.start})
    trace = [sorted(current_states)]

    for position, symbol in enumerate(input_string):
        if symbol not in nfa.alphabet:
            return {
                'accepted': False,
                'trace': trace,
                'rejection_reason': f"Symbol '{symbol}' not in alphabet",
                'rejection_position': position
            }

        current_states = epsilon_closure(nfa, move(nfa, current_states, symbol))
        if not current_states:
            return {
                'accepted': False,
                'trace': trace,
                'rejection_reason': f"No transitions on symbol '{symbol}' from any current state",
                'rejection_position': position
            }
        trace.append(sorted(current_states))

    if not nfa.accepting.isdisjoint(current_states):
        return trace

    return {
        'accepted': False,
        'trace': trace,
        'rejection_reason': 'No accepting state reached at end of input',
        'rejection_position': len(input_string)
    }


def accepts(automaton: Union[NFA, DFA], input_string: str) -> bool:
    """Whether the automaton accepts the input string."""
    if isinstance(automaton, NFA):
        result = simulate_nondeterministic_fsa(automaton, input_string)
    else:
        result = simulate_deterministic_fsa(automaton, input_string)
    return isinstance(result, list)
