from typing import Dict, List, Optional, Set, Tuple

from .fsa_model import DFA, NFA, State, Symbol


def nfa_from_description(description: Dict) -> NFA:
    """
    Builds an NFA from a validated wire-format description.

    Several transition records for the same (from, symbol) pair are merged.
    """
    transitions: Dict[Tuple[State, Optional[Symbol]], Set[State]] = {}
    for source, symbol, targets in description['transitions']:
        transitions.setdefault((source, symbol), set()).update(targets)

    return NFA.build(
        states=description['states'],
        alphabet=description['alphabet'],
        transitions=transitions,
        start=description['start'],
        accepting=description['accept'],
    )


def _transition_sort_key(key: Tuple[State, Optional[Symbol]]):
    state, symbol = key
    # Epsilon transitions sort first
    return state, symbol is not None, symbol or ''


def nfa_to_description(nfa: NFA) -> Dict:
    """Serialises an NFA in normalised form: sorted lists, one record per (from, symbol)."""
    transitions: List[list] = [
        [state, symbol, sorted(nfa.transitions[(state, symbol)])]
        for state, symbol in sorted(nfa.transitions, key=_transition_sort_key)
    ]
    return {
        'states': sorted(nfa.states),
        'alphabet': sorted(nfa.alphabet),
        'transitions': transitions,
        'start': nfa.start,
        'accept': sorted(nfa.accepting),
    }


def dfa_to_description(dfa: DFA) -> Dict:
    """Serialises a DFA with transitions as sorted [from, symbol, to] triples."""
    return {
        'states': sorted(dfa.states),
        'alphabet': sorted(dfa.alphabet),
        'transitions': [
            [state, symbol, dfa.transitions[(state, symbol)]]
            for state, symbol in sorted(dfa.transitions)
        ],
        'start': dfa.start,
        'accept': sorted(dfa.accepting),
    }


def subsets_to_description(subsets: Dict[State, Tuple[State, ...]]) -> Dict[str, List[State]]:
    """JSON object keys must be strings, so DFA state ids are stringified."""
    return {str(state): list(subset) for state, subset in sorted(subsets.items())}
