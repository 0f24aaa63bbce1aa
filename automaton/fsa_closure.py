from typing import FrozenSet, Iterable

from .fsa_model import NFA, State, Symbol


def epsilon_closure(nfa: NFA, states: Iterable[State]) -> FrozenSet[State]:
    """
    Computes the epsilon closure of a set of states.

    Args:
        nfa (NFA): The automaton whose epsilon transitions are followed
        states: The seed states

    Returns:
        FrozenSet[State]: Every state reachable from the seed states by zero or
        more epsilon transitions, seed states included
    """
    closure = set(states)
    stack = list(closure)

    while stack:
        state = stack.pop()
        for epsilon_target in nfa.targets(state, None):
            if epsilon_target not in closure:
                closure.add(epsilon_target)
                stack.append(epsilon_target)

    return frozenset(closure)


def move(nfa: NFA, states: Iterable[State], symbol: Symbol) -> FrozenSet[State]:
    """
    Computes all states reachable from the given states on one symbol.

    No epsilon closure is taken on the result.
    """
    result = set()
    for state in states:
        result.update(nfa.targets(state, symbol))
    return frozenset(result)
