from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

State = int
Symbol = str

NFATransitions = Mapping[Tuple[State, Optional[Symbol]], FrozenSet[State]]
DFATransitions = Mapping[Tuple[State, Symbol], State]


@dataclass(frozen=True)
class NFA:
    """
    A non-deterministic finite automaton, possibly with epsilon transitions.

    Attributes:
        states: All states of the automaton
        alphabet: Input symbols (epsilon is not part of the alphabet)
        transitions: Maps (state, symbol) to a non-empty set of destinations.
            A symbol of None is an epsilon transition.
        start: The starting state
        accepting: The accepting states
    """
    states: FrozenSet[State]
    alphabet: FrozenSet[Symbol]
    transitions: NFATransitions
    start: State
    accepting: FrozenSet[State]

    @classmethod
    def build(cls, states: Iterable[State], alphabet: Iterable[Symbol],
              transitions: Mapping[Tuple[State, Optional[Symbol]], Iterable[State]],
              start: State, accepting: Iterable[State]) -> 'NFA':
        """
        Builds an NFA from raw collections.

        Empty destination sets are dropped, since they are the same as having no
        transition at all. Referential checks are left to the caller.
        """
        normalised: Dict[Tuple[State, Optional[Symbol]], FrozenSet[State]] = {}
        for key, targets in transitions.items():
            targets = frozenset(targets)
            if targets:
                normalised[key] = targets

        return cls(
            states=frozenset(states),
            alphabet=frozenset(alphabet),
            transitions=MappingProxyType(normalised),
            start=start,
            accepting=frozenset(accepting),
        )

    def targets(self, state: State, symbol: Optional[Symbol]) -> FrozenSet[State]:
        """Destinations of (state, symbol); empty if there is no such transition."""
        return self.transitions.get((state, symbol), frozenset())

    @property
    def has_epsilon_transitions(self) -> bool:
        return any(symbol is None for _, symbol in self.transitions)

    @property
    def transition_count(self) -> int:
        return sum(len(targets) for targets in self.transitions.values())


@dataclass(frozen=True)
class DFA:
    """
    A deterministic finite automaton whose transition function may be partial.

    A missing (state, symbol) entry means the input is rejected at that point;
    it is not shorthand for a transition into a trap state.
    """
    states: FrozenSet[State]
    alphabet: FrozenSet[Symbol]
    transitions: DFATransitions
    start: State
    accepting: FrozenSet[State]

    @classmethod
    def build(cls, states: Iterable[State], alphabet: Iterable[Symbol],
              transitions: Mapping[Tuple[State, Symbol], State],
              start: State, accepting: Iterable[State]) -> 'DFA':
        return cls(
            states=frozenset(states),
            alphabet=frozenset(alphabet),
            transitions=MappingProxyType(dict(transitions)),
            start=start,
            accepting=frozenset(accepting),
        )

    def target(self, state: State, symbol: Symbol) -> Optional[State]:
        """Destination of (state, symbol), or None when the transition is absent."""
        return self.transitions.get((state, symbol))

    def is_accepting(self, state: State) -> bool:
        return state in self.accepting

    @property
    def transition_count(self) -> int:
        return len(self.transitions)
