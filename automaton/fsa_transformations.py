from typing import Dict, FrozenSet, List, Optional, Set, Tuple
from collections import defaultdict, deque

from .fsa_closure import epsilon_closure, move
from .fsa_model import DFA, NFA, State, Symbol

# Canonical, order-independent form of a set of NFA states
Subset = Tuple[State, ...]


def _canonical(states: FrozenSet[State]) -> Subset:
    return tuple(sorted(states))


def subset_construction(nfa: NFA) -> Tuple[DFA, Dict[State, Subset]]:
    """
    Converts an NFA to an equivalent DFA using the subset construction algorithm.

    DFA states are numbered from 0 in breadth-first discovery order, so the start
    state is always 0 and the numbering is reproducible for identical input.
    When no NFA state of a subset has a transition on a symbol, no DFA transition
    is recorded; the result is left partial rather than routed to a trap state.

    Args:
        nfa (NFA): A well-formed NFA, possibly with epsilon transitions

    Returns:
        Tuple[DFA, Dict[State, Subset]]: The DFA, and for each DFA state the
        sorted tuple of NFA states it represents
    """
    # Memorisation cache for epsilon closures, keyed by canonical subset
    epsilon_closure_cache: Dict[Subset, Subset] = {}

    def closure_of(states: FrozenSet[State]) -> Subset:
        key = _canonical(states)
        if key not in epsilon_closure_cache:
            epsilon_closure_cache[key] = _canonical(epsilon_closure(nfa, key))
        return epsilon_closure_cache[key]

    symbols = sorted(nfa.alphabet)

    start_closure = closure_of(frozenset({nfa.start}))
    dfa_state_map: Dict[Subset, State] = {start_closure: 0}
    queue = deque([start_closure])

    dfa_transitions: Dict[Tuple[State, Symbol], State] = {}
    dfa_accepting: Set[State] = set()

    while queue:
        current_nfa_states = queue.popleft()
        current_dfa_state = dfa_state_map[current_nfa_states]

        # Accepting if the subset contains any NFA accepting state
        if not nfa.accepting.isdisjoint(current_nfa_states):
            dfa_accepting.add(current_dfa_state)

        for symbol in symbols:
            moved_states = move(nfa, current_nfa_states, symbol)
            if not moved_states:
                continue

            new_state_set = closure_of(moved_states)
            if new_state_set not in dfa_state_map:
                dfa_state_map[new_state_set] = len(dfa_state_map)
                queue.append(new_state_set)

            dfa_transitions[(current_dfa_state, symbol)] = dfa_state_map[new_state_set]

    dfa = DFA.build(
        states=dfa_state_map.values(),
        alphabet=nfa.alphabet,
        transitions=dfa_transitions,
        start=0,
        accepting=dfa_accepting,
    )
    subsets = {state: subset for subset, state in dfa_state_map.items()}
    return dfa, subsets


def nfa_to_dfa(nfa: NFA) -> DFA:
    """Converts an NFA to an equivalent, possibly incomplete, DFA."""
    dfa, _ = subset_construction(nfa)
    return dfa


def reachable_states(dfa: DFA) -> Set[State]:
    """States reachable from the start state through defined transitions."""
    symbols = sorted(dfa.alphabet)

    reachable = {dfa.start}
    queue = deque([dfa.start])

    while queue:
        current = queue.popleft()
        for symbol in symbols:
            target = dfa.target(current, symbol)
            if target is not None and target not in reachable:
                reachable.add(target)
                queue.append(target)

    return reachable


def useful_states(dfa: DFA, reachable: Set[State]) -> Set[State]:
    """
    Among the reachable states, those that are accepting or have a path to an
    accepting state without leaving the reachable set.
    """
    # Build reverse graph restricted to reachable states
    reverse_graph: Dict[State, Set[State]] = defaultdict(set)
    for (state, _), target in dfa.transitions.items():
        if state in reachable and target in reachable:
            reverse_graph[target].add(state)

    # BFS backwards from accepting states
    alive_states = {state for state in dfa.accepting if state in reachable}
    queue = deque(alive_states)

    while queue:
        state = queue.popleft()
        for predecessor in reverse_graph[state]:
            if predecessor not in alive_states:
                alive_states.add(predecessor)
                queue.append(predecessor)

    return alive_states


def rejecting_dfa(alphabet: FrozenSet[Symbol]) -> DFA:
    """The canonical single-state automaton that rejects every string."""
    return DFA.build(
        states=[0],
        alphabet=alphabet,
        transitions={(0, symbol): 0 for symbol in alphabet},
        start=0,
        accepting=[],
    )


def distinguishable_pairs(dfa: DFA, states: List[State]) -> List[List[bool]]:
    """
    Fills the distinguishability table for the given states (table-filling).

    A pair is distinguishable when exactly one state is accepting, when on some
    symbol both transitions lead to a distinguishable pair, or when on some
    symbol exactly one of the two transitions is present. Transitions into
    states outside ``states`` count as absent.

    Args:
        dfa (DFA): The automaton the states belong to
        states (List[State]): The states to compare, in index order

    Returns:
        List[List[bool]]: Symmetric matrix, ``table[i][j]`` is True when
        ``states[i]`` and ``states[j]`` are distinguishable
    """
    index = {state: i for i, state in enumerate(states)}
    symbols = sorted(dfa.alphabet)
    n = len(states)

    # Destination index per state and symbol, None when absent or pruned
    moves: List[List[Optional[int]]] = [
        [index.get(dfa.target(state, symbol)) for symbol in symbols]
        for state in states
    ]

    table = [[False] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            if dfa.is_accepting(states[i]) != dfa.is_accepting(states[j]):
                table[i][j] = table[j][i] = True

    changed = True
    while changed:
        changed = False
        for i in range(n):
            for j in range(i + 1, n):
                if table[i][j]:
                    continue

                for k in range(len(symbols)):
                    t1, t2 = moves[i][k], moves[j][k]
                    if t1 is None and t2 is None:
                        continue
                    if t1 is None or t2 is None or table[t1][t2]:
                        table[i][j] = table[j][i] = True
                        changed = True
                        break

    return table


def _find(parent: List[int], i: int) -> int:
    root = i
    while parent[root] != root:
        root = parent[root]
    # Path compression
    while parent[i] != root:
        next_i = parent[i]
        parent[i] = root
        i = next_i
    return root


def equivalence_classes(states: List[State], table: List[List[bool]]) -> List[List[State]]:
    """
    Merges every pair not marked distinguishable using union-find.

    Returns:
        List[List[State]]: The classes, each sorted, ordered by smallest member
    """
    n = len(states)
    parent = list(range(n))

    for i in range(n):
        for j in range(i + 1, n):
            if not table[i][j]:
                root1, root2 = _find(parent, i), _find(parent, j)
                if root1 != root2:
                    parent[max(root1, root2)] = min(root1, root2)

    classes: Dict[int, List[State]] = defaultdict(list)
    for i, state in enumerate(states):
        classes[_find(parent, i)].append(state)

    return sorted((sorted(members) for members in classes.values()), key=lambda members: members[0])


def minimise_dfa(dfa: DFA) -> DFA:
    """
    Minimises a DFA using the table-filling (Myhill-Nerode) algorithm.

    Unreachable states and states that cannot lead to acceptance are removed
    first. If nothing useful remains the canonical all-rejecting automaton is
    returned. Missing transitions are kept missing; a transition present in one
    state and absent in another distinguishes the two.

    Args:
        dfa (DFA): The DFA to minimise, possibly incomplete

    Returns:
        DFA: A new minimal DFA. Its states are numbered by equivalence class in
        order of the smallest original state in each class.
    """
    reachable = reachable_states(dfa)
    useful = useful_states(dfa, reachable)

    # Handle empty language
    if not useful:
        return rejecting_dfa(dfa.alphabet)

    states = sorted(useful)
    table = distinguishable_pairs(dfa, states)
    classes = equivalence_classes(states, table)

    # Map old states to their class number
    state_map: Dict[State, State] = {}
    for class_id, members in enumerate(classes):
        for state in members:
            state_map[state] = class_id

    new_transitions: Dict[Tuple[State, Symbol], State] = {}
    for class_id, members in enumerate(classes):
        representative = members[0]
        for symbol in dfa.alphabet:
            target = dfa.target(representative, symbol)
            # Transitions into pruned states are dropped
            if target in state_map:
                new_transitions[(class_id, symbol)] = state_map[target]

    new_accepting = [
        class_id for class_id, members in enumerate(classes)
        if any(dfa.is_accepting(state) for state in members)
    ]

    return DFA.build(
        states=range(len(classes)),
        alphabet=dfa.alphabet,
        transitions=new_transitions,
        start=state_map[dfa.start],
        accepting=new_accepting,
    )
