"""Transitive allergy derivation over the sub-ingredient graph.

Pure functions over an in-memory ``ingredient id -> IngredientNode``
mapping. Loading the mapping from storage is the caller's job (see the
enrichment service), which keeps the traversal free of I/O.

The traversal is a depth-first walk with a visited set shared by the whole
walk. A node reached a second time contributes nothing, which guarantees
termination on cyclic data; for a cycle ``A -> B -> A`` the result of ``A``
is exactly ``A.direct | B.direct``. Dangling references contribute nothing.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, MutableMapping, Optional, Set, Tuple

from domain.ingredient.entity import Ingredient


@dataclass(frozen=True)
class IngredientNode:
    """Subset of an ingredient needed for derivation and display."""

    ingredient_id: str
    name: str
    allergy_ids: Tuple[str, ...] = ()
    sub_ingredient_ids: Tuple[str, ...] = ()

    @classmethod
    def from_ingredient(cls, ingredient: Ingredient) -> "IngredientNode":
        return cls(
            ingredient_id=ingredient.ingredient_id,
            name=ingredient.name,
            allergy_ids=tuple(ingredient.allergy_ids),
            sub_ingredient_ids=tuple(ingredient.sub_ingredient_ids),
        )


IngredientGraph = Mapping[str, IngredientNode]
AllergyMemo = MutableMapping[str, Tuple[str, ...]]


def all_allergies(
    ingredient_id: str,
    graph: IngredientGraph,
    memo: Optional[AllergyMemo] = None,
    visited: Optional[Set[str]] = None,
) -> List[str]:
    """Compute every allergy of an ingredient, direct or inherited.

    Args:
        ingredient_id: Ingredient to resolve
        graph: Reachable ingredients keyed by id (missing ids are dangling)
        memo: Optional cache of completed results, shared across sibling
            calls of one batch. Only results of walks started with an empty
            visited set are stored or reused, so memoized and unmemoized
            calls return the same list.
        visited: Ids already walked by the caller; they contribute nothing.
            Seeded empty when omitted and updated in place.

    Returns:
        Allergy ids without duplicates, in depth-first discovery order

    Examples:
        >>> graph = {
        ...     "ING-000001": IngredientNode("ING-000001", "Bun", ("ALG-000001",), ("ING-000002",)),
        ...     "ING-000002": IngredientNode("ING-000002", "Sesame", ("ALG-000002",)),
        ... }
        >>> all_allergies("ING-000001", graph)
        ['ALG-000001', 'ALG-000002']
    """
    fresh_walk = not visited
    if fresh_walk and memo is not None and ingredient_id in memo:
        return list(memo[ingredient_id])

    if visited is None:
        visited = set()

    found: Dict[str, None] = {}
    stack = [ingredient_id]
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)

        node = graph.get(current)
        if node is None:
            continue

        for allergy_id in node.allergy_ids:
            found.setdefault(allergy_id)
        # Reversed so the first sub-ingredient is walked first.
        stack.extend(reversed(node.sub_ingredient_ids))

    result = list(found)
    if fresh_walk and memo is not None:
        memo[ingredient_id] = tuple(result)
    return result


def derived_only(
    ingredient_id: str,
    graph: IngredientGraph,
    memo: Optional[AllergyMemo] = None,
) -> List[str]:
    """Allergies inherited through sub-ingredients but not declared directly.

    Examples:
        >>> graph = {
        ...     "ING-000001": IngredientNode("ING-000001", "Bun", ("ALG-000001",), ("ING-000002",)),
        ...     "ING-000002": IngredientNode("ING-000002", "Sesame", ("ALG-000002",)),
        ... }
        >>> derived_only("ING-000001", graph)
        ['ALG-000002']
    """
    node = graph.get(ingredient_id)
    direct = set(node.allergy_ids) if node else set()
    return [a for a in all_allergies(ingredient_id, graph, memo) if a not in direct]
