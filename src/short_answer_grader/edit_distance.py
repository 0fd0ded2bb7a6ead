from __future__ import annotations

from typing import Dict, List


def damerau_levenshtein(source: str, target: str) -> int:
    """
    Damerau-Levenshtein distance between two strings.

    Insertions, deletions, substitutions and transpositions of adjacent
    characters each cost one. Transpositions are found through the row where
    each character was last seen, so a swapped pair separated by later edits
    is still counted once (unlike the optimal string alignment variant).
    """
    if not source:
        return len(target)
    if not target:
        return len(source)

    rows = len(source)
    cols = len(target)
    infinity = rows + cols
    # table[i + 1][j + 1] holds the distance between source[:i] and target[:j];
    # the extra leading row and column act as a sentinel border.
    table: List[List[int]] = [[0] * (cols + 2) for _ in range(rows + 2)]
    table[0][0] = infinity
    for i in range(rows + 1):
        table[i + 1][0] = infinity
        table[i + 1][1] = i
    for j in range(cols + 1):
        table[0][j + 1] = infinity
        table[1][j + 1] = j

    last_row_by_char: Dict[str, int] = {}
    for i in range(1, rows + 1):
        last_match_col = 0
        for j in range(1, cols + 1):
            swap_row = last_row_by_char.get(target[j - 1], 0)
            swap_col = last_match_col
            if source[i - 1] == target[j - 1]:
                cost = 0
                last_match_col = j
            else:
                cost = 1
            table[i + 1][j + 1] = min(
                table[i][j] + cost,
                table[i + 1][j] + 1,
                table[i][j + 1] + 1,
                table[swap_row][swap_col]
                + (i - swap_row - 1)
                + 1
                + (j - swap_col - 1),
            )
        last_row_by_char[source[i - 1]] = i

    return table[rows + 1][cols + 1]
