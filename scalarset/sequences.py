from collections.abc import Sequence


def equal(seq1: Sequence, seq2: Sequence) -> bool:
    """Return True if two sequences hold equal elements at equal positions.

    The comparison is order-sensitive: ``equal([1, 2], [2, 1])`` is False.
    Sequences of different lengths are never equal.
    """
    if len(seq1) != len(seq2):
        return False
    for element, other_element in zip(seq1, seq2):
        if element != other_element:
            return False
    return True
