"""Comembership of observation pairs within a clustering."""

import numpy as np
from scipy.special import comb

from .tables import InvalidArgument, encode_labels, contingency_table


def comembership(labels):
    """Flag every pair of observations that share a cluster label.

    Pairs (i, j) with i < j are enumerated row by row over the upper
    triangle: (0, 1), (0, 2), ..., (0, n-1), (1, 2), ..., (n-2, n-1).

    Building all pairs explicitly costs O(n^2) time and memory, so this is
    meant for moderate n. Use `comembership_table` when only the pair counts
    of two clusterings are needed.

    Parameters
    ----------
    labels : array-like of shape (N,)
        Hashable cluster labels. Compared exactly, so 1 and 1.0 are the
        same label but 1.0 and 1.0000001, or 1 and "1", are not.

    Returns
    -------
    comembers : np.ndarray of shape (N * (N - 1) / 2,), dtype int64
        1 if the pair shares a label, 0 otherwise. Empty when N <= 1.
    """
    _, codes = encode_labels(labels)
    first, second = np.triu_indices(len(codes), k=1)
    return (codes[first] == codes[second]).astype(np.int64)


def pair_index(i, j, n):
    """Position of the pair (i, j) in the vector returned by `comembership`."""
    if not 0 <= i < j < n:
        raise InvalidArgument(
            f"Expected 0 <= i < j < n, got i={i}, j={j}, n={n}."
        )
    return i * n - i * (i + 1) // 2 + (j - i - 1)


def comembership_table(labels1, labels2):
    """Count observation pairs by whether each clustering groups them.

    Equivalent to comparing `comembership(labels1)` with
    `comembership(labels2)` entry by entry, but computed from the
    contingency table in O(N + K1 * K2).

    Parameters
    ----------
    labels1, labels2 : array-like of shape (N,)

    Returns
    -------
    table : dict
        n_11 : pairs comembers in both clusterings
        n_10 : pairs comembers in labels1 only
        n_01 : pairs comembers in labels2 only
        n_00 : pairs comembers in neither
    """
    _, _, counts = contingency_table(labels1, labels2)
    return _pair_counts(counts)


def _pair_counts(counts):
    """Pair counts n_11, n_10, n_01, n_00 from a contingency table."""
    n = int(counts.sum())
    n_11 = int(comb(counts, 2, exact=False).sum().round())
    pairs1 = int(comb(counts.sum(axis=1), 2, exact=False).sum().round())
    pairs2 = int(comb(counts.sum(axis=0), 2, exact=False).sum().round())
    total = n * (n - 1) // 2

    return {
        "n_11": n_11,
        "n_10": pairs1 - n_11,
        "n_01": pairs2 - n_11,
        "n_00": total - pairs1 - pairs2 + n_11,
    }
