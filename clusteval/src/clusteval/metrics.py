"""Pair-counting measures for comparing clusterings."""

from enum import Enum

from scipy.special import comb

from .comembership import comembership_table
from .tables import as_labels, check_same_length, contingency_table


class Similarity(Enum):
    JACCARD = "jaccard"
    RAND = "rand"


def cluster_similarity(labels1, labels2, similarity="jaccard"):
    """Similarity of two clusterings from their comembership agreement.

    Parameters
    ----------
    labels1, labels2 : array-like of shape (N,)
        Cluster labels of the same N observations.
    similarity : str
        'jaccard': n_11 / (n_11 + n_10 + n_01), pairs grouped together by
        both clusterings among pairs grouped together by either.
        'rand': (n_11 + n_00) / (N choose 2), fraction of pairs on which the
        clusterings agree.

    Returns
    -------
    score : float
        In [0, 1]. 1.0 when the denominator is 0, since the clusterings
        then agree on every pair.
    """
    similarity = Similarity(similarity)
    return _similarity_from_pairs(comembership_table(labels1, labels2),
                                  similarity)


def _similarity_from_pairs(pairs, similarity):
    """Jaccard or Rand index from the pair counts of `comembership_table`."""
    if similarity == Similarity.JACCARD:
        agree = pairs["n_11"]
        total = pairs["n_11"] + pairs["n_10"] + pairs["n_01"]
    else:
        agree = pairs["n_11"] + pairs["n_00"]
        total = sum(pairs.values())

    if total == 0:
        return 1.0
    return agree / total


def adjusted_rand_index(labels_true, labels_pred):
    """Rand index of two clusterings, rescaled so chance agreement scores 0.

    Compares the number of pairs grouped together by both clusterings with
    its expectation under random labellings of the same cluster sizes
    (Hubert and Arabie, 1985). Identical partitions score 1; the index can
    drop below 0 when agreement is worse than chance.

    Parameters
    ----------
    labels_true : array-like of shape (N,)
        Reference clustering.
    labels_pred : array-like of shape (N,)
        Clustering to score against it.

    Returns
    -------
    ari : float
        1.0 when N <= 1, or when both clusterings are a single cluster or
        all singletons, since the index is then undefined and the
        partitions cannot disagree.

    Raises
    ------
    InvalidArgument
        If the label vectors have different lengths.
    """
    labels_true = as_labels(labels_true)
    labels_pred = as_labels(labels_pred)
    check_same_length(labels_true, labels_pred)

    _, _, contingency = contingency_table(labels_true, labels_pred)
    return _ari_from_contingency(contingency)


def _ari_from_contingency(contingency):
    n = int(contingency.sum())

    # Pairs together in both, in the rows, and in the columns
    sum_comb_c = comb(contingency, 2).sum()
    sum_comb_rows = comb(contingency.sum(axis=1), 2).sum()
    sum_comb_cols = comb(contingency.sum(axis=0), 2).sum()
    total_comb = comb(n, 2)

    if total_comb == 0:
        return 1.0

    expected = sum_comb_rows * sum_comb_cols / total_comb
    max_index = 0.5 * (sum_comb_rows + sum_comb_cols)

    if max_index == expected:
        return 1.0

    ari = (sum_comb_c - expected) / (max_index - expected)
    return float(ari)
