"""Entropy, mutual information and the Variation of Information distance.

The Variation of Information (Meila, 2007) between two clusterings C and C'
of the same n observations is

    VI(C, C') = H(C) + H(C') - 2 I(C, C')

where H is the entropy of the cluster-size distribution and I is the mutual
information of the joint distribution of (cluster in C, cluster in C').
VI is a metric on partitions, lies in [0, log(n)] and is 0 exactly when the
two clusterings induce the same partition.

Throughout, 0 * log(0) is taken to be 0.

References
----------
Meila, M. (2007). "Comparing clusterings - an information based distance",
Journal of Multivariate Analysis, 98(5), 873-895.
"""

import numpy as np
from scipy.special import xlogy

from .tables import (
    InvalidArgument, as_labels, check_same_length, encode_labels,
    contingency_table,
)


def _log_scale(base):
    """Divisor turning natural logs into logs of the given base."""
    if base is None:
        return 1.0
    if base <= 0 or base == 1:
        raise InvalidArgument(
            f"The logarithm base must be positive and different from 1, got {base}."
        )
    return np.log(base)


def safe_log_term(numerator, denominator, base=None):
    """Compute numerator * log(numerator / denominator) elementwise.

    Terms whose numerator is 0 are exactly 0, whatever the denominator;
    log(0) is never evaluated.

    Parameters
    ----------
    numerator, denominator : float or array-like
        Broadcast against each other.
    base : float or None
        Logarithm base. None means natural logarithm.

    Returns
    -------
    terms : float or np.ndarray
    """
    scale = _log_scale(base)
    numerator = np.asarray(numerator, dtype=float)
    denominator = np.asarray(denominator, dtype=float)
    shape = np.broadcast(numerator, denominator).shape

    ratio = np.divide(numerator, denominator, out=np.zeros(shape),
                      where=numerator != 0)
    terms = xlogy(numerator, ratio) / scale
    if terms.ndim == 0:
        return float(terms)
    return terms


def entropy(probs, base=None):
    """Shannon entropy -sum(p * log(p)) of a probability vector."""
    probs = np.asarray(probs, dtype=float)
    return float(-np.sum(safe_log_term(probs, 1.0, base=base)))


def marginal_probabilities(labels):
    """Empirical probability of each cluster.

    Returns
    -------
    alphabet : np.ndarray of shape (K,)
        Distinct labels (see `tables.encode_labels` for their order).
    probs : np.ndarray of shape (K,)
        probs[k] = fraction of observations labelled alphabet[k].
    """
    alphabet, codes = encode_labels(labels)
    n = len(codes)
    counts = np.bincount(codes, minlength=len(alphabet))
    if n == 0:
        return alphabet, counts.astype(float)
    return alphabet, counts / n


def joint_probabilities(labels1, labels2):
    """Empirical joint distribution of (cluster in labels1, cluster in labels2).

    Returns
    -------
    alphabet1, alphabet2 : np.ndarray
    table : np.ndarray of shape (K1, K2)
        Cells never observed are 0.
    """
    alphabet1, alphabet2, counts = contingency_table(labels1, labels2)
    n = counts.sum()
    if n == 0:
        return alphabet1, alphabet2, counts.astype(float)
    return alphabet1, alphabet2, counts / n


def _information_terms(counts, base):
    """Return H1, H2 and I from a contingency table of counts."""
    n = max(counts.sum(), 1)
    joint = counts / n
    probs1 = counts.sum(axis=1) / n
    probs2 = counts.sum(axis=0) / n

    h1 = entropy(probs1, base=base)
    h2 = entropy(probs2, base=base)
    mi = float(np.sum(safe_log_term(joint, np.outer(probs1, probs2),
                                    base=base)))
    return h1, h2, mi


def mutual_information(labels1, labels2, base=None):
    """Mutual information I(C, C') = sum J * log(J / (p1 * p2)).

    Parameters
    ----------
    labels1, labels2 : array-like of shape (N,)
    base : float or None
        Logarithm base. None means natural logarithm (nats).

    Returns
    -------
    mi : float
    """
    labels1 = as_labels(labels1)
    labels2 = as_labels(labels2)
    check_same_length(labels1, labels2)
    _, _, counts = contingency_table(labels1, labels2)
    _, _, mi = _information_terms(counts, base)
    return max(mi, 0.0)


def variation_of_information(labels1, labels2, base=None):
    """Variation of Information distance between two clusterings.

    Parameters
    ----------
    labels1, labels2 : array-like of shape (N,)
        Cluster labels of the same N observations. Labels are arbitrary
        discrete values; only the partitions they induce matter.
    base : float or None
        Logarithm base used for both entropies and the mutual information.
        None means natural logarithm.

    Returns
    -------
    vi : float
        H1 + H2 - 2 I, in [0, log(N)]. Empty inputs give 0.0.

    Raises
    ------
    InvalidArgument
        If the label vectors have different lengths.
    """
    labels1 = as_labels(labels1)
    labels2 = as_labels(labels2)
    check_same_length(labels1, labels2)

    _, _, counts = contingency_table(labels1, labels2)
    h1, h2, mi = _information_terms(counts, base)
    vi = h1 + h2 - 2.0 * mi

    # Identical partitions may land a few ulps below zero
    return max(vi, 0.0)


def normalized_variation_of_information(labels1, labels2):
    """VI divided by its upper bound log(N), so that it lies in [0, 1]."""
    labels1 = as_labels(labels1)
    labels2 = as_labels(labels2)
    n = check_same_length(labels1, labels2)
    if n <= 1:
        return 0.0
    vi = variation_of_information(labels1, labels2)
    return min(vi / np.log(n), 1.0)
