"""One-call summary of how two clusterings differ."""

from .comembership import _pair_counts
from .information import _information_terms
from .metrics import Similarity, _similarity_from_pairs, _ari_from_contingency
from .tables import as_labels, check_same_length, contingency_table


def compare_clusterings(labels1, labels2, base=None, verbose=0):
    """Compute every comparison measure for a pair of clusterings.

    Parameters
    ----------
    labels1, labels2 : array-like of shape (N,)
        Cluster labels of the same N observations.
    base : float or None
        Logarithm base for the information measures. None means natural log.
    verbose : int
        Print a report when nonzero.

    Returns
    -------
    summary : dict
        n, n_clusters1, n_clusters2, entropy1, entropy2,
        mutual_information, variation_of_information, rand, jaccard,
        adjusted_rand_index.
    """
    labels1 = as_labels(labels1)
    labels2 = as_labels(labels2)
    n = check_same_length(labels1, labels2)

    alphabet1, alphabet2, counts = contingency_table(labels1, labels2)
    h1, h2, mi = _information_terms(counts, base)
    pairs = _pair_counts(counts)

    summary = {
        "n": n,
        "n_clusters1": len(alphabet1),
        "n_clusters2": len(alphabet2),
        "entropy1": h1,
        "entropy2": h2,
        "mutual_information": max(mi, 0.0),
        "variation_of_information": max(h1 + h2 - 2.0 * mi, 0.0),
        "rand": _similarity_from_pairs(pairs, Similarity.RAND),
        "jaccard": _similarity_from_pairs(pairs, Similarity.JACCARD),
        "adjusted_rand_index": _ari_from_contingency(counts),
    }

    if verbose:
        print(f"  n={n}: K1={summary['n_clusters1']} "
              f"K2={summary['n_clusters2']}")
        print(f"  H1={h1:.4f} H2={h2:.4f} I={summary['mutual_information']:.4f} "
              f"VI={summary['variation_of_information']:.4f}")
        print(f"  rand={summary['rand']:.4f} jaccard={summary['jaccard']:.4f} "
              f"ARI={summary['adjusted_rand_index']:.4f}")

    return summary
