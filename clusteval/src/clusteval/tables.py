"""Label encoding and contingency tables shared by the comparison measures."""

import numpy as np

# dtype kinds that np.unique can sort and compare exactly
_SORTABLE_KINDS = "biufUS"


class InvalidArgument(ValueError):
    """Raised when the arguments of a comparison are malformed."""


def as_labels(labels):
    """Return `labels` as a 1-D numpy array, one entry per observation.

    Numpy arrays are flattened. Any other sequence is copied element by
    element into an object array, so tuples stay single labels and values
    keep their own type (1 and "1" are different labels).
    """
    if isinstance(labels, np.ndarray):
        return labels.ravel()
    labels = list(labels)
    out = np.empty(len(labels), dtype=object)
    for i, label in enumerate(labels):
        out[i] = label
    return out


def check_same_length(labels1, labels2):
    """Raise InvalidArgument unless both label vectors have the same length."""
    n1, n2 = len(labels1), len(labels2)
    if n1 != n2:
        raise InvalidArgument(
            f"The two vectors of cluster labels must be of equal length "
            f"(got {n1} and {n2})."
        )
    return n1


def encode_labels(labels):
    """Map each label to its position in the alphabet.

    Numeric and string arrays are encoded with `np.unique`, giving a sorted
    alphabet. Other labels (enum members, tuples, None, mixed types) only
    need to be hashable; their alphabet is in order of first appearance.

    Returns
    -------
    alphabet : np.ndarray of shape (K,)
        Distinct labels.
    codes : np.ndarray of shape (N,)
        codes[i] is the index of labels[i] in `alphabet`.
    """
    labels = as_labels(labels)
    if labels.dtype.kind in _SORTABLE_KINDS:
        alphabet, codes = np.unique(labels, return_inverse=True)
        return alphabet, codes.ravel()

    label_map = {}
    codes = np.empty(len(labels), dtype=np.intp)
    for i, label in enumerate(labels):
        codes[i] = label_map.setdefault(label, len(label_map))

    alphabet = np.empty(len(label_map), dtype=object)
    for label, k in label_map.items():
        alphabet[k] = label
    return alphabet, codes


def contingency_table(labels1, labels2):
    """Count the observations falling in each pair of clusters.

    Parameters
    ----------
    labels1, labels2 : array-like of shape (N,)
        Two clusterings of the same N observations.

    Returns
    -------
    alphabet1 : np.ndarray of shape (K1,)
    alphabet2 : np.ndarray of shape (K2,)
    counts : np.ndarray of shape (K1, K2), dtype int64
        counts[a, b] = #{i : labels1[i] == alphabet1[a], labels2[i] == alphabet2[b]}
    """
    labels1 = as_labels(labels1)
    labels2 = as_labels(labels2)
    check_same_length(labels1, labels2)

    alphabet1, codes1 = encode_labels(labels1)
    alphabet2, codes2 = encode_labels(labels2)

    counts = np.zeros((len(alphabet1), len(alphabet2)), dtype=np.int64)
    np.add.at(counts, (codes1, codes2), 1)
    return alphabet1, alphabet2, counts
