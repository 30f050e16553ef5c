"""clusteval — comparing clusterings by comembership and information."""

from .tables import InvalidArgument, contingency_table
from .comembership import comembership, comembership_table, pair_index
from .information import (
    entropy, marginal_probabilities, joint_probabilities,
    mutual_information, variation_of_information,
    normalized_variation_of_information,
)
from .metrics import cluster_similarity, adjusted_rand_index
from .compare import compare_clusterings
from . import tables, information, metrics

__version__ = "0.1.0"
__all__ = [
    "InvalidArgument", "contingency_table",
    "comembership", "comembership_table", "pair_index",
    "entropy", "marginal_probabilities", "joint_probabilities",
    "mutual_information", "variation_of_information",
    "normalized_variation_of_information",
    "cluster_similarity", "adjusted_rand_index", "compare_clusterings",
    "tables", "information", "metrics",
]
