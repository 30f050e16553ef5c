"""Example: compare k-means and hierarchical clusterings of toy data.

Draws three Gaussian blobs, clusters them with scipy's k-means and with
average-linkage hierarchical clustering, and reports how far apart the two
clusterings (and each against the true populations) are.
"""

import sys
from pathlib import Path

import numpy as np
from scipy.cluster.vq import kmeans2, whiten
from scipy.cluster.hierarchy import linkage, fcluster

# Add parent dir so clusteval is importable without install
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "clusteval" / "src"))

import clusteval

# ── Toy data ─────────────────────────────────────────────────────────────

rng = np.random.default_rng(42)
centers = np.array([[0.0, 0.0], [3.0, 3.0], [0.0, 3.0]])
sizes = [30, 50, 70]
X = np.vstack([rng.normal(c, 1.0, size=(m, 2)) for c, m in zip(centers, sizes)])
true_labels = np.repeat(np.arange(1, 4), sizes)

# ── Two clusterings ──────────────────────────────────────────────────────

_, kmeans_labels = kmeans2(whiten(X), 3, minit="++", seed=42)
hclust_labels = fcluster(linkage(X, method="average"), t=3, criterion="maxclust")

# ── Compare ──────────────────────────────────────────────────────────────

vi = clusteval.variation_of_information(kmeans_labels, hclust_labels)
print(f"VI(k-means, hierarchical): {vi:.4f}  (upper bound log(n) = {np.log(len(X)):.4f})")

for name, labels in [("k-means", kmeans_labels), ("hierarchical", hclust_labels)]:
    print(f"\n{name} vs true populations:")
    clusteval.compare_clusterings(true_labels, labels, verbose=1)

# ── Random labels, as a baseline ─────────────────────────────────────────

K, n = 3, 30
labels1 = rng.integers(1, K + 1, size=n)
labels2 = rng.integers(1, K + 1, size=n)
print(f"\nVI of two random {K}-clusterings of {n} points: "
      f"{clusteval.variation_of_information(labels1, labels2):.4f}")
