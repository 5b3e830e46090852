# housing_prep/folds.py
import logging
import warnings
from typing import List, Optional

import numpy as np
import pandas as pd
from sklearn.model_selection import KFold, StratifiedKFold

from .config import N_SPLITS

log = logging.getLogger(__name__)


def make_folds(categories, k: int = N_SPLITS, seed: Optional[int] = None) -> List[np.ndarray]:
    """Split row positions into k disjoint folds, stratified by category.

    Returns a list of k arrays of positional indices whose union is every row.
    Categories with fewer than k rows cannot be spread over all folds, so some
    folds simply get none of them. If no category has k rows at all, the split
    falls back to a shuffled KFold.
    """
    labels = pd.Series(categories).astype(object).fillna("__na__").astype(str).to_numpy()
    n = len(labels)
    if k < 2:
        raise ValueError(f"k must be at least 2, got {k}")
    if k > n:
        raise ValueError(f"k={k} folds requested for only {n} rows")

    counts = pd.Series(labels).value_counts()
    if counts.max() >= k:
        splitter = StratifiedKFold(n_splits=k, shuffle=True, random_state=seed)
    else:
        log.debug("No category has %d rows; using unstratified KFold", k)
        splitter = KFold(n_splits=k, shuffle=True, random_state=seed)

    X = np.zeros((n, 1))
    with warnings.catch_warnings():
        # StratifiedKFold warns when the rarest category has fewer than k rows
        warnings.simplefilter("ignore", UserWarning)
        folds = [va_idx for _, va_idx in splitter.split(X, labels)]
    return folds


def fold_ids(folds: List[np.ndarray], n_rows: int) -> np.ndarray:
    """Inverse of make_folds: fold number (0-based) for each row position."""
    ids = np.full(n_rows, -1, dtype=int)
    for fold, idx in enumerate(folds):
        ids[idx] = fold
    return ids
