# scent_search/eval.py
from __future__ import annotations

import argparse
import re
from pathlib import Path
from typing import Dict, List, Sequence, Set

import pandas as pd

from .catalog import load_fallback_catalog
from .config import FALLBACK_CATALOG_PATH
from .ranking import coalesce_search_results

# ---------- IO helpers ----------

def _normalize_query_key(q: str) -> str:
    """Same query with different casing/whitespace maps to one key."""
    q = str(q or "").strip().lower()
    return re.sub(r"\s+", " ", q)


def read_golden(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    df = pd.read_csv(path, encoding="utf-8")
    cols = {c.lower(): c for c in df.columns}
    qcol, pcol = cols.get("query"), cols.get("product_id")
    if not qcol or not pcol:
        raise ValueError(
            f"Expected columns 'query' and 'product_id'. Found: {list(df.columns)}"
        )
    return df.rename(columns={qcol: "query", pcol: "product_id"})


def build_gold_sets(df: pd.DataFrame) -> Dict[str, Set[str]]:
    """normalized_query -> {expected product ids}"""
    gold: Dict[str, Set[str]] = {}
    for q, pid in df[["query", "product_id"]].itertuples(index=False, name=None):
        q_key = _normalize_query_key(q)
        pid = str(pid).strip()
        if q_key and pid:
            gold.setdefault(q_key, set()).add(pid)
    return gold

# ---------- metrics ----------

def recall_at_k(gold: Set[str], preds: Sequence[str], k: int) -> float:
    if not gold:
        return 0.0
    hits = len(gold.intersection(preds[:k]))
    return hits / float(len(gold))


def mean_recall_at_k(
    gold: Dict[str, Set[str]],
    preds: Dict[str, List[str]],
    k: int,
) -> float:
    """Mean recall over the queries present in ``gold``; missing preds count as 0."""
    if not gold:
        return 0.0
    total = sum(recall_at_k(g, preds.get(q, []), k) for q, g in gold.items())
    return total / len(gold)

# ---------- predictions ----------

def predict(queries: Sequence[str], catalog_path: Path = FALLBACK_CATALOG_PATH) -> Dict[str, List[str]]:
    """Ranked product ids per query, over the bundled catalog."""
    catalog = load_fallback_catalog(catalog_path)
    preds: Dict[str, List[str]] = {}
    for q in queries:
        payload = coalesce_search_results(catalog.products, catalog.journal, q)
        preds[q] = [r.id for r in payload.results.products]
    return preds

# ---------- CLI ----------

def main():
    ap = argparse.ArgumentParser(description="Recall@k of the search ranker on a golden query set")
    ap.add_argument("--golden", type=Path, required=True,
                    help="CSV with columns query,product_id")
    ap.add_argument("--catalog", type=Path, default=FALLBACK_CATALOG_PATH,
                    help="Catalog JSON to search (defaults to the bundled fallback)")
    ap.add_argument("--k", type=int, nargs="+", default=[1, 3, 5])
    args = ap.parse_args()

    gold = build_gold_sets(read_golden(args.golden))
    preds = predict(list(gold), catalog_path=args.catalog)
    for k in args.k:
        print(f"Recall@{k}: {mean_recall_at_k(gold, preds, k):.4f}")

if __name__ == "__main__":
    main()
