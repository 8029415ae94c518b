"""Summary statistics over a PrefixIndex, shared by the console and web views."""

import numpy as np
import pandas as pd


def letter_distribution(index):
  """Stored-word count per initial letter, one row per letter present."""
  counts = {}
  root_children = index.root.children or {}
  for letter in sorted(root_children):
    counts[letter] = sum(1 for _ in index.enumerate_prefix(letter))
  return pd.DataFrame({"letter": list(counts.keys()), "words": list(counts.values())},
                      columns=["letter", "words"])


def length_summary(index):
  """Min / max / mean / median word length. All zero for an empty index."""
  lengths = np.fromiter((len(w) for w in index.enumerate_prefix("")), dtype=np.int64)
  if lengths.size == 0:
    return {"min": 0, "max": 0, "mean": 0.0, "median": 0.0}
  return {
    "min": int(lengths.min()),
    "max": int(lengths.max()),
    "mean": float(lengths.mean()),
    "median": float(np.median(lengths)),
  }


def summarize(index):
  summary = {
    "words": index.count(),
    "nodes": index.count_nodes(),
    "avg_branch_factor": index.count_nodes(get_avg_branch_factor=True),
  }
  summary.update({f"length_{k}": v for k, v in length_summary(index).items()})
  return summary
