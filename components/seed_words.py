import logging
import time

from tries.prefix_index import PrefixIndex

log = logging.getLogger("autosuggest")

## Fixed sample dictionary loaded at startup, letters a through i
SEED_WORDS = [
  "apple",    "app",         "apply",  "apricot", "apartment", "appetite",
  "banana",   "bat",         "ball",   "battle",  "badge",     "balance",
  "cat",      "caterpillar", "cattle", "camera",  "castle",    "canvas",
  "dog",      "dove",        "doll",   "dragon",  "dance",     "danger",
  "elephant", "egg",         "eagle",  "earth",   "energy",    "fish",
  "frog",     "falcon",      "forest", "fortune", "goat",      "grape",
  "giraffe",  "galaxy",      "garden", "hat",     "home",      "horse",
  "harbor",   "harmony",     "ice",    "igloo",   "island",    "iron",
  "imagine",
]


def build_seed_index(words=None):
  """Build a PrefixIndex from `words` (default: SEED_WORDS).

  Returns (index, elapsed_ms) where elapsed_ms is the wall-clock load time.
  """
  if words is None:
    words = SEED_WORDS
  start = time.perf_counter()
  index = PrefixIndex()
  for word in words:
    index.insert(word)
  elapsed_ms = (time.perf_counter() - start) * 1000.0
  log.info("Loaded %d words in %.3fms", index.count(), elapsed_ms)
  return index, elapsed_ms
