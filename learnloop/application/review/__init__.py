"""Review use cases: due cards, review sessions and the struggling queue."""
