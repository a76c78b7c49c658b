"""Graph algorithms: traversal, orderings, spanning trees, flows, matching."""
