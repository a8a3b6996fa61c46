"""Console rendering for the chatwire CLI."""
