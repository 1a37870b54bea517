"""ASX portfolio quote report."""
