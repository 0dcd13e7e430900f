"""treetrap command line interface."""
