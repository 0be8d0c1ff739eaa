"""Progressive income tax calculator."""
