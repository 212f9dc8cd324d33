"""branchflow - interactive git/gh workflows for a single repository."""
