"""vault-approle command-line interface."""
