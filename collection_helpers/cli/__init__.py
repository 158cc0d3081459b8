"""Command-line interface for `collection_helpers`."""
