"""Dependency graph generator for Swift Package Manager workspaces."""
