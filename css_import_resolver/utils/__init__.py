"""Utilities for CSS Import Resolver."""
