"""Tests for CSS Import Resolver."""
