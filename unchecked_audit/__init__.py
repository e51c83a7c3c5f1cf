"""Audit Rust sources for unchecked functions and their checked counterparts."""
