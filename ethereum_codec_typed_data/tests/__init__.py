"""
Tests for the EIP-712 typed data hasher.
"""
