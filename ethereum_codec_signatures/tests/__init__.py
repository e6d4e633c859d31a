"""
Tests for the signature codec.
"""
