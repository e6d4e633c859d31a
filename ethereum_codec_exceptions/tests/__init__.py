"""Tests for the codec exceptions."""
