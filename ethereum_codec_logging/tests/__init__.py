"""Tests for the codec logging module."""
