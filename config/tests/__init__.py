"""Tests for the codec configuration."""
