"""Tests for the ethereum_codec_transactions package."""
