"""Local pytest configuration shared by the codec package tests."""

pytest_plugins = ("ethereum_codec_logging.plugin",)
