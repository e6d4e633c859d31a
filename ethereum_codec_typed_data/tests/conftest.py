"""Fixtures for the typed data tests."""

from typing import Any, Dict

import pytest


@pytest.fixture
def mail_types() -> Dict[str, Any]:
    """Return the struct types of the EIP-712 `Mail` example."""
    return {
        "Person": [
            {"name": "name", "type": "string"},
            {"name": "wallet", "type": "address"},
        ],
        "Mail": [
            {"name": "from", "type": "Person"},
            {"name": "to", "type": "Person"},
            {"name": "contents", "type": "string"},
        ],
    }


@pytest.fixture
def mail_message() -> Dict[str, Any]:
    """Return the message of the EIP-712 `Mail` example."""
    return {
        "from": {"name": "Cow", "wallet": "0xcd2a3d9f938e13cd947ec05abc7fe734df8dd826"},
        "to": {"name": "Bob", "wallet": "0xbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb"},
        "contents": "Hello, Bob!",
    }


@pytest.fixture
def mail_domain() -> Dict[str, Any]:
    """Return the domain of the EIP-712 `Mail` example."""
    return {
        "name": "Ether Mail",
        "version": "1",
        "chainId": 1,
        "verifyingContract": "0xcccccccccccccccccccccccccccccccccccccccc",
    }


@pytest.fixture
def mail_typed_data(
    mail_types: Dict[str, Any], mail_message: Dict[str, Any], mail_domain: Dict[str, Any]
) -> Dict[str, Any]:
    """Return the complete EIP-712 `Mail` example."""
    return {
        "domain": mail_domain,
        "types": mail_types,
        "primaryType": "Mail",
        "message": mail_message,
    }
