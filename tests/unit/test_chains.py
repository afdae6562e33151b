"""Tests for fd_common.chains."""

from src.fd_common.chains import get_chain_info


def test_known_chain() -> None:
    info = get_chain_info(1)
    assert info is not None
    assert info.currency == "ETH"
    assert info.network_name == "Ethereum Mainnet"


def test_monad_uses_mon() -> None:
    info = get_chain_info(143)
    assert info is not None
    assert info.currency == "MON"


def test_unknown_and_missing_chain() -> None:
    assert get_chain_info(424242) is None
    assert get_chain_info(None) is None
