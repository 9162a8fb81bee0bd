from types import SimpleNamespace

import pytest

from swapx_deployment import networks
from swapx_deployment.networks import (
    NETWORK_CONFIG,
    ConfigurationError,
    NetworkConfig,
    format_fee_rate,
    get_network_config,
    get_network_name,
    is_placeholder,
    validate_network_config,
)
from tests.conftest import FACTORY_V3, PANCAKE_FACTORY_V3, WETH


def _config(**overrides):
    fields = dict(
        factory_v3=FACTORY_V3, pancake_factory_v3=PANCAKE_FACTORY_V3, weth=WETH, fee_rate=30
    )
    fields.update(overrides)
    return NetworkConfig(**fields)


def _connect(monkeypatch, ecosystem, network):
    provider = SimpleNamespace(
        network=SimpleNamespace(name=network, ecosystem=SimpleNamespace(name=ecosystem))
    )
    monkeypatch.setattr(networks, "networks", SimpleNamespace(provider=provider))


def test_bsc_mainnet_config():
    config = get_network_config("bsc")
    assert config.factory_v3 == "0x0BFbCF9fa4f9C56B0F40a671Ad40E0805A091865"
    assert config.pancake_factory_v3 == "0x0BFbCF9fa4f9C56B0F40a671Ad40E0805A091865"
    assert config.weth == "0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c"
    assert config.fee_rate == 100
    assert format_fee_rate(config.fee_rate) == "1%"


def test_unknown_network():
    with pytest.raises(ConfigurationError, match="Unsupported network: unknown"):
        get_network_config("unknown")


@pytest.mark.parametrize("network_name", ["bsctest", "local"])
def test_placeholder_configs_are_incomplete(network_name):
    assert network_name in NETWORK_CONFIG
    with pytest.raises(ConfigurationError, match="is incomplete"):
        get_network_config(network_name)


@pytest.mark.parametrize("field", ["factory_v3", "pancake_factory_v3", "weth"])
@pytest.mark.parametrize("value", ["", "0x...", "0x...."])
def test_missing_or_placeholder_address(field, value):
    with pytest.raises(ConfigurationError, match="is incomplete"):
        validate_network_config("test", _config(**{field: value}))


def test_invalid_address():
    with pytest.raises(ConfigurationError, match="not a valid address"):
        validate_network_config("test", _config(weth="0x1234"))


def test_lowercase_addresses_are_checksummed():
    lowercase_wbnb = "0xbb4cdb9cbd36b01bd1cbaebf2de08d9173bc095c"
    config = validate_network_config("test", _config(weth=lowercase_wbnb))
    assert config.weth == "0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c"


@pytest.mark.parametrize("fee_rate", [-1, 10_001, 1.5, "30", True])
def test_invalid_fee_rate(fee_rate):
    with pytest.raises(ConfigurationError, match="fee rate"):
        validate_network_config("test", _config(fee_rate=fee_rate))


@pytest.mark.parametrize("fee_rate", [0, 10_000])
def test_fee_rate_bounds(fee_rate):
    assert validate_network_config("test", _config(fee_rate=fee_rate)).fee_rate == fee_rate


def test_custom_config_table():
    table = {"testnet": _config()}
    assert get_network_config("testnet", config_table=table) == _config()
    with pytest.raises(ConfigurationError):
        get_network_config("bsc", config_table=table)


@pytest.mark.parametrize(
    "fee_rate,expected",
    [(100, "1%"), (30, "0.3%"), (0, "0%"), (250, "2.5%"), (1, "0.01%"), (10_000, "100%")],
)
def test_format_fee_rate(fee_rate, expected):
    assert format_fee_rate(fee_rate) == expected


def test_is_placeholder():
    assert is_placeholder("0x...")
    assert is_placeholder("0x....")
    assert not is_placeholder(WETH)


@pytest.mark.parametrize(
    "ecosystem,network,expected",
    [
        ("bsc", "mainnet", "bsc"),
        ("bsc", "mainnet-fork", "bsc"),
        ("bsc", "testnet", "bsctest"),
        ("ethereum", "local", "local"),
        ("ethereum", "mainnet", "ethereum:mainnet"),
    ],
)
def test_get_network_name(monkeypatch, ecosystem, network, expected):
    _connect(monkeypatch, ecosystem, network)
    assert get_network_name() == expected


def test_unaliased_network_is_unsupported(monkeypatch):
    _connect(monkeypatch, "polygon", "mainnet")
    with pytest.raises(ConfigurationError, match="polygon:mainnet"):
        get_network_config(get_network_name())
