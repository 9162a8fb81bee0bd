from decimal import Decimal
from typing import Dict, NamedTuple

from ape import networks
from eth_utils import is_address, to_checksum_address

from swapx_deployment.constants import (
    BASIS_POINTS,
    BSC,
    BSC_TESTNET,
    LOCAL,
    LOCAL_NETWORKS,
    NETWORK_ALIASES,
    PERCENT_BASIS_POINTS,
    PLACEHOLDER_ADDRESS,
)


class ConfigurationError(ValueError):
    """Raised when a network has no usable SwapX configuration."""


class NetworkConfig(NamedTuple):
    """SwapX initializer parameters for a single network."""

    factory_v3: str
    pancake_factory_v3: str
    weth: str
    fee_rate: int  # basis points

    def addresses(self) -> Dict[str, str]:
        return {
            "factoryV3": self.factory_v3,
            "pancakeFactoryV3": self.pancake_factory_v3,
            "WETH": self.weth,
        }


NETWORK_CONFIG = {
    BSC_TESTNET: NetworkConfig(
        factory_v3="0x...",  # PancakeSwap factoryV3
        pancake_factory_v3="0x....",  # PancakeSwap pancakeFactoryV3
        weth="0x...",  # WBNB
        fee_rate=30,  # 0.3%
    ),
    BSC: NetworkConfig(
        factory_v3="0x0BFbCF9fa4f9C56B0F40a671Ad40E0805A091865",  # PancakeSwap V2 factory
        pancake_factory_v3="0x0BFbCF9fa4f9C56B0F40a671Ad40E0805A091865",  # PancakeSwap V3 factory
        weth="0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c",  # WBNB
        fee_rate=100,  # 1%
    ),
    LOCAL: NetworkConfig(
        factory_v3="0x...",
        pancake_factory_v3="0x...",
        weth="0x...",
        fee_rate=30,
    ),
}


def is_placeholder(value: str) -> bool:
    """Returns True if the value is an unfilled address placeholder (e.g. '0x...')."""
    return value.startswith(PLACEHOLDER_ADDRESS)


def get_network_name() -> str:
    """Returns the configuration key of the network ape is connected to."""
    network = networks.provider.network
    network_choice = f"{network.ecosystem.name}:{network.name}"
    return NETWORK_ALIASES.get(network_choice, network_choice)


def is_local_network() -> bool:
    return networks.provider.network.name in LOCAL_NETWORKS


def is_fork_network() -> bool:
    return networks.provider.network.name.endswith("-fork")


def validate_network_config(network_name: str, config: NetworkConfig) -> NetworkConfig:
    """
    Checks that every address of the configuration is filled in and valid,
    and that the fee rate is expressed in basis points.
    Returns the configuration with checksummed addresses.
    """
    checksummed = dict()
    for name, value in config.addresses().items():
        if not value or is_placeholder(value):
            raise ConfigurationError(
                f"Configuration for network {network_name} is incomplete: '{name}' is not set, "
                "please complete the configuration first."
            )
        if not is_address(value):
            raise ConfigurationError(
                f"Configuration for network {network_name} is invalid: "
                f"'{name}' ({value}) is not a valid address."
            )
        checksummed[name] = to_checksum_address(value)

    fee_rate = config.fee_rate
    if isinstance(fee_rate, bool) or not isinstance(fee_rate, int):
        raise ConfigurationError(
            f"Configuration for network {network_name} is invalid: "
            f"fee rate must be an integer number of basis points, got {fee_rate!r}."
        )
    if not 0 <= fee_rate <= BASIS_POINTS:
        raise ConfigurationError(
            f"Configuration for network {network_name} is invalid: "
            f"fee rate {fee_rate} is outside of [0, {BASIS_POINTS}] basis points."
        )

    return NetworkConfig(
        factory_v3=checksummed["factoryV3"],
        pancake_factory_v3=checksummed["pancakeFactoryV3"],
        weth=checksummed["WETH"],
        fee_rate=fee_rate,
    )


def get_network_config(
    network_name: str, config_table: Dict[str, NetworkConfig] = None
) -> NetworkConfig:
    """Looks up and validates the SwapX configuration of a network."""
    config_table = NETWORK_CONFIG if config_table is None else config_table
    try:
        config = config_table[network_name]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported network: {network_name}, please add configuration in NETWORK_CONFIG."
        )
    return validate_network_config(network_name, config)


def format_fee_rate(fee_rate: int) -> str:
    """Renders a basis points fee rate as a percentage (100 -> '1%')."""
    percentage = Decimal(fee_rate) / PERCENT_BASIS_POINTS
    return f"{percentage:f}%"
