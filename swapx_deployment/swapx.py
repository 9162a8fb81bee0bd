"""
Deployment and upgrade of the SwapX proxy.

A SwapX deployment is a TransparentUpgradeableProxy in front of a SwapX
implementation, initialized with the network's PancakeSwap factories, the wrapped
native token, a fee collector and a fee rate in basis points. Upgrades keep the
proxy address and repoint it to a new implementation through its ProxyAdmin.
"""

from collections import OrderedDict
from typing import Any, Callable, Dict, NamedTuple, Optional

from ape.contracts import ContractContainer, ContractInstance
from eth_typing import ChecksumAddress

from swapx_deployment.networks import (
    NetworkConfig,
    format_fee_rate,
    get_network_config,
)
from swapx_deployment.params import Deployer, InitializerParameters
from swapx_deployment.proxy import get_admin_address, get_implementation_address

VERIFICATION_CALLS = (
    ("factory", "Factory address"),
    ("paused", "Is contract paused"),
    ("owner", "Contract owner"),
)


class DeploymentResult(NamedTuple):
    proxy: ChecksumAddress
    implementation: ChecksumAddress
    admin: ChecksumAddress


class VerificationFailure(NamedTuple):
    call: str
    error: Exception


class UpgradeResult(NamedTuple):
    proxy: ChecksumAddress
    previous_implementation: ChecksumAddress
    admin: ChecksumAddress
    implementation: ChecksumAddress
    verification: Dict[str, Any]

    @property
    def verified(self) -> bool:
        return not any(isinstance(v, VerificationFailure) for v in self.verification.values())


def print_parameters(config: NetworkConfig, fee_collector: str) -> None:
    print(
        "Using parameters:",
        f"- FactoryV3: {config.factory_v3}",
        f"- PancakeFactoryV3: {config.pancake_factory_v3}",
        f"- WETH: {config.weth}",
        f"- Fee Collector: {fee_collector}",
        f"- Fee Rate: {format_fee_rate(config.fee_rate)}",
        sep="\n",
    )


def deploy_swapx(
    network_name: str,
    container: ContractContainer,
    deployer_factory: Callable[[], Deployer],
    config_table: Optional[Dict[str, NetworkConfig]] = None,
) -> DeploymentResult:
    """
    Deploys SwapX behind a new transparent proxy on the given network.

    The network configuration is resolved and validated before the deployer is
    created, so an unknown network or an incomplete configuration never reaches
    the chain. The deployer account collects the fees.
    """
    print(f"Deploying to network: {network_name}")
    config = get_network_config(network_name, config_table=config_table)

    deployer = deployer_factory()
    fee_collector = deployer.get_account().address
    print_parameters(config, fee_collector)

    initializer_params = InitializerParameters.from_network_config(
        config=config, fee_collector=fee_collector
    )

    print(f"Deploying {container.contract_type.name} upgradeable proxy contract...")
    swapx = deployer.deploy_proxy(container, initializer_params)

    result = DeploymentResult(
        proxy=swapx.address,
        implementation=get_implementation_address(swapx.address),
        admin=get_admin_address(swapx.address),
    )
    name = container.contract_type.name
    print(f"{name} proxy contract deployed to: {result.proxy}")
    print(f"{name} implementation contract address: {result.implementation}")
    print(f"{name} admin address: {result.admin}")

    print("Deployment completed")
    return result


def verify_upgrade(instance: ContractInstance) -> Dict[str, Any]:
    """
    Performs read-only sanity calls against an upgraded proxy.

    Every call is attempted; a failing call is reported and recorded as a
    VerificationFailure without affecting the others.
    """
    report = OrderedDict()
    for call, label in VERIFICATION_CALLS:
        try:
            value = getattr(instance, call)()
        except Exception as e:
            print(f"Error verifying {call}(): {e}")
            report[call] = VerificationFailure(call=call, error=e)
            continue
        print(f"{label}: {value}")
        report[call] = value
    return report


def upgrade_swapx(
    proxy_address: str,
    container: ContractContainer,
    deployer: Deployer,
) -> UpgradeResult:
    """Upgrades the SwapX proxy at proxy_address to a new implementation."""
    print(f"Current proxy contract address: {proxy_address}")

    current_implementation = get_implementation_address(proxy_address)
    print(f"Current implementation contract address: {current_implementation}")

    admin = get_admin_address(proxy_address)
    print(f"Current Admin address: {admin}")

    print(f"Upgrading to {container.contract_type.name}...")
    upgraded = deployer.upgrade(container, proxy_address)

    new_implementation = get_implementation_address(proxy_address)
    print("Upgrade completed!")
    print(f"Proxy contract address: {proxy_address}")
    print(f"New implementation contract address: {new_implementation}")

    verification = verify_upgrade(upgraded)
    return UpgradeResult(
        proxy=proxy_address,
        previous_implementation=current_implementation,
        admin=admin,
        implementation=new_implementation,
        verification=verification,
    )
