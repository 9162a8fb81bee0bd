# Usage:
#  > ape run simulate_swapx_upgrade --network bsc:mainnet-fork:foundry

import click
from ape import accounts, chain
from ape.cli import ConnectedProviderCommand, network_option

from swapx_deployment.constants import (
    SWAPX_PROXY_ADDRESS,
    SWAPX_V2_CONTRACT_NAME,
    get_oz_dependency,
)
from swapx_deployment.networks import is_fork_network
from swapx_deployment.params import Deployer
from swapx_deployment.proxy import get_admin_address
from swapx_deployment.swapx import upgrade_swapx
from swapx_deployment.types import ChecksumAddress
from swapx_deployment.utils import get_contract_container


@click.command(cls=ConnectedProviderCommand, name="simulate-swapx-upgrade")
@network_option(required=True)
@click.option(
    "--proxy-address",
    "-p",
    help="Address of the SwapX proxy to upgrade.",
    type=ChecksumAddress(),
    default=SWAPX_PROXY_ADDRESS,
    show_default=True,
)
@click.option(
    "--contract-name",
    "-c",
    help="Name of the new implementation contract.",
    type=click.STRING,
    default=SWAPX_V2_CONTRACT_NAME,
    show_default=True,
)
def cli(network, proxy_address, contract_name):
    """Rehearses the SwapX upgrade on a forked network as the ProxyAdmin owner."""
    if not is_fork_network():
        raise click.BadParameter(
            f"{network.name} is not a fork network", param_hint="--network"
        )

    proxy_admin = get_oz_dependency().ProxyAdmin.at(get_admin_address(proxy_address))
    admin_owner = accounts.test_accounts.impersonate_account(proxy_admin.owner())
    chain.set_balance(admin_owner.address, "5 ether")
    click.echo(f"Impersonating ProxyAdmin owner {admin_owner.address}")

    container = get_contract_container(contract_name)
    deployer = Deployer(verify=False, account=admin_owner, autosign=True)
    result = upgrade_swapx(proxy_address=proxy_address, container=container, deployer=deployer)

    if not result.verified:
        raise click.ClickException("Upgraded proxy failed post-upgrade verification.")
    click.echo(f"Simulated upgrade of {proxy_address} to {result.implementation}")


if __name__ == "__main__":
    cli()
