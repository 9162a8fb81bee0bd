#!/usr/bin/python3

import click
from ape.cli import ConnectedProviderCommand, account_option, network_option

from swapx_deployment.constants import SWAPX_PROXY_ADDRESS, SWAPX_V2_CONTRACT_NAME
from swapx_deployment.params import Deployer
from swapx_deployment.swapx import upgrade_swapx
from swapx_deployment.types import ChecksumAddress
from swapx_deployment.utils import get_contract_container


@click.command(cls=ConnectedProviderCommand, name="upgrade-swapx")
@account_option()
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
@click.option(
    "--verify",
    help="Publish the new implementation source to the block explorer.",
    is_flag=True,
)
@click.option(
    "--auto",
    help="Automatically sign transactions.",
    is_flag=True,
)
def cli(account, network, proxy_address, contract_name, verify, auto):
    """Upgrades the SwapX proxy to a new implementation."""
    click.echo(f"Connected to {network.name} network.")

    container = get_contract_container(contract_name)
    deployer = Deployer(verify=verify, account=account, autosign=auto)
    upgrade_swapx(proxy_address=proxy_address, container=container, deployer=deployer)


if __name__ == "__main__":
    cli()
