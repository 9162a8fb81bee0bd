#!/usr/bin/python3

import click
from ape.cli import ConnectedProviderCommand, account_option, network_option

from swapx_deployment.constants import SWAPX_CONTRACT_NAME
from swapx_deployment.networks import get_network_name
from swapx_deployment.params import Deployer
from swapx_deployment.swapx import deploy_swapx
from swapx_deployment.utils import get_contract_container


@click.command(cls=ConnectedProviderCommand, name="deploy-swapx")
@account_option()
@network_option(required=True)
@click.option(
    "--verify",
    help="Publish the implementation source to the block explorer.",
    is_flag=True,
)
@click.option(
    "--auto",
    help="Automatically sign transactions.",
    is_flag=True,
)
def cli(account, network, verify, auto):
    """
    Deploys the SwapX upgradeable proxy.

    ape run deploy_swapx --network bsc:mainnet:node --account <alias>
    """
    click.echo(f"Connected to {network.name} network.")

    network_name = get_network_name()
    container = get_contract_container(SWAPX_CONTRACT_NAME)
    deploy_swapx(
        network_name=network_name,
        container=container,
        deployer_factory=lambda: Deployer(verify=verify, account=account, autosign=auto),
    )


if __name__ == "__main__":
    cli()
