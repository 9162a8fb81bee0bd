from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from ethpm_types import MethodABI

# addresses without hex letters are valid checksum addresses as-is
DEPLOYER_ADDRESS = "0x" + "11" * 20
PROXY_ADDRESS = "0x" + "22" * 20
IMPLEMENTATION_ADDRESS = "0x" + "33" * 20
ADMIN_ADDRESS = "0x" + "44" * 20
NEW_IMPLEMENTATION_ADDRESS = "0x" + "55" * 20

FACTORY_V3 = "0x" + "66" * 20
PANCAKE_FACTORY_V3 = "0x" + "77" * 20
WETH = "0x" + "88" * 20


def method_abi(name, *inputs):
    return MethodABI(
        type="function",
        name=name,
        stateMutability="nonpayable",
        inputs=[{"name": input_name, "type": input_type} for input_name, input_type in inputs],
        outputs=[],
    )


INITIALIZE_ABI = method_abi(
    "initialize",
    ("_factoryV3", "address"),
    ("_pancakeFactoryV3", "address"),
    ("_WETH", "address"),
    ("_feeCollector", "address"),
    ("_feeRate", "uint256"),
)

UPGRADE_ABI = method_abi("upgrade", ("proxy", "address"), ("implementation", "address"))

UPGRADE_AND_CALL_ABI = method_abi(
    "upgradeAndCall",
    ("proxy", "address"),
    ("implementation", "address"),
    ("data", "bytes"),
)


def make_container(name, methods=None, constructor_inputs=None):
    container = MagicMock(name=f"{name}Container")
    container.contract_type.name = name
    container.contract_type.methods = list(methods or [])
    container.constructor.abi.inputs = [
        SimpleNamespace(name=input_name) for input_name in constructor_inputs or []
    ]
    container.at.side_effect = lambda address: SimpleNamespace(
        address=address, contract_type=container.contract_type
    )
    return container


@pytest.fixture
def swapx_container():
    return make_container("SwapX", methods=[INITIALIZE_ABI])


@pytest.fixture
def swapx_v2_container():
    return make_container("SwapXV2", methods=[INITIALIZE_ABI])


@pytest.fixture
def deployer_account():
    account = MagicMock(name="deployer_account")
    account.address = DEPLOYER_ADDRESS
    return account


@pytest.fixture
def deployer(deployer_account):
    deployer = MagicMock(name="deployer")
    deployer.get_account.return_value = deployer_account
    deployer.deploy_proxy.return_value = SimpleNamespace(address=PROXY_ADDRESS)
    return deployer
