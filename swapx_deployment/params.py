import typing
from collections import OrderedDict
from typing import Any, List

from ape import Contract, networks
from ape.api import AccountAPI, ReceiptAPI
from ape.cli.choices import select_account
from ape.contracts.base import ContractContainer, ContractInstance, ContractTransactionHandler
from ape.exceptions import ContractLogicError
from ape_accounts import KeyfileAccount
from ethpm_types import MethodABI
from web3 import Web3
from web3.auto import w3

from swapx_deployment.confirm import _confirm_resolution, _continue
from swapx_deployment.constants import INITIALIZER, LEGACY_PROXY_ADMIN_ABI, get_oz_dependency
from swapx_deployment.networks import NetworkConfig
from swapx_deployment.proxy import get_admin_address
from swapx_deployment.utils import check_plugins, get_contract_container


def _validate_method_args(
    method_abis: List[MethodABI], args: typing.Sequence[Any]
) -> typing.Dict[str, Any]:
    """Validates the transaction arguments against the function ABI."""
    if len(method_abis) == 0:
        raise ValueError("No method abis provided for validation of args")

    abis_matching_args_length = [abi for abi in method_abis if len(abi.inputs) == len(args)]
    for abi in abis_matching_args_length:
        named_args = {}
        for arg, abi_input in zip(args, abi.inputs):
            if not w3.is_encodable(abi_input.type, arg):
                break
            named_args[abi_input.name] = arg
        else:
            return named_args
    raise ValueError(
        f"Could not find ABI for '{method_abis[0].name}' with {len(args)} arg(s) and given type(s)"
    )


def _is_legacy_proxy_admin(proxy_admin: ContractInstance) -> bool:
    """Returns True if the ProxyAdmin predates OpenZeppelin 5 (no UPGRADE_INTERFACE_VERSION)."""
    try:
        proxy_admin.UPGRADE_INTERFACE_VERSION()
    except ContractLogicError:
        return True
    return False


class InitializerParameters:
    """Represents the ordered arguments of the SwapX initializer."""

    class Invalid(Exception):
        """Raised when the initializer parameters do not match the contract ABI"""

    def __init__(self, parameters: OrderedDict):
        self.parameters = parameters

    @classmethod
    def from_network_config(
        cls, config: NetworkConfig, fee_collector: str
    ) -> "InitializerParameters":
        parameters = OrderedDict(
            [
                ("factoryV3", config.factory_v3),
                ("pancakeFactoryV3", config.pancake_factory_v3),
                ("WETH", config.weth),
                ("feeCollector", fee_collector),
                ("feeRate", config.fee_rate),
            ]
        )
        return cls(parameters=parameters)

    @property
    def args(self) -> List[Any]:
        return list(self.parameters.values())

    def validate(self, container: ContractContainer, initializer: str = INITIALIZER) -> None:
        """Validates the parameters against the initializer ABI of a contract."""
        contract_name = container.contract_type.name
        method_abis = [abi for abi in container.contract_type.methods if abi.name == initializer]
        if not method_abis:
            raise self.Invalid(f"{contract_name} has no '{initializer}' method.")
        try:
            _validate_method_args(method_abis=method_abis, args=self.args)
        except ValueError as e:
            raise self.Invalid(f"{contract_name}.{initializer}: {e}") from e


class Transactor:
    """
    Represents an ape account plus validated/annotated transaction execution.
    """

    def __init__(self, account: typing.Optional[AccountAPI] = None, autosign: bool = False):
        if account is None:
            self._account = select_account()
        else:
            self._account = account
        if autosign:
            print("WARNING: Autosign is enabled. Transactions will be signed automatically.")
        self._autosign = autosign
        if isinstance(self._account, KeyfileAccount):
            self._account.set_autosign(autosign)

    def get_account(self) -> AccountAPI:
        """Returns the transactor account."""
        return self._account

    def transact(self, method: ContractTransactionHandler, *args) -> ReceiptAPI:
        named_args = _validate_method_args(method_abis=method.abis, args=args)
        base_message = (
            f"\nTransacting {method.contract.contract_type.name}"
            f"[{method.contract.address[:10]}].{method}"
        )
        if named_args:
            pretty_args = "\n\t".join(f"{k}={v}" for k, v in named_args.items())
            message = f"{base_message} with arguments:\n\t{pretty_args}"
        else:
            message = f"{base_message} with no arguments"
        print(message)
        if not self._autosign:
            _continue()

        result = method(*args, sender=self._account)
        return result


class Deployer(Transactor):
    """
    Represents an ape account plus validated/annotated
    deployment and upgrade of proxied contracts.
    """

    def __init__(
        self,
        verify: bool = False,
        account: typing.Optional[AccountAPI] = None,
        autosign: bool = False,
    ):
        super().__init__(account, autosign)

        check_plugins(verify=verify)
        self.verify = verify
        self._print_deployment_info()

        if not self._autosign:
            # Confirms the start of the deployment.
            _continue()

    def _get_kwargs(self, publish: bool = True) -> typing.Dict[str, Any]:
        """Returns the deployment kwargs."""
        return {"publish": self.verify and publish}

    def deploy(
        self, container: ContractContainer, *args, publish: bool = True
    ) -> ContractInstance:
        contract_name = container.contract_type.name
        resolved_params = OrderedDict()
        if args:
            abi_inputs = container.constructor.abi.inputs
            resolved_params = OrderedDict(
                (abi_input.name, arg) for abi_input, arg in zip(abi_inputs, args)
            )
        if not self._autosign:
            _confirm_resolution(resolved_params, contract_name)

        return self.get_account().deploy(container, *args, **self._get_kwargs(publish=publish))

    def deploy_proxy(
        self,
        container: ContractContainer,
        initializer_params: InitializerParameters,
        initializer: str = INITIALIZER,
    ) -> ContractInstance:
        """
        Deploys the implementation of a contract behind a new transparent proxy,
        initializing the proxy in the same transaction.
        """
        contract_name = container.contract_type.name
        initializer_params.validate(container, initializer=initializer)
        if not self._autosign:
            _confirm_resolution(initializer_params.parameters, f"{contract_name}.{initializer}")

        implementation = self.deploy(container)
        initializer_data = getattr(implementation, initializer).encode_input(
            *initializer_params.args
        )

        proxy_container = get_oz_dependency().TransparentUpgradeableProxy
        print(
            f"\nDeploying {proxy_container.contract_type.name} "
            f"contract to proxy {contract_name}."
        )
        proxy_contract = self.deploy(
            proxy_container,
            implementation.address,
            self.get_account().address,
            initializer_data,
            # only the implementation is published
            publish=False,
        )
        print(
            f"\nWrapping {contract_name} into {proxy_contract.contract_type.name} "
            f"at {proxy_contract.address}."
        )
        return container.at(proxy_contract.address)

    def upgrade(self, container: ContractContainer, proxy_address, data=b"") -> ContractInstance:
        implementation = self.deploy(container)
        # upgrade proxy to implementation
        return self.upgradeTo(implementation, proxy_address, data)

    def upgradeTo(
        self, implementation: ContractInstance, proxy_address, data=b""
    ) -> ContractInstance:
        admin_address = get_admin_address(proxy_address)
        proxy_admin = get_oz_dependency().ProxyAdmin.at(admin_address)

        if not data and _is_legacy_proxy_admin(proxy_admin):
            # OpenZeppelin 4.x upgradeAndCall always calls the implementation, even without data
            legacy_proxy_admin = Contract(admin_address, abi=LEGACY_PROXY_ADMIN_ABI)
            self.transact(legacy_proxy_admin.upgrade, proxy_address, implementation.address)
        else:
            self.transact(
                proxy_admin.upgradeAndCall, proxy_address, implementation.address, data
            )

        container = get_contract_container(implementation.contract_type.name)
        return container.at(proxy_address)

    def _print_deployment_info(self):
        account = self.get_account()
        ecosystem = networks.provider.network.ecosystem
        print(
            f"Account: {account.address}",
            f"Balance: {Web3.from_wei(account.balance, 'ether')} {ecosystem.fee_token_symbol}",
            f"Verify: {self.verify}",
            f"Ecosystem: {ecosystem.name}",
            f"Network: {networks.provider.network.name}",
            f"Chain ID: {networks.provider.network.chain_id}",
            f"Gas Price: {networks.provider.gas_price}",
            sep="\n",
        )
