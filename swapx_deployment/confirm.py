from collections import OrderedDict

from ape.utils import ZERO_ADDRESS

from swapx_deployment.networks import is_placeholder


def _confirm_deployment(contract_name: str) -> None:
    """Asks the user to confirm the deployment of a single contract."""
    answer = input(f"Deploy {contract_name} Y/N? ")
    if answer.lower().strip() == "n":
        print("Aborting deployment!")
        exit(-1)


def _continue() -> None:
    """Asks the user to continue."""
    answer = input("Continue Y/N? ")
    if answer.lower().strip() == "n":
        print("Aborting deployment!")
        exit(-1)


def _confirm_suspicious_address() -> None:
    answer = input("Zero or placeholder address detected for deployment parameter; Continue? Y/N? ")
    if answer.lower().strip() == "n":
        print("Aborting deployment!")
        exit(-1)


def _is_suspicious(value) -> bool:
    return isinstance(value, str) and (value == ZERO_ADDRESS or is_placeholder(value))


def _confirm_resolution(resolved_params: OrderedDict, contract_name: str) -> None:
    """Asks the user to confirm the resolved parameters for a single contract."""
    if len(resolved_params) == 0:
        print(f"\n(i) No constructor parameters for {contract_name}")
        _confirm_deployment(contract_name)
        return

    print(f"\nParameters for {contract_name}")
    contains_suspicious_address = False
    for name, resolved_value in resolved_params.items():
        print(f"\t{name}={resolved_value}")
        if not contains_suspicious_address:
            contains_suspicious_address = _is_suspicious(resolved_value)
    _confirm_deployment(contract_name)
    if contains_suspicious_address:
        _confirm_suspicious_address()
