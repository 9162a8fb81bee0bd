"""
Reads the EIP-1967 storage slots of a transparent proxy.

The implementation and admin of an EIP-1967 proxy live at fixed storage slots,
so they can be read straight from the chain without knowing the proxy's ABI.
"""

from ape import chain
from ape.utils import EMPTY_BYTES32
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address
from hexbytes import HexBytes

from swapx_deployment.constants import EIP1967_ADMIN_SLOT, EIP1967_IMPLEMENTATION_SLOT


class NotAProxy(ValueError):
    """Raised when an EIP-1967 slot of a contract is empty."""


def address_from_slot(slot_value: bytes) -> ChecksumAddress:
    """Decodes the address stored in the lower 20 bytes of a storage word."""
    slot_value = HexBytes(slot_value).rjust(32, b"\x00")
    return to_checksum_address(slot_value[-20:])


def _read_slot(proxy_address: str, slot: int, slot_name: str) -> ChecksumAddress:
    slot_value = chain.provider.get_storage_at(address=proxy_address, slot=slot)
    if HexBytes(slot_value).rjust(32, b"\x00") == EMPTY_BYTES32:
        raise NotAProxy(
            f"{slot_name} slot for contract at {proxy_address} is empty. "
            "Are you sure this is an EIP1967-compatible proxy?"
        )
    return address_from_slot(slot_value)


def get_implementation_address(proxy_address: str) -> ChecksumAddress:
    return _read_slot(proxy_address, EIP1967_IMPLEMENTATION_SLOT, "Implementation")


def get_admin_address(proxy_address: str) -> ChecksumAddress:
    return _read_slot(proxy_address, EIP1967_ADMIN_SLOT, "Admin")
