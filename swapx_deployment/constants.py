from ape import project

#
# Networks
#

BSC = "bsc"
BSC_TESTNET = "bsctest"
LOCAL = "local"

# ape "ecosystem:network" -> network configuration key
NETWORK_ALIASES = {
    "bsc:mainnet": BSC,
    "bsc:mainnet-fork": BSC,
    "bsc:testnet": BSC_TESTNET,
    "bsc:testnet-fork": BSC_TESTNET,
    "ethereum:local": LOCAL,
}

LOCAL_NETWORKS = ["local"]

#
# Contracts
#

SWAPX_CONTRACT_NAME = "SwapX"
SWAPX_V2_CONTRACT_NAME = "SwapXV2"
INITIALIZER = "initialize"

# SwapX proxy targeted by upgrades
SWAPX_PROXY_ADDRESS = "0xb804EbB99cDE3CA1B13e9173163D9ac409d13945"

OZ_DEPENDENCY_NAME = "openzeppelin"
OZ_DEPENDENCY_VERSION = "5.0.0"


def get_oz_dependency():
    return project.dependencies[OZ_DEPENDENCY_NAME][OZ_DEPENDENCY_VERSION]


# EIP1967 slots - https://eips.ethereum.org/EIPS/eip-1967
EIP1967_IMPLEMENTATION_SLOT = 0x360894A13BA1A3210667C828492DB98DCA3E2076CC3735A920A3CA505D382BBC
EIP1967_ADMIN_SLOT = 0xB53127684A568B3173AE13B9F8A6016E243E63B6E8EE1178D6A717850B5D6103

#
# Fees
#

BASIS_POINTS = 10_000
PERCENT_BASIS_POINTS = 100

#
# Placeholders
#

PLACEHOLDER_ADDRESS = "0x..."

# ProxyAdmin of OpenZeppelin 4.x, as deployed by the hardhat upgrades plugin
LEGACY_PROXY_ADMIN_ABI = [
    {
        "type": "function",
        "name": "upgrade",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "proxy", "type": "address"},
            {"name": "implementation", "type": "address"},
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "owner",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "address"}],
    },
]
