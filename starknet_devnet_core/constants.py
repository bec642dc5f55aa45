"""Constants used across the project."""

from starkware.cairo.lang.cairo_constants import DEFAULT_PRIME

FIELD_PRIME = DEFAULT_PRIME

# Patricia keys (contract addresses, storage keys) are 251 bits wide
PATRICIA_KEY_UPPER_BOUND = 2**251

# Storage variables may span up to this many consecutive slots
MAX_STORAGE_ITEM_SIZE = 256
ADDR_BOUND = PATRICIA_KEY_UPPER_BOUND - MAX_STORAGE_ITEM_SIZE

# starknet_keccak keeps the low 250 bits of the digest
MASK_250 = 2**250 - 1

ETH_ADDRESS_BYTES = 20

U64_MAX = 2**64 - 1

DEFAULT_GAS_PRICE = 10**11

# Fee considered paid on L1 when estimating the fee of an L1 -> L2 message
L1_HANDLER_PAID_FEE_ON_L1 = 1

# Taken from
# https://github.com/starknet-community-libs/starknet-addresses/blob/df19b17d2c83f11c30e65e2373e8a0c65446f17c/bridged_tokens/goerli.json
ETH_ERC20_CONTRACT_ADDRESS = (
    0x49D36570D4E46F48E99674BD3FCC84644DDD6B96F7C741B1562B82F9E004DC7
)
STRK_ERC20_CONTRACT_ADDRESS = (
    0x4718F5A0FC34CC1AF16A1CDEE98FFB20C31F5CD61D6AB07201858F4287C938D
)
