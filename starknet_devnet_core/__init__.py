"""
Contract identity and addressing core of a local Starknet devnet.
This file contains monkeypatches used across the project. Advice for monkeypatch atomicity:
- Define a patching function
    - The function should import the places to be patched
    - The function can define the implementation to use for overwriting
- Call the patching function
"""

# pylint: disable=import-outside-toplevel

__version__ = "0.1.0"


def _patch_pedersen_hash():
    """
    Improves performance by substituting the default Python implementation of Pedersen hash
    with Software Mansion's Python wrapper of C++ implementation.
    """

    import starkware.crypto.signature.fast_pedersen_hash
    from crypto_cpp_py.cpp_bindings import cpp_hash as patched_pedersen_hash

    starkware.crypto.signature.fast_pedersen_hash.pedersen_hash = patched_pedersen_hash


_patch_pedersen_hash()


def _patch_poseidon_hash():
    """
    Improves performance of Cairo 1 class hashing by substituting the default Python
    implementation of Poseidon hash with Software Mansion's Python wrapper of C implementation.
    """

    import starkware.cairo.common.poseidon_hash
    from poseidon_py import poseidon_hash

    starkware.cairo.common.poseidon_hash.poseidon_hash = getattr(
        poseidon_hash, "poseidon_hash"
    )
    starkware.cairo.common.poseidon_hash.poseidon_hash_func = getattr(
        poseidon_hash, "poseidon_hash_func"
    )
    starkware.cairo.common.poseidon_hash.poseidon_hash_many = getattr(
        poseidon_hash, "poseidon_hash_many"
    )
    starkware.cairo.common.poseidon_hash.poseidon_perm = getattr(
        poseidon_hash, "poseidon_perm"
    )


_patch_poseidon_hash()
