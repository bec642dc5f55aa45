"""
Command line entry point: class hashes, storage addresses, message fees and genesis contracts.
"""

import argparse
import json
import os
import sys
from typing import List

from .contract_class import ContractClass, ContractClassKind
from .devnet_config import DevnetConfig, build_config_parser
from .fee_estimate import FeeEstimate
from .state import DevnetState
from .storage import get_storage_var_address
from .system_contract import deploy_system_contracts
from .util import StarknetDevnetException, warn

REPRESENTATIONS = {
    "raw": ContractClassKind.RAW_JSON,
    "structured": ContractClassKind.STRUCTURED,
    "sierra": ContractClassKind.SIERRA,
}


def _class_hash(args: argparse.Namespace, _config: DevnetConfig):
    if not os.path.isfile(args.path):
        sys.exit(f"Error: {os.path.abspath(args.path)} is not a valid file")

    with open(args.path, encoding="utf-8") as class_file:
        contract_class = ContractClass.from_representation(
            REPRESENTATIONS[args.representation], class_file.read()
        )
    print(contract_class.generate_hash())


def _storage_address(args: argparse.Namespace, _config: DevnetConfig):
    print(get_storage_var_address(args.name, args.args))


def _message_fee(args: argparse.Namespace, config: DevnetConfig):
    fee_estimate = FeeEstimate.new(args.gas_consumed, config.gas_price, config.fee_unit)
    print(json.dumps(fee_estimate.dump(), indent=4))


def _genesis(_args: argparse.Namespace, config: DevnetConfig):
    if config.verify_system_contracts:
        for system_contract in config.system_contracts:
            system_contract.verify_class_hash()

    state = DevnetState()
    deploy_system_contracts(state, config.system_contracts)
    for system_contract in config.system_contracts:
        system_contract.print()


def build_parser() -> argparse.ArgumentParser:
    """Parser with one subcommand per tool"""
    config_parser = build_config_parser(add_help=False)
    parser = argparse.ArgumentParser(
        prog="starknet-devnet-core", parents=[config_parser]
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    class_hash_parser = subparsers.add_parser(
        "class-hash", help="Compute the class hash of a contract class artifact"
    )
    class_hash_parser.add_argument("path", help="Path to the contract class JSON")
    class_hash_parser.add_argument(
        "--representation",
        choices=list(REPRESENTATIONS),
        default="raw",
        help="How the class is parsed before hashing; defaults to raw (Cairo 0 JSON)",
    )
    class_hash_parser.set_defaults(handler=_class_hash)

    storage_parser = subparsers.add_parser(
        "storage-address", help="Compute the address of a storage variable"
    )
    storage_parser.add_argument("name", help="Name of the storage variable")
    storage_parser.add_argument(
        "args", nargs="*", help="Hex felts the variable is indexed by"
    )
    storage_parser.set_defaults(handler=_storage_address)

    fee_parser = subparsers.add_parser(
        "message-fee", help="Price the gas consumed by an L1 handler"
    )
    fee_parser.add_argument("gas_consumed", type=int, help="Consumed gas units")
    fee_parser.set_defaults(handler=_message_fee)

    genesis_parser = subparsers.add_parser(
        "genesis", help="Deploy the configured system contracts into an empty state"
    )
    genesis_parser.set_defaults(handler=_genesis)

    return parser


def main(raw_args: List[str] = None):
    """Main function"""
    args = build_parser().parse_args(raw_args)
    config = DevnetConfig(args)
    try:
        args.handler(args, config)
    except StarknetDevnetException as error:
        warn(f"Error: {error.message}")
        sys.exit(1)


if __name__ == "__main__":
    main()
