"""Module for configuration specified by user"""

import argparse
import os
import sys
from typing import List

from starkware.starknet.definitions.general_config import StarknetChainId

from . import __version__
from .constants import DEFAULT_GAS_PRICE
from .fee_estimate import PriceUnit
from .system_contract import REPRESENTATION_KINDS, SystemContract
from .util import StarknetDevnetException

CHAIN_IDS = ", ".join([member.name for member in StarknetChainId])
DEFAULT_CHAIN_ID = StarknetChainId.TESTNET

FEE_UNITS = {"wei": PriceUnit.WEI, "fri": PriceUnit.FRI}
FEE_UNITS_STRINGIFIED = ", ".join(FEE_UNITS)
DEFAULT_FEE_UNIT = "wei"

SYSTEM_CONTRACT_FORMAT = "CLASS_HASH:ADDRESS:PATH[:{cairo0|cairo1}]"


def _chain_id(chain_id: str):
    """Parse chain id."""
    try:
        return StarknetChainId[chain_id]
    except KeyError:
        sys.exit(
            f"Error: The value of --chain-id must be in {{{CHAIN_IDS}}}, got: {chain_id}"
        )


def _fee_unit(fee_unit: str) -> PriceUnit:
    """Parse fee unit."""
    if fee_unit.lower() in FEE_UNITS:
        return FEE_UNITS[fee_unit.lower()]
    sys.exit(
        f"Error: Invalid --fee-unit option: {fee_unit}. Valid options: {FEE_UNITS_STRINGIFIED}"
    )


def _parse_system_contract(specifier: str) -> SystemContract:
    """Parse a system contract specifier and load its class artifact"""
    parts = specifier.split(":")
    representation = "cairo0"
    if parts[-1] in REPRESENTATION_KINDS:
        representation = parts.pop()

    if len(parts) < 3:
        sys.exit(
            f"Error: --system-contract must be of the form {SYSTEM_CONTRACT_FORMAT}, got: {specifier}"
        )

    class_hash, address = parts[0], parts[1]
    class_path = os.path.abspath(":".join(parts[2:]))
    if not os.path.isfile(class_path):
        sys.exit(f"Error: {class_path} is not a valid file")

    with open(class_path, mode="r", encoding="utf-8") as class_file:
        json_str = class_file.read()

    try:
        return SystemContract.from_representation(
            class_hash, address, json_str, REPRESENTATION_KINDS[representation]
        )
    except StarknetDevnetException as error:
        sys.exit(f"Error: Invalid system contract {specifier}: {error.message}")


class NonNegativeAction(argparse.Action):
    """
    Action for parsing the non negative int argument.
    """

    def __call__(self, parser, namespace, values, option_string=None):
        error_msg = f"{option_string} must be a non-negative integer; got: {values}."
        try:
            value = int(values)
        except ValueError:
            parser.error(error_msg)

        if value < 0:
            parser.error(error_msg)

        setattr(namespace, self.dest, value)


def build_config_parser(add_help=True) -> argparse.ArgumentParser:
    """
    Parser of the options shared by all commands.
    """
    parser = argparse.ArgumentParser(
        description="Contract identity tools of a local Starknet Devnet",
        add_help=add_help,
    )
    parser.add_argument(
        "-v",
        "--version",
        help="Print the version",
        action="version",
        version=__version__,
    )
    parser.add_argument(
        "--gas-price",
        "-g",
        action=NonNegativeAction,
        default=DEFAULT_GAS_PRICE,
        help=f"Specify the gas price per gas unit; defaults to {DEFAULT_GAS_PRICE:g}",
    )
    parser.add_argument(
        "--fee-unit",
        type=_fee_unit,
        default=FEE_UNITS[DEFAULT_FEE_UNIT],
        help=f"Specify the unit fees are estimated in: {FEE_UNITS_STRINGIFIED}; "
        f"defaults to {DEFAULT_FEE_UNIT}",
    )
    parser.add_argument(
        "--chain-id",
        type=_chain_id,
        default=DEFAULT_CHAIN_ID,
        help=f"Specify the chain id as one of: {{{CHAIN_IDS}}}; "
        f"defaults to {DEFAULT_CHAIN_ID.name} ({hex(DEFAULT_CHAIN_ID.value)})",
    )
    parser.add_argument(
        "--system-contract",
        dest="system_contracts",
        type=_parse_system_contract,
        action="append",
        default=[],
        help=f"Specify a contract to deploy at genesis as {SYSTEM_CONTRACT_FORMAT}; "
        "can be repeated",
    )
    parser.add_argument(
        "--verify-system-contracts",
        action="store_true",
        help="Recompute the class hash of each system contract before deploying it",
    )
    return parser


def parse_args(raw_args: List[str]):
    """
    Parses CLI arguments.
    """
    return build_config_parser().parse_args(raw_args)


# pylint: disable=too-few-public-methods
class DevnetConfig:
    """Class holding configuration specified by user"""

    def __init__(self, args: argparse.Namespace = None):
        self.args = args or parse_args([])
        self.gas_price = self.args.gas_price
        self.fee_unit = self.args.fee_unit
        self.chain_id = self.args.chain_id
        self.system_contracts = self.args.system_contracts
        self.verify_system_contracts = self.args.verify_system_contracts
