"""
Tests of the command line tools
"""

import json

import pytest

from starknet_devnet_core.cli import main

from .shared import BALANCE_KEY, DUMMY_ADDRESS, STORAGE_CLASS_PATH
from .util import artifact_path, assert_equal


def test_storage_address(capsys):
    """Prints the address of a storage variable"""
    main(["storage-address", "balance"])
    assert_equal(capsys.readouterr().out.strip(), hex(int(BALANCE_KEY)))


def test_class_hash(capsys, storage_class):
    """Prints the class hash of a raw class artifact"""
    main(["class-hash", artifact_path(STORAGE_CLASS_PATH)])
    assert_equal(capsys.readouterr().out.strip(), str(storage_class.generate_hash()))


def test_message_fee(capsys):
    """Prints the fee estimate as JSON"""
    main(["--gas-price", "5", "--fee-unit", "fri", "message-fee", "10"])
    assert_equal(
        json.loads(capsys.readouterr().out),
        {
            "gas_consumed": "0xa",
            "gas_price": "0x5",
            "overall_fee": "0x32",
            "unit": "FRI",
        },
    )


def test_malformed_class(capsys, tmp_path):
    """Devnet errors are reported and exit with 1"""
    class_path = tmp_path / "class.json"
    class_path.write_text('{"abi": []}', encoding="utf-8")

    with pytest.raises(SystemExit) as error:
        main(["class-hash", str(class_path)])

    assert_equal(error.value.code, 1)
    assert "entry_points_by_type" in capsys.readouterr().err


def test_genesis(capsys, storage_class):
    """Verified system contracts are deployed and printed"""
    class_hash = str(storage_class.generate_hash())
    main(
        [
            "--verify-system-contracts",
            "--system-contract",
            f"{class_hash}:{DUMMY_ADDRESS}:{artifact_path(STORAGE_CLASS_PATH)}",
            "genesis",
        ]
    )
    output = capsys.readouterr().out
    assert DUMMY_ADDRESS in output
    assert class_hash in output


def test_genesis_with_wrong_class_hash(capsys):
    """A failed verification stops before deploying"""
    with pytest.raises(SystemExit) as error:
        main(
            [
                "--verify-system-contracts",
                "--system-contract",
                f"0x1:{DUMMY_ADDRESS}:{artifact_path(STORAGE_CLASS_PATH)}",
                "genesis",
            ]
        )
    assert_equal(error.value.code, 1)
    assert "does not match" in capsys.readouterr().err


def test_subcommand_required():
    """A tool has to be chosen"""
    with pytest.raises(SystemExit):
        main([])


def test_class_hash_of_missing_file(tmp_path):
    """A missing artifact stops with a message"""
    missing_path = tmp_path / "missing.json"
    with pytest.raises(SystemExit) as error:
        main(["class-hash", str(missing_path)])
    assert "is not a valid file" in str(error.value.code)
