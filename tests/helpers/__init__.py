from .mocks import StaticAccountState, SequenceOnlyAccountState, FailingAccountState, StubOperation
from .factories import mk_keypair, mk_account_id, mk_raw_key
from .parity import assert_hex_equal

__all__ = [
    "StaticAccountState",
    "SequenceOnlyAccountState",
    "FailingAccountState",
    "StubOperation",
    "mk_keypair",
    "mk_account_id",
    "mk_raw_key",
    "assert_hex_equal",
]
