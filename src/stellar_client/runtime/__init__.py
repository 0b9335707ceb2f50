"""
Runtime support for the Stellar client: the error model and StrKey encoding.
"""

from .errors import *
from .strkey import (
    encode_account_id,
    decode_account_id,
    encode_secret_seed,
    decode_secret_seed,
    is_valid_account_id,
)
