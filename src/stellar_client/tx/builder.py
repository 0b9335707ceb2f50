"""
Transaction builder for the Stellar network.

Accumulates the mutable parts of a transaction through a chainable API and
serializes them to the canonical XDR the network re-derives and verifies.

Format of a transaction:

    source account      AccountId       36 bytes
    fee                 uint32           4 bytes
    sequence number     uint64           8 bytes
    time bounds         TimeBounds*      4 bytes if absent, 20 if set
    memo                Memo             4 to 36 bytes
    operations          Operation<100>   uint32 count + each operation
    ext                 TransactionExt   4 bytes, always v0

Notes:
    - The sequence number is never stored; every encode asks the account
      state provider again and uses its value + 1. Two encodes can therefore
      differ if another transaction from the same account lands in between.
    - The builder has no finalized state. It can be changed and re-encoded
      at any time.
"""

from __future__ import annotations
from typing import Any, List, Optional, Tuple, Union
import logging

from ..codec import XdrEncodable, XdrWriter, transaction_hash
from ..runtime.errors import MissingCollaboratorError
from ..signers import SecretKeyLike
from ..xdr.account_id import AccountId
from ..xdr.amount import AmountLike
from ..xdr.asset import Asset
from ..xdr.memo import Memo, MemoPayload
from ..xdr.operations import ChangeTrustOp, CreateAccountOp, PaymentOp
from ..xdr.time_bounds import TimeBounds, TimePoint
from ..xdr.transaction_ext import TransactionExt
from .collaborators import AccountStateProvider, TransactionSubmitter
from .decode import MAX_OPERATIONS
from .envelope import TransactionEnvelope
from .fees import DEFAULT_FEE_STRATEGY, FeeStrategy

logger = logging.getLogger(__name__)


class TransactionBuilder(XdrEncodable):
    """
    Helper class to build a transaction on the Stellar network.

    Example:
        ```python
        builder = (
            TransactionBuilder("GA...")
            .set_api_client(horizon)
            .add_create_account_op("GB...", 50)
            .set_text_memo("welcome")
        )
        envelope = builder.sign("SA...")
        ```
    """

    def __init__(self, source_account_id: Union[str, AccountId],
                 api_client: Optional[AccountStateProvider] = None,
                 fee_strategy: Optional[FeeStrategy] = None):
        """
        Create a builder with no time bounds, no memo and no operations.

        Args:
            source_account_id: ``G...`` address paying the fee and providing
                the sequence number
            api_client: Account state provider (and, for hash / sign /
                submit, submitter)
            fee_strategy: Fee policy, defaults to 100 stroops per operation

        Raises:
            InvalidAccountIdError: If the address is malformed
        """
        self._account_id = AccountId(source_account_id)
        self._time_bounds = TimeBounds()
        self._memo = Memo.none()
        self._operations: List[XdrEncodable] = []
        self._ext = TransactionExt()
        self._api_client = api_client
        self._fee_strategy = fee_strategy or DEFAULT_FEE_STRATEGY

    # =========================================================================
    # Collaborators
    # =========================================================================

    def get_api_client(self) -> Optional[AccountStateProvider]:
        return self._api_client

    def set_api_client(self, api_client: AccountStateProvider) -> TransactionBuilder:
        """
        Attach the account state provider / submitter.

        Returns:
            Self for chaining
        """
        self._api_client = api_client
        return self

    def set_fee_strategy(self, fee_strategy: FeeStrategy) -> TransactionBuilder:
        self._fee_strategy = fee_strategy
        return self

    def _require_api_client(self) -> Any:
        if self._api_client is None:
            raise MissingCollaboratorError()
        return self._api_client

    def _require_submitter(self) -> TransactionSubmitter:
        api_client = self._require_api_client()
        if not isinstance(api_client, TransactionSubmitter) and not (
            hasattr(api_client, "network_passphrase") and hasattr(api_client, "submit_transaction")
        ):
            raise MissingCollaboratorError(
                "A transaction submitter is required to hash, sign or submit, "
                "call set_api_client with one first"
            )
        return api_client

    # =========================================================================
    # Inspection
    # =========================================================================

    @property
    def source_account(self) -> AccountId:
        return self._account_id

    @property
    def time_bounds(self) -> TimeBounds:
        """Copy of the current time bounds."""
        return self._time_bounds.copy()

    @property
    def memo(self) -> Memo:
        return self._memo

    @property
    def operations(self) -> Tuple[XdrEncodable, ...]:
        """Operations in execution order (read-only view)."""
        return tuple(self._operations)

    # =========================================================================
    # Operations
    # =========================================================================

    def add_operation(self, operation: XdrEncodable) -> TransactionBuilder:
        """
        Append an operation. Its content is not inspected here.

        Args:
            operation: Anything exposing ``to_xdr()``

        Returns:
            Self for chaining
        """
        self._operations.append(operation)
        return self

    def add_create_account_op(self, new_account_id: Union[str, AccountId], amount: AmountLike,
                              source_account_id: Optional[Union[str, AccountId]] = None) -> TransactionBuilder:
        """
        Args:
            new_account_id: Address of the account to create
            amount: Starting balance in lumens
            source_account_id: Funding account, defaults to the transaction source
        """
        return self.add_operation(CreateAccountOp(new_account_id, amount, source_account_id))

    def add_payment_op(self, destination_account_id: Union[str, AccountId], amount: AmountLike,
                       source_account_id: Optional[Union[str, AccountId]] = None) -> TransactionBuilder:
        """Append a native (lumens) payment."""
        return self.add_operation(PaymentOp.new_native_payment(destination_account_id, amount, source_account_id))

    def add_custom_asset_payment_op(self, asset: Asset, amount: AmountLike,
                                    destination_account_id: Union[str, AccountId],
                                    source_account_id: Optional[Union[str, AccountId]] = None) -> TransactionBuilder:
        """Append a payment in a credit asset."""
        return self.add_operation(PaymentOp(destination_account_id, amount, asset, source_account_id))

    def add_change_trust_op(self, asset: Asset, amount: Optional[AmountLike] = None,
                            source_account_id: Optional[Union[str, AccountId]] = None) -> TransactionBuilder:
        """
        Args:
            asset: Asset to trust
            amount: Trust line limit; None for the maximum, 0 to remove it
            source_account_id: Trusting account, defaults to the transaction source
        """
        return self.add_operation(ChangeTrustOp(asset, amount, source_account_id))

    # =========================================================================
    # Memo
    # =========================================================================

    def set_memo(self, memo_or_type: Union[Memo, int], payload: MemoPayload = None) -> TransactionBuilder:
        """
        Replace the current memo.

        Args:
            memo_or_type: A Memo, or a MemoType discriminant
            payload: Variant payload when a discriminant is given

        Raises:
            InvalidMemoError: If the payload does not fit the variant; the
                previous memo is kept
        """
        memo = memo_or_type if isinstance(memo_or_type, Memo) else Memo(memo_or_type, payload)
        self._memo = memo
        return self

    def set_text_memo(self, text: Union[str, bytes]) -> TransactionBuilder:
        return self.set_memo(Memo.text(text))

    def set_id_memo(self, memo_id: int) -> TransactionBuilder:
        return self.set_memo(Memo.id(memo_id))

    def set_hash_memo(self, digest: bytes) -> TransactionBuilder:
        """
        Note: this should be called with the raw 32-byte sha256 digest, e.g.
        ``hashlib.sha256(b"invoice 42").digest()``.
        """
        return self.set_memo(Memo.hash(digest))

    def set_return_memo(self, digest: bytes) -> TransactionBuilder:
        """Same as set_hash_memo, for refunds of a previous transaction."""
        return self.set_memo(Memo.return_hash(digest))

    # =========================================================================
    # Time bounds
    # =========================================================================

    def set_time_bounds(self, min_time: Optional[TimePoint] = None,
                        max_time: Optional[TimePoint] = None) -> TransactionBuilder:
        """
        Set either bound, or both. Bounds left as None keep their value.

        min_time > max_time is not rejected here.

        Raises:
            InvalidTimeBoundsError: If a bound is not a datetime or
                non-negative epoch int; no bound is changed
        """
        updated = self._time_bounds.copy()
        if min_time is not None:
            updated.set_min_time(min_time)
        if max_time is not None:
            updated.set_max_time(max_time)
        self._time_bounds = updated
        return self

    def set_lower_timebound(self, lower_timebound: TimePoint) -> TransactionBuilder:
        return self.set_time_bounds(min_time=lower_timebound)

    def set_upper_timebound(self, upper_timebound: TimePoint) -> TransactionBuilder:
        return self.set_time_bounds(max_time=upper_timebound)

    # =========================================================================
    # Fee and sequence number
    # =========================================================================

    def compute_fee(self) -> int:
        """Total fee in stroops for the current operation list."""
        return self._fee_strategy.compute(len(self._operations))

    get_fee = compute_fee

    def resolve_sequence_number(self) -> int:
        """
        Fetch the source account's current sequence number and return the next one.

        Raises:
            MissingCollaboratorError: If no api client is attached
            CollaboratorFailure: Propagated unchanged from the api client
        """
        api_client = self._require_api_client()
        sequence = api_client.get_account_sequence(self._account_id.account_id)
        next_sequence = int(sequence) + 1
        logger.debug(f"Resolved sequence number {next_sequence} for {self._account_id}")
        return next_sequence

    # =========================================================================
    # Encoding
    # =========================================================================

    def encode(self) -> bytes:
        """
        Serialize the transaction to canonical XDR.

        Produced fresh on every call with a newly resolved sequence number.

        Raises:
            MissingCollaboratorError: If no api client is attached
            XdrEncodingError: If a value does not fit its wire type
        """
        sequence_number = self.resolve_sequence_number()

        writer = XdrWriter()
        writer.encodable(self._account_id)
        writer.uint32(self.compute_fee())
        writer.uint64(sequence_number)
        writer.encodable(self._time_bounds)
        writer.encodable(self._memo)
        writer.var_array(self._operations, MAX_OPERATIONS)
        writer.encodable(self._ext)

        logger.debug(
            f"Encoded transaction for {self._account_id}: "
            f"{len(self._operations)} operations, {len(writer)} bytes"
        )
        return writer.to_bytes()

    def to_xdr(self) -> bytes:
        return self.encode()

    # =========================================================================
    # Hashing, signing and submission
    # =========================================================================

    def _network_passphrase(self) -> str:
        return self._require_submitter().network_passphrase

    def get_transaction_envelope(self) -> TransactionEnvelope:
        """Unsigned envelope around freshly encoded bytes."""
        network_passphrase = self._network_passphrase()
        return TransactionEnvelope(self.encode(), network_passphrase)

    def hash(self) -> bytes:
        """32-byte hash of a freshly encoded transaction."""
        network_passphrase = self._network_passphrase()
        return transaction_hash(self.encode(), network_passphrase)

    def hash_hex(self) -> str:
        return self.hash().hex()

    get_hash_as_string = hash_hex

    def sign(self, secret_key: SecretKeyLike) -> TransactionEnvelope:
        """
        Encode, then sign.

        Args:
            secret_key: ``S...`` secret, Keypair or Signer

        Returns:
            Signed envelope; add more signatures with ``envelope.sign``
        """
        return self.get_transaction_envelope().sign(secret_key)

    def submit(self, secret_key: SecretKeyLike) -> Any:
        """
        Encode, sign and hand the envelope to the api client.

        Returns:
            Whatever the api client's submit_transaction returns
        """
        submitter = self._require_submitter()
        return submitter.submit_transaction(self.sign(secret_key))

    def __repr__(self) -> str:
        return (
            f"TransactionBuilder(source='{self._account_id}', "
            f"operations={len(self._operations)}, memo={self._memo.memo_type.name})"
        )


__all__ = [
    "TransactionBuilder",
]
