"""Multicall payload builder and aggregate result reader.

The aggregator takes a flat calldata array::

    [call_count, *call_1, ..., *call_n]

where every get_verifier_data call occupies VERIFIER_CALL_SIZE slots laid
out as VerifierCallOffset. Its response is a flat array::

    [block_number, results_len, status_1, value_1, ..., status_n, value_n]

Misplacing a single slot silently shifts every following field, so all
reads and writes go through the named offsets below.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from socialid.core.felt import encode_short_string, get_selector_from_name

AGGREGATE_SELECTOR = get_selector_from_name("aggregate")
GET_VERIFIER_DATA_SELECTOR = get_selector_from_name("get_verifier_data")
GET_UNBOUNDED_USER_DATA_SELECTOR = get_selector_from_name("get_unbounded_user_data")


@dataclass(frozen=True)
class FunctionCall:
    """A read-only contract call."""

    contract_address: int
    entry_point_selector: int
    calldata: list[int] = field(default_factory=list)


class VerifierCallOffset(IntEnum):
    """Slot of each element inside one encoded get_verifier_data call."""

    TO = 0
    SELECTOR = 1
    CALLDATA_LEN = 2
    IDENTITY_ID = 3
    FIELD = 4
    VERIFIER = 5
    PADDING = 6


VERIFIER_CALL_SIZE = len(VerifierCallOffset)
# id, field, verifier, padding
VERIFIER_CALLDATA_LEN = VERIFIER_CALL_SIZE - VerifierCallOffset.IDENTITY_ID


class AggregateHeaderOffset(IntEnum):
    """Leading slots of the aggregate response, before any result pair."""

    BLOCK_NUMBER = 0
    RESULTS_LEN = 1


class ResultPairOffset(IntEnum):
    """Slot of each element inside one (status, value) result pair."""

    STATUS = 0
    VALUE = 1


AGGREGATE_HEADER_SIZE = len(AggregateHeaderOffset)
RESULT_PAIR_SIZE = len(ResultPairOffset)


class MulticallBuilder:
    """Accumulates fixed-size call groups and flattens them for `aggregate`."""

    def __init__(self) -> None:
        self._groups: list[list[int]] = []

    @property
    def call_count(self) -> int:
        return len(self._groups)

    def add_verifier_data_call(
        self,
        identity_contract: int,
        identity_id: int,
        encoded_field: int,
        verifier: int,
    ) -> MulticallBuilder:
        """Append one get_verifier_data(id, field, verifier, 0) call."""
        group = [0] * VERIFIER_CALL_SIZE
        group[VerifierCallOffset.TO] = identity_contract
        group[VerifierCallOffset.SELECTOR] = GET_VERIFIER_DATA_SELECTOR
        group[VerifierCallOffset.CALLDATA_LEN] = VERIFIER_CALLDATA_LEN
        group[VerifierCallOffset.IDENTITY_ID] = identity_id
        group[VerifierCallOffset.FIELD] = encoded_field
        group[VerifierCallOffset.VERIFIER] = verifier
        group[VerifierCallOffset.PADDING] = 0
        self._groups.append(group)
        return self

    def build(self) -> list[int]:
        """Flatten to [call_count, *group_1, ..., *group_n]."""
        calldata = [self.call_count]
        for group in self._groups:
            calldata.extend(group)
        return calldata


def encode_verifier_data_calls(
    identity_contract: int,
    identity_id: int,
    field_name: str,
    verifiers: Sequence[int],
) -> list[int]:
    """
    Encode one get_verifier_data call per verifier, in the given order.

    Raises:
        ShortStringEncodingError: If field_name cannot be packed.
    """
    encoded_field = encode_short_string(field_name)
    builder = MulticallBuilder()
    for verifier in verifiers:
        builder.add_verifier_data_call(identity_contract, identity_id, encoded_field, verifier)
    return builder.build()


def build_verifier_data_aggregate_call(
    multicall_contract: int,
    identity_contract: int,
    identity_id: int,
    field_name: str,
    verifiers: Sequence[int],
) -> FunctionCall:
    """
    Batch get_verifier_data for every verifier into one `aggregate` call.

    Raises:
        ShortStringEncodingError: If field_name cannot be packed.
    """
    return FunctionCall(
        contract_address=multicall_contract,
        entry_point_selector=AGGREGATE_SELECTOR,
        calldata=encode_verifier_data_calls(
            identity_contract, identity_id, field_name, verifiers
        ),
    )


class AggregateResultReader:
    """Reads (status, value) pairs from a flat aggregate response."""

    def __init__(self, buffer: Sequence[int]) -> None:
        self._buffer = buffer

    def pairs(self) -> Iterator[tuple[int, int]]:
        """Yield complete (status, value) pairs after the header."""
        body = self._buffer[AGGREGATE_HEADER_SIZE:]
        # A trailing unpaired slot is ignored.
        for start in range(0, len(body) - RESULT_PAIR_SIZE + 1, RESULT_PAIR_SIZE):
            yield (
                body[start + ResultPairOffset.STATUS],
                body[start + ResultPairOffset.VALUE],
            )

    def first_non_zero(self) -> int:
        """Value of the earliest pair holding a non-zero value, else 0."""
        for _, value in self.pairs():
            if value != 0:
                return value
        return 0


def find_social_id(result: Sequence[int]) -> int:
    """
    Return the social id set by the highest-priority verifier.

    Verifiers earlier in the encoded list win when several hold a value.
    Returns 0 when no verifier holds a value or the buffer is too short.
    """
    return AggregateResultReader(result).first_non_zero()


def build_unbounded_user_data_call(
    identity_contract: int,
    identity_id: int,
    field_name: str,
) -> FunctionCall:
    """
    Direct get_unbounded_user_data(id, field, 0) call on the identity contract.

    Raises:
        ShortStringEncodingError: If field_name cannot be packed.
    """
    return FunctionCall(
        contract_address=identity_contract,
        entry_point_selector=GET_UNBOUNDED_USER_DATA_SELECTOR,
        calldata=[identity_id, encode_short_string(field_name), 0],
    )
