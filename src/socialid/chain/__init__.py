"""Chain access: JSON-RPC provider and multicall encoding."""

from socialid.chain.calls import (
    AGGREGATE_HEADER_SIZE,
    RESULT_PAIR_SIZE,
    VERIFIER_CALL_SIZE,
    AggregateResultReader,
    FunctionCall,
    MulticallBuilder,
    VerifierCallOffset,
    build_unbounded_user_data_call,
    build_verifier_data_aggregate_call,
    encode_verifier_data_calls,
    find_social_id,
)
from socialid.chain.provider import StarknetRpcProvider

__all__ = [
    # Calls
    "AGGREGATE_HEADER_SIZE",
    "RESULT_PAIR_SIZE",
    "VERIFIER_CALL_SIZE",
    "AggregateResultReader",
    "FunctionCall",
    "MulticallBuilder",
    "VerifierCallOffset",
    "build_unbounded_user_data_call",
    "build_verifier_data_aggregate_call",
    "encode_verifier_data_calls",
    "find_social_id",
    # Provider
    "StarknetRpcProvider",
]
