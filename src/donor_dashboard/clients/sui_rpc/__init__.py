"""Sui fullnode JSON-RPC client."""

from donor_dashboard.clients.sui_rpc.sui_rpc_client import SuiRpcClient, receipt_from_object

__all__ = ["SuiRpcClient", "receipt_from_object"]
