"""HTTP layer for the SOT ledger."""
