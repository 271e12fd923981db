"""
Service layer around the ledger core.

This package contains the table storage backends, the working-set
ledger service and attachment uploads.
"""
