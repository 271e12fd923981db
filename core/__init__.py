"""
Core modules for the SOT ledger.

This package contains:
- codec: Table row <-> LineItem conversion
- config: Application configuration and settings
- exceptions: Custom exception classes
- exporters: CSV and spreadsheet export
- financials: Realized profit and ROI calculation
- logger: Logging configuration
- metrics: Search and aggregate figures
- normalize: Cell value normalization
- parsing: CSV table parsing
- schema: Pydantic models and the column schema
"""
