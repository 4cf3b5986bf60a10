"""Multi-currency balance and timeline engine for a remittance ledger."""

__version__ = "0.1.0"
