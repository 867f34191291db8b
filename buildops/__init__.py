"""BuildOps ERP: procurement, inventory and ledger service."""

__version__ = "1.0.0"
