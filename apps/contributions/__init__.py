"""Contributions app package.

The contribution ledger: one record per pledge/payment made toward a kitty,
keyed by the kitty's address. Records are written once as ``pending`` and
never modified by this app; confirming or failing them belongs to a
reconciliation step that does not exist yet.
"""
