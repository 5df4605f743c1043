"""
Pneuma - Node interaction layer for ocs01.

Provides the HTTP client, account state lookup, the unsigned view path and
the retrying transaction submitter.

Uses httpx for transport and cryptography (via sigil) for Ed25519 signing.
"""
