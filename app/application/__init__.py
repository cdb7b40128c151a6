"""Application layer: translation services.

Depends only on domain types and protocol definitions (DIP).
Infrastructure implements the protocols (backend client, cache tiers).
"""
