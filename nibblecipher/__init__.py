"""A small educational byte cipher with ECB and CTR modes, Base64 output and GF(2^4) S-box tools."""

__version__ = "0.1.0"