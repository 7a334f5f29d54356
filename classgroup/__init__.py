"""Integer helpers, number theory, two's-complement encoding, congruences and protocol messages."""

__version__ = "0.1.0"
__all__ = ["bignum", "congruence", "encoding", "messages", "numtheory"]