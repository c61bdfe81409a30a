"""
Pairing Parameter Codec
^^^^^^^^^^^^^^^^^^^^^^^
Decoding and encoding of the untrusted inputs of a pairing-based elliptic
curve engine.

Callers hand this package a byte buffer describing a prime field, its
quadratic or cubic extension, curve coefficients, points and scalars. Every
decoder consumes a prefix of the buffer and returns the decoded value
together with the unconsumed remainder, so that decoders can be chained
until all parameters of a request are assembled. Any malformed or
adversarial input is rejected with an exception from
[`pairing_codec.exceptions`].

[`pairing_codec.exceptions`]: ref:pairing_codec.exceptions
"""

__version__ = "0.1.0"
