"""
Error types raised while decoding or encoding pairing parameters.
"""


class PairingCodecException(Exception):
    """
    Base class for all exceptions _expected_ to be thrown during normal
    operation.
    """


class InputError(PairingCodecException):
    """
    Thrown when an input buffer is malformed or describes parameters that
    would make later arithmetic unsound. The whole decode attempt must be
    discarded.
    """


class InputTooShort(InputError):
    """
    Thrown when a declared or required length exceeds the bytes remaining in
    the buffer.
    """


class UnexpectedZero(InputError):
    """
    Thrown when a modulus, group order or non-residue decodes to zero.
    """


class UnknownParameter(InputError):
    """
    Thrown when an extension degree tag does not match the expected degree,
    or when Frobenius coefficients cannot be derived for the modulus.
    """


class NonResidueError(InputError):
    """
    Thrown when the element supplied as a quadratic non-residue is in fact a
    quadratic residue (or zero).
    """


class ScalarOutOfRange(InputError):
    """
    Thrown when a scalar is not strictly smaller than the group order.
    """


class OutputError(PairingCodecException):
    """
    Thrown when a value cannot be encoded in the requested number of bytes.
    """
