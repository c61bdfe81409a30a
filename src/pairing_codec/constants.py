"""
Wire Format Constants
^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Fixed sizes and tags of the parameter encoding.
"""

BYTES_FOR_LENGTH_ENCODING = 1
EXTENSION_DEGREE_ENCODING_LENGTH = 1

EXTENSION_DEGREE_2 = 2
EXTENSION_DEGREE_3 = 3

LIMB_BITS = 64

MAX_MODULUS_BYTE_LEN = 128
MAX_GROUP_BYTE_LEN = 128
MAX_MODULUS_LIMBS = (MAX_MODULUS_BYTE_LEN * 8) // LIMB_BITS
