"""
Core math modules для bigradix

Конверсия целых чисел произвольной точности между системами счисления.
"""

# Digit Codec
from bigradix.core.math.digit_codec import (
    # Constants
    DIGIT_ALPHABET,
    FIRST_LETTER_BASE,
    MAX_BASE,
    MIN_BASE,
    SIGN,
    # Functions
    digit_value,
    is_valid_base,
    validate_base,
    value_digit,
)

# Radix Decoder
from bigradix.core.math.radix_decoder import (
    decode_from_base,
    decode_magnitude,
)

# Radix Encoder
from bigradix.core.math.radix_encoder import (
    encode_magnitude,
    encode_to_base,
)

# Tagged Literals
from bigradix.core.math.tagged import (
    TAG_SEPARATOR,
    WELL_KNOWN_TAGS,
    decode_tagged,
    decode_tagged_with_base,
    encode_tagged,
    split_tag,
    tag_for_base,
)

__all__ = [
    # Digit Codec — Constants
    "DIGIT_ALPHABET",
    "FIRST_LETTER_BASE",
    "MAX_BASE",
    "MIN_BASE",
    "SIGN",
    # Digit Codec — Functions
    "digit_value",
    "is_valid_base",
    "validate_base",
    "value_digit",
    # Radix Decoder
    "decode_from_base",
    "decode_magnitude",
    # Radix Encoder
    "encode_magnitude",
    "encode_to_base",
    # Tagged Literals — Constants
    "TAG_SEPARATOR",
    "WELL_KNOWN_TAGS",
    # Tagged Literals — Functions
    "decode_tagged",
    "decode_tagged_with_base",
    "encode_tagged",
    "split_tag",
    "tag_for_base",
]
