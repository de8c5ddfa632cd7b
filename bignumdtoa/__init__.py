from .bignum import Bignum
from .bignum_dtoa import BignumDtoa, BignumDtoaFromParts, BignumDtoaMode, InvalidInputError
from .decimal_rep import DecimalRepBuf
from .dtoa import DoubleToAscii, Dtoa, DtoaMode

__version__ = '0.1.0'
