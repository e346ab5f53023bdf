"""
Mathematical constants as fixed-point values.

Each constant uses the largest digit count its unsigned backing kind can
hold, so narrower constants are prefixes of wider ones.
"""

from fixeddec.core.enums import IntegerKind
from fixeddec.core.types.fixed_dec import FixedDec

PI_128_DIGITS = 314_159_265_358_979_323_846_264_338_327_950_288_419
PI_64_DIGITS = 3_141_592_653_589_793_238
PI_32_DIGITS = 3_141_592_653

PI128 = FixedDec[IntegerKind.U128, 38](PI_128_DIGITS)
PI64 = FixedDec[IntegerKind.U64, 18](PI_64_DIGITS)
PI32 = FixedDec[IntegerKind.U32, 9](PI_32_DIGITS)
