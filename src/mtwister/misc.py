# -*- encoding: utf-8 -*-
#
# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software. THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT
# LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT
# SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

# The routines below are needed in Python, as it does not have the concept
# of "typed integers". In other languages like C++ or Java it is enough to
# declare a variable as `uint64_t` or `int`, and clipping will be done
# automatically by the CPU/virtual machine.

_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_UINT32_MASK = 0xFFFFFFFF


def to_uint64(x: int) -> int:
    """Clip an integer so that it occupies 64 bits"""
    return x & _UINT64_MASK


def to_uint32(x: int) -> int:
    """Clip an integer so that it occupies 32 bits"""
    return x & _UINT32_MASK


def to_int64(x: int) -> int:
    """Reinterpret the lowest 64 bits of an integer as a two's complement signed number"""
    x = to_uint64(x)
    return x - (1 << 64) if x & (1 << 63) else x


def to_int32(x: int) -> int:
    """Reinterpret the lowest 32 bits of an integer as a two's complement signed number"""
    x = to_uint32(x)
    return x - (1 << 32) if x & (1 << 31) else x


def are_close(num1, num2, epsilon=1e-6):
    """Return True if the two numbers differ by less than `epsilon`"""
    return abs(num1 - num2) < epsilon
