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

from typing import Union

from mtwister.engine import MersenneTwister64
from mtwister.misc import to_int32, to_int64

# Largest value accepted by `next_int(bound)`, i.e., the largest signed 32-bit integer
MAX_BOUND = 2 ** 31 - 1


class UnsupportedOperation(Exception):
    """An operation that this random source refuses to perform"""

    def __init__(self, error_message):
        super().__init__(error_message)


class InvalidArgument(ValueError):
    """An argument passed to a random source is outside its allowed range"""

    def __init__(self, error_message):
        super().__init__(error_message)


class RandomSource:
    """An abstract class representing a source of pseudo-random numbers

    The concrete subclass is `MersenneTwister`. Methods that a source does not
    support must raise :class:`.UnsupportedOperation`.
    """

    def next_double(self) -> float:
        """Return a number uniformly distributed over [0, 1)

        This is an abstract method. You should redefine it in derived classes."""
        raise NotImplementedError("RandomSource.next_double is an abstract method")

    def next_float(self) -> float:
        """Return a single-precision number uniformly distributed over [0, 1)"""
        raise NotImplementedError("RandomSource.next_float is an abstract method")

    def next_int(self, bound: Union[int, None] = None) -> int:
        """Return a signed 32-bit number, or a number in [0, bound) if `bound` is given"""
        raise NotImplementedError(f"RandomSource.next_int(bound={bound}) is an abstract method")

    def next_long(self) -> int:
        """Return a signed 64-bit number"""
        raise NotImplementedError("RandomSource.next_long is an abstract method")

    def next_boolean(self) -> bool:
        raise NotImplementedError("RandomSource.next_boolean is an abstract method")

    def next_bytes(self, buffer: bytearray):
        raise NotImplementedError("RandomSource.next_bytes is an abstract method")

    def next_gaussian(self) -> float:
        raise NotImplementedError("RandomSource.next_gaussian is an abstract method")

    def set_seed(self, seed: int):
        raise NotImplementedError(f"RandomSource.set_seed(seed={seed}) is an abstract method")


class MersenneTwister(RandomSource):
    """A random source backed by a 64-bit Mersenne Twister

    Booleans, bytes and Gaussian deviates are not supported, and the seed cannot
    be changed once the object has been created: `set_seed` is silently ignored.
    Like the engine, this class is not thread-safe.
    """

    def __init__(self, seed: int = 5489, engine: Union[MersenneTwister64, None] = None):
        """Create a new random source

        If `engine` is given, it is used as it is and `seed` is ignored. This is
        handy to wrap an engine created with :meth:`.MersenneTwister64.from_key`."""
        self.engine = engine if engine is not None else MersenneTwister64(seed=seed)

    def next_double(self) -> float:
        return self.engine.next_real2()

    def next_float(self) -> float:
        # 24 bits: the precision of a single-precision mantissa
        return (self.engine.next_raw() >> 40) * (1.0 / 16777216.0)

    def next_int(self, bound: Union[int, None] = None) -> int:
        if bound is None:
            return to_int32(self.engine.next_raw())

        if not isinstance(bound, int) or isinstance(bound, bool):
            raise InvalidArgument(f"the bound passed to next_int must be an integer, got {bound!r}")

        if not (0 < bound <= MAX_BOUND):
            raise InvalidArgument(f"the bound passed to next_int must be in [1, {MAX_BOUND}], got {bound}")

        # Not uniform, but it matches the historical behavior of this source
        return int(bound * self.next_double())

    def next_long(self) -> int:
        return to_int64(self.engine.next_raw())

    def next_boolean(self) -> bool:
        raise UnsupportedOperation("next_boolean is not supported by MersenneTwister")

    def next_bytes(self, buffer: bytearray):
        raise UnsupportedOperation("next_bytes is not supported by MersenneTwister")

    def next_gaussian(self) -> float:
        raise UnsupportedOperation("next_gaussian is not supported by MersenneTwister")

    def set_seed(self, seed: int):
        pass
