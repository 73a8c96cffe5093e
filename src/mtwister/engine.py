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

"""The 64-bit Mersenne Twister (MT19937-64)

This module implements the generator published by Takuji Nishimura and Makoto
Matsumoto in 2004. The engine keeps a vector of 312 unsigned 64-bit words and a
cursor; every 312 draws the whole vector is regenerated at once ("twisted").
"""

from dataclasses import dataclass, field
import logging
from typing import List, Sequence

from mtwister.misc import to_uint64

logger = logging.getLogger(__name__)

# Size of the state vector
NN = 312

# Offset of the "middle word" used by the twist
MM = 156

MATRIX_A = 0xB5026F5AA96619E9

# Most significant 33 bits
UPPER_MASK = 0xFFFFFFFF80000000

# Least significant 31 bits
LOWER_MASK = 0x7FFFFFFF

SEED_MULTIPLIER = 6364136223846793005

# Tempering masks
TEMPER_B = 0x5555555555555555
TEMPER_C = 0x71D67FFFEDA60000
TEMPER_D = 0xFFF7EEE000000000

# Seed used by `from_key` before mixing the key into the state
KEY_INIT_SEED = 19650218


@dataclass
class MersenneTwister64:
    """MT19937-64 Uniform Pseudo-random Number Generator

    Two engines built with the same seed produce the same stream of numbers. The
    engine is not thread-safe: each thread should own its own instance.
    """

    state: List[int] = field(default_factory=list, repr=False)
    index: int = NN
    generation: int = 0

    def __init__(self, seed=5489):
        self.state = [0] * NN
        self.index = NN
        self.generation = 0

        self._seed(seed)

    @classmethod
    def from_key(cls, key: Sequence[int]):
        """Create a new engine seeded by a sequence of 64-bit words

        This follows `init_by_array64` in the reference implementation."""
        if not key:
            raise ValueError("the key used to seed a MersenneTwister64 must not be empty")

        engine = cls(seed=KEY_INIT_SEED)
        mt = engine.state

        i, j = 1, 0
        for _ in range(max(NN, len(key))):
            mixed = to_uint64((mt[i - 1] ^ (mt[i - 1] >> 62)) * 3935559000370003845)
            mt[i] = to_uint64((mt[i] ^ mixed) + to_uint64(key[j]) + j)
            i += 1
            j += 1
            if i >= NN:
                mt[0] = mt[NN - 1]
                i = 1
            if j >= len(key):
                j = 0

        for _ in range(NN - 1):
            mixed = to_uint64((mt[i - 1] ^ (mt[i - 1] >> 62)) * 2862933555777941757)
            mt[i] = to_uint64((mt[i] ^ mixed) - i)
            i += 1
            if i >= NN:
                mt[0] = mt[NN - 1]
                i = 1

        # The MSB is set, so that the initial array is never zero
        mt[0] = 1 << 63
        engine.index = NN

        logger.debug("MersenneTwister64 seeded with a key of %d words", len(key))
        return engine

    def _seed(self, seed: int):
        """Initialize the state vector from an integer seed

        Negative seeds are taken as 64-bit two's complement patterns. This is only
        called while constructing the engine: once created, an engine cannot be re-seeded."""
        mt = self.state
        mt[0] = to_uint64(seed)
        for i in range(1, NN):
            prev = mt[i - 1]
            mt[i] = to_uint64(SEED_MULTIPLIER * (prev ^ (prev >> 62)) + i)

        # Force a twist on the first draw
        self.index = NN
        self.generation = 0

        logger.debug("MersenneTwister64 seeded with %d", seed)

    def twist(self):
        """Regenerate the whole state vector and rewind the cursor"""
        mt = self.state
        for i in range(NN):
            x = (mt[i] & UPPER_MASK) | (mt[(i + 1) % NN] & LOWER_MASK)
            x_a = x >> 1
            if x & 1:
                x_a ^= MATRIX_A

            mt[i] = mt[(i + MM) % NN] ^ x_a

        self.index = 0
        self.generation += 1

        logger.debug("MersenneTwister64 twisted, generation %d", self.generation)

    def next_raw(self) -> int:
        """Return a new tempered 64-bit unsigned number and advance the internal state"""
        if self.index >= NN:
            self.twist()

        y = self.state[self.index]
        self.index += 1

        y ^= (y >> 29) & TEMPER_B
        y ^= (y << 17) & TEMPER_C
        y ^= (y << 37) & TEMPER_D
        y ^= y >> 43

        return to_uint64(y)

    def next_int63(self) -> int:
        """Return a random number uniformly distributed over [0, 2^63)"""
        return self.next_raw() >> 1

    def next_real1(self) -> float:
        """Return a random number uniformly distributed over [0, 1]"""
        return (self.next_raw() >> 11) * (1.0 / 9007199254740991.0)

    def next_real2(self) -> float:
        """Return a random number uniformly distributed over [0, 1)"""
        return (self.next_raw() >> 11) * (1.0 / 9007199254740992.0)

    def next_real3(self) -> float:
        """Return a random number uniformly distributed over (0, 1)"""
        return ((self.next_raw() >> 12) + 0.5) * (1.0 / 4503599627370496.0)
