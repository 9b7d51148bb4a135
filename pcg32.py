import numpy as np


MULTIPLIER = np.uint64(6364136223846793005)
DEFAULT_STATE = np.uint64(0x853c49e6748fea9b)
DEFAULT_INCREMENT = np.uint64(0xda3e39cb94b95bdb)

MASK32 = np.uint64(0xFFFFFFFF)
ZERO = np.uint64(0)
ONE = np.uint64(1)

# largest float32 strictly below 1.0
F32_MAX_BELOW_ONE = np.nextafter(np.float32(1), np.float32(0))


# PCG XSH-RR 64/32, O'Neill (pcg-random.org), advance after Brown (1994)
class Generator:
  def __init__(self, state=DEFAULT_STATE, increment=DEFAULT_INCREMENT):
    # increment is taken as given, an even value breaks stream independence
    self.state = state
    self.increment = increment


  @classmethod
  def seeded(cls, init_state, init_sequence=1):
    rng = cls()
    rng.seed(init_state, init_sequence)
    return rng


  @property
  def state(self) -> np.uint64:
    return self._state


  @state.setter
  def state(self, value) -> None:
    assert isinstance(value, (int, np.integer))
    self._state = np.uint64(int(value))


  @property
  def increment(self) -> np.uint64:
    return self._increment


  @increment.setter
  def increment(self, value) -> None:
    assert isinstance(value, (int, np.integer))
    self._increment = np.uint64(int(value))


  def seed(self, init_state, init_sequence=1) -> None:
    assert isinstance(init_state, (int, np.integer))
    assert isinstance(init_sequence, (int, np.integer))
    self.state = ZERO
    self.increment = (np.uint64(int(init_sequence)) << ONE) | ONE
    self.next_u32()
    with np.errstate(over='ignore'):
      self.state = self.state + np.uint64(int(init_state))
    self.next_u32()


  def next_u32(self) -> np.uint32:
    old_state = self._state
    with np.errstate(over='ignore'):
      self._state = old_state * MULTIPLIER + self._increment
    xorshifted = np.uint32((((old_state >> np.uint64(18)) ^ old_state)
                            >> np.uint64(27)) & MASK32)
    rot = np.uint32(old_state >> np.uint64(59))
    return (xorshifted >> rot) | (xorshifted << ((np.uint32(32) - rot)
                                                 & np.uint32(31)))


  def next_u32_bounded(self, bound) -> np.uint32:
    """Uniform draw in [0, bound) by rejection sampling.

    Outputs below (2**32 - bound) % bound are thrown away so that the
    remaining range is a multiple of bound. The loop has no iteration cap.
    """
    assert isinstance(bound, (int, np.integer))
    bound = np.uint32(int(bound))
    if bound == 0:
      raise ZeroDivisionError('bound must be positive')

    with np.errstate(over='ignore'):
      threshold = (np.uint32(0) - bound) % bound

    while True:
      r = self.next_u32()
      if r >= threshold:
        return r % bound


  def next_f32(self) -> np.float32:
    fl = np.ldexp(np.float32(self.next_u32()), np.int32(-32))
    # draws within 128 of 2**32 round up to 1.0 in single precision
    if fl > F32_MAX_BELOW_ONE:
      fl = F32_MAX_BELOW_ONE
    return fl


  def next_f64(self) -> np.float64:
    # only 32 random bits reach the 53-bit mantissa
    return np.ldexp(np.float64(self.next_u32()), np.int32(-32))


  def advance(self, delta) -> None:
    """Jump delta steps ahead in O(log delta) without drawing.

    A negative delta is reinterpreted as unsigned and walks the long way
    round the 2**64 period, which lands on the earlier position.
    """
    assert isinstance(delta, (int, np.integer))
    remaining = np.int64(int(delta)).astype(np.uint64)

    acc_mult, acc_plus = ONE, ZERO
    cur_mult, cur_plus = MULTIPLIER, self._increment
    with np.errstate(over='ignore'):
      while remaining > ZERO:
        if remaining & ONE:
          acc_mult = acc_mult * cur_mult
          acc_plus = acc_plus * cur_mult + cur_plus
        cur_plus = (cur_mult + ONE) * cur_plus
        cur_mult = cur_mult * cur_mult
        remaining >>= ONE
      self._state = acc_mult * self._state + acc_plus


  # Knuth, TAoCP Vol. 2 (3rd ed.), section 3.4.2
  def shuffle(self, sequence) -> None:
    for i in reversed(range(1, len(sequence))):
      j = int(self.next_u32_bounded(i + 1))
      if isinstance(sequence, np.ndarray):
        sequence[[i, j]] = sequence[[j, i]]
      else:
        sequence[i], sequence[j] = sequence[j], sequence[i]
