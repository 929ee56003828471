"""Weights in the basis of fundamental weights, and root-system queries"""
from fractions import Fraction
import numbers
from .errors import AlgebraMismatchError, InvalidLabelError
from .rationallinalg import _fraction


def _scalar(x):
  # Exact scalars only
  if isinstance(x, bool) or not isinstance(x, numbers.Rational):
    return None
  return _fraction(x)


class Weight:
  """Element of the weight space of a simple Lie algebra, stored as exact
  coordinates with respect to the fundamental weights"""
  __slots__ = ('algebra', 'coords', '_hash')

  def __init__(self, algebra, coords):
    coords = tuple(_fraction(c) for c in coords)
    if len(coords) != algebra.rank:
      raise InvalidLabelError('%r expects weights with %d coordinates, got %d'\
        %(algebra, algebra.rank, len(coords)))
    self.algebra = algebra
    self.coords = coords
    self._hash = None

  @classmethod
  def _make(cls, algebra, coords):
    # Trusted construction (coordinates already validated & exact)
    w = object.__new__(cls)
    w.algebra = algebra
    w.coords = tuple(coords)
    w._hash = None
    return w

  @classmethod
  def zero(cls, algebra):
    return cls._make(algebra, algebra.rank*(Fraction(0),))

  def _check(self, other):
    if not isinstance(other, Weight):
      return False
    if other.algebra != self.algebra:
      raise AlgebraMismatchError(self.algebra, other.algebra)
    return True

  def __add__(self, other):
    if not self._check(other):
      return NotImplemented
    return Weight._make(self.algebra,
      (a+b for a,b in zip(self.coords,other.coords)))

  def __sub__(self, other):
    if not self._check(other):
      return NotImplemented
    return Weight._make(self.algebra,
      (a-b for a,b in zip(self.coords,other.coords)))

  def __neg__(self):
    return Weight._make(self.algebra, (-a for a in self.coords))

  def __mul__(self, c):
    c = _scalar(c)
    if c is None:
      return NotImplemented
    return Weight._make(self.algebra, (c*a for a in self.coords))

  __rmul__ = __mul__

  def __truediv__(self, c):
    c = _scalar(c)
    if c is None:
      return NotImplemented
    return Weight._make(self.algebra, (a/c for a in self.coords))

  def __eq__(self, other):
    if not isinstance(other, Weight):
      return NotImplemented
    return self.algebra == other.algebra and self.coords == other.coords

  def __hash__(self):
    if self._hash is None:
      self._hash = hash((self.algebra.label, self.coords))
    return self._hash

  def __getitem__(self, i):
    return self.coords[i]

  def __iter__(self):
    return iter(self.coords)

  def __len__(self):
    return len(self.coords)

  def __repr__(self):
    return 'Weight(%s, [%s])'%(self.algebra.label,
      ', '.join(str(c) for c in self.coords))

  def is_dominant(self):
    return all(c >= 0 for c in self.coords)

  def is_integral(self):
    """Lies in the weight lattice (integer coordinates)"""
    return all(c.denominator == 1 for c in self.coords)

  def is_highest_weight(self):
    """Dynkin-valid: non-negative integer coordinates"""
    return self.is_integral() and self.is_dominant()

  @property
  def labels(self):
    """Coordinates as a tuple of ints"""
    if not self.is_integral():
      raise InvalidLabelError('Weight %r is not integral'%(self,))
    return tuple(int(c) for c in self.coords)

  def root_coefficients(self):
    """Coordinates in the basis of simple roots"""
    return self.algebra.root_coefficients(self.coords)


def inner_product(w1, w2):
  if w1.algebra != w2.algebra:
    raise AlgebraMismatchError(w1.algebra, w2.algebra)
  return w1.algebra.inner_product(w1.coords, w2.coords)

def simple_roots(algebra):
  return list(algebra.simple_roots)

def positive_roots(algebra):
  return algebra.positive_roots

def weyl_vector(algebra):
  return algebra.weyl_vector

def fundamental_weights(algebra):
  r = algebra.rank
  return [Weight._make(algebra,
    (Fraction(int(i==j)) for j in range(r))) for i in range(r)]

def simple_root_squared_lengths(algebra):
  return list(algebra.root_lengths)
