"""Weyl group acting on weights in the fundamental-weight basis

Reflections use 0-based indices. Internally weights are handled as plain
coordinate tuples; the public functions accept and return Weights.
"""
from .weights import Weight
from .errors import AlgebraMismatchError, ConsistencyError, InvalidLabelError


def _check_index(algebra, i):
  if isinstance(i, bool) or not isinstance(i, int):
    raise InvalidLabelError('Reflection index must be int, got %r'%(i,))
  if not 0 <= i < algebra.rank:
    raise IndexError('Reflection index %d out of range for %r'%(i,algebra))

def _reflect(algebra, mu, i):
  # s_i(mu) = mu - mu_i alpha_i
  c = mu[i]
  if not c:
    return mu
  return tuple(m - c*a for m,a in zip(mu, algebra._simple_root_rows[i]))

def _to_dominant(algebra, mu):
  """Reflect coordinates mu to the dominant chamber
  Returns dominant coordinates and the list of reflection indices used"""
  word = []
  nmax = algebra.num_positive_roots
  while True:
    for i,c in enumerate(mu):
      if c < 0:
        break
    else:
      return mu,word
    if len(word) >= nmax:
      raise ConsistencyError('Weight %s did not reach dominant chamber in %d '
        'reflections'%(mu, nmax))
    mu = _reflect(algebra, mu, i)
    word.append(i)

def _dominant_sign(algebra, mu):
  dom,word = _to_dominant(algebra, mu)
  return dom,(-1 if len(word)%2 else 1)

def _orbit_levels(algebra, dom):
  """Orbit of dominant coordinates dom, as list of levels (level L consists
  of elements reached by L reflections, so has sign (-1)^L)"""
  rank = algebra.rank
  levels = [[dom]]
  while True:
    current = []
    seen = set()
    for mu in levels[-1]:
      for i in range(rank):
        if mu[i] > 0:
          nu = _reflect(algebra, mu, i)
          if nu not in seen:
            seen.add(nu)
            current.append(nu)
    if not current:
      return levels
    levels.append(current)


def simple_reflection(weight, i):
  _check_index(weight.algebra, i)
  return Weight._make(weight.algebra,
    _reflect(weight.algebra, weight.coords, i))

def is_dominant(weight):
  return weight.is_dominant()

def reflect_to_dominant(weight):
  """Returns (dominant weight in orbit, sign of reflection sequence used)"""
  dom,sign = _dominant_sign(weight.algebra, weight.coords)
  return Weight._make(weight.algebra, dom),sign

def weyl_orbit(weight):
  """Weyl orbit of weight, as {1: [...], -1: [...]}, signs taken relative to
  the dominant weight in the orbit"""
  algebra = weight.algebra
  dom,word = _to_dominant(algebra, weight.coords)
  orbit = {1:[], -1:[]}
  for level,mus in enumerate(_orbit_levels(algebra, dom)):
    orbit[-1 if level%2 else 1].extend(Weight._make(algebra, mu) for mu in mus)
  return orbit

def weyl_group_order(algebra):
  return algebra.weyl_group_order


class WeylWord:
  """Sequence of simple reflections, applied left to right"""
  def __init__(self, algebra, word):
    word = tuple(word)
    for i in word:
      _check_index(algebra, i)
    self.algebra = algebra
    self.word = word

  def apply(self, weight):
    if weight.algebra != self.algebra:
      raise AlgebraMismatchError(self.algebra, weight.algebra)
    mu = weight.coords
    for i in self.word:
      mu = _reflect(self.algebra, mu, i)
    return Weight._make(self.algebra, mu)

  def __len__(self):
    return len(self.word)

  def __iter__(self):
    return iter(self.word)

  def __eq__(self, other):
    if not isinstance(other, WeylWord):
      return NotImplemented
    return self.algebra == other.algebra and self.word == other.word

  def __hash__(self):
    return hash((self.algebra.label, self.word))

  def __repr__(self):
    return 'WeylWord(%s, %s)'%(self.algebra.label, list(self.word))


def longest_weyl_word(algebra):
  """Reduced word for the longest element, obtained by reflecting -rho
  back to rho"""
  return algebra.longest_word
