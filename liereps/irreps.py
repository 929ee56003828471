"""Irreducible representations (by highest weight) and their direct sums"""
import numbers
import threading
from collections import deque
from fractions import Fraction
from . import config
from .config import irreps_log as logger
from .weights import Weight
from .characters import character
from .errors import AlgebraMismatchError,InvalidLabelError


def _check_labels(algebra, labels):
  labels = tuple(labels)
  if len(labels) != algebra.rank:
    raise InvalidLabelError('%r expects %d Dynkin labels, got %d'\
      %(algebra,algebra.rank,len(labels)))
  for l in labels:
    if isinstance(l, float):
      raise TypeError('Dynkin labels must be exact integers, not %r'%(l,))
    if isinstance(l, bool) or not isinstance(l, int):
      if isinstance(l, Fraction) and l.denominator == 1:
        continue
      raise InvalidLabelError('Dynkin labels must be integers, got %r'%(l,))
    if l < 0:
      raise InvalidLabelError('Dynkin labels must be non-negative, got %s'\
        %(labels,))
  return tuple(int(l) for l in labels)


class Irrep:
  """Irrep of a simple Lie algebra, identified by its Dynkin labels"""
  __slots__ = ('algebra','labels')

  def __init__(self, algebra, *labels):
    # Accept Irrep(g, (1,0)) as well as Irrep(g, 1, 0)
    if len(labels) == 1 and not isinstance(labels[0], numbers.Number):
      labels = labels[0]
    if isinstance(labels, Weight):
      labels = labels.coords
    self.algebra = algebra
    self.labels = _check_labels(algebra, labels)

  @classmethod
  def _make(cls, algebra, labels):
    r = object.__new__(cls)
    r.algebra = algebra
    r.labels = labels
    return r

  @property
  def highest_weight(self):
    return Weight._make(self.algebra, (Fraction(l) for l in self.labels))

  @property
  def dim(self):
    return self.algebra.dim(self.labels)

  @property
  def order(self):
    return self.algebra.irrep_order(self.labels)

  def dual(self):
    return Irrep._make(self.algebra, self.algebra.dual(self.labels))

  conjugate = dual

  def is_trivial(self):
    return not any(self.labels)

  def is_self_conjugate(self):
    return self.algebra.dual(self.labels) == self.labels

  def character(self, lazy=False):
    return character(self, lazy)

  def quadratic_casimir(self):
    return self.algebra.quadratic_casimir(self.labels)

  def dynkin_index(self):
    return self.algebra.dynkin_index(self.labels)

  def __eq__(self, other):
    if not isinstance(other, Irrep):
      return NotImplemented
    return self.algebra == other.algebra and self.labels == other.labels

  def __hash__(self):
    return hash((self.algebra.label,self.labels))

  def __lt__(self, other):
    if not isinstance(other, Irrep):
      return NotImplemented
    if other.algebra != self.algebra:
      raise AlgebraMismatchError(self.algebra, other.algebra)
    return self.order < other.order

  def __add__(self, other):
    return Rep.from_irrep(self) + other

  def __radd__(self, other):
    return other + Rep.from_irrep(self)

  def __mul__(self, n):
    return Rep.from_irrep(self)*n

  __rmul__ = __mul__

  def __repr__(self):
    return 'Irrep(%s, %s)'%(self.algebra.label_string,list(self.labels))


class Rep:
  """Direct sum of irreps with integer multiplicities. Multiplicities are
  non-zero; negative multiplicities describe virtual representations"""

  def __init__(self, algebra, components=()):
    self.algebra = algebra
    comps = {}
    if hasattr(components, 'items'):
      components = components.items()
    for r,n in components:
      if not isinstance(r, Irrep):
        r = Irrep(algebra, r)
      elif r.algebra != algebra:
        raise AlgebraMismatchError(algebra, r.algebra)
      if isinstance(n, bool) or not isinstance(n, int):
        if isinstance(n, Fraction) and n.denominator == 1:
          n = n.numerator
        else:
          raise TypeError('Multiplicity of %r must be an integer, got %r'\
            %(r,n))
      comps[r] = comps.get(r,0) + n
    self._components = {r:n for r,n in comps.items() if n}

  @classmethod
  def from_irrep(cls, irrep, n=1):
    return cls(irrep.algebra, {irrep:n})

  @property
  def components(self):
    return dict(self._components)

  def irreps(self):
    return sorted(self._components)

  def items(self):
    return [(r,self._components[r]) for r in self.irreps()]

  def __iter__(self):
    return iter(self.items())

  def __len__(self):
    return len(self._components)

  def __getitem__(self, r):
    if not isinstance(r, Irrep):
      r = Irrep(self.algebra, r)
    return self._components.get(r,0)

  def __contains__(self, r):
    return self[r] != 0

  @property
  def dim(self):
    return sum(r.dim*n for r,n in self._components.items())

  def is_virtual(self):
    return any(n < 0 for n in self._components.values())

  def _coerce(self, other):
    if isinstance(other, Irrep):
      other = Rep.from_irrep(other)
    if not isinstance(other, Rep):
      return None
    if other.algebra != self.algebra:
      raise AlgebraMismatchError(self.algebra, other.algebra)
    return other

  def __add__(self, other):
    other = self._coerce(other)
    if other is None:
      return NotImplemented
    comps = dict(self._components)
    for r,n in other._components.items():
      comps[r] = comps.get(r,0) + n
    return Rep(self.algebra, comps)

  def __radd__(self, other):
    # sum() starts from 0
    if isinstance(other, int) and not isinstance(other, bool) and other == 0:
      return self
    return self.__add__(other)

  def __neg__(self):
    return Rep(self.algebra, {r:-n for r,n in self._components.items()})

  def __sub__(self, other):
    other = self._coerce(other)
    if other is None:
      return NotImplemented
    return self + (-other)

  def __mul__(self, n):
    if isinstance(n, bool) or not isinstance(n, int):
      return NotImplemented
    return Rep(self.algebra, {r:n*m for r,m in self._components.items()})

  __rmul__ = __mul__

  def __eq__(self, other):
    if isinstance(other, Irrep):
      other = Rep.from_irrep(other)
    if not isinstance(other, Rep):
      return NotImplemented
    return self.algebra == other.algebra and \
      self._components == other._components

  __hash__ = None

  def __repr__(self):
    terms = ['%s%s'%('' if n == 1 else '%d*'%n,list(r.labels)) \
      for r,n in self.items()]
    return 'Rep(%s: %s)'%(self.algebra.label_string,' + '.join(terms) or '0')


class IrrepCache:
  """Enumerations of irreps up to a given dimension, kept per algebra
  Entries only ever grow, and may be dropped at any time with clear()"""

  def __init__(self):
    self._lock = threading.Lock()
    self._entries = {}

  def irreps_up_to_dim(self, algebra, max_dim):
    with self._lock:
      entry = self._entries.get(algebra)
    if entry is not None and entry[0] >= max_dim:
      logger.debug('Irrep cache hit for %r up to %d',algebra,max_dim)
      return [r for r in entry[1] if r.dim <= max_dim]
    if entry is None:
      irreps = _enumerate_irreps(algebra, max_dim)
    else:
      logger.debug('Extending irreps of %r from dimension %d to %d',algebra,
        entry[0],max_dim)
      irreps = _enumerate_irreps(algebra, max_dim, entry[1])
    with self._lock:
      entry = self._entries.get(algebra)
      # Another writer may have gone further in the meantime
      if entry is None or entry[0] < max_dim:
        self._entries[algebra] = (max_dim,tuple(irreps))
    return irreps

  def clear(self):
    with self._lock:
      self._entries.clear()

  def __contains__(self, algebra):
    with self._lock:
      return algebra in self._entries

  def __len__(self):
    with self._lock:
      return len(self._entries)


def _enumerate_irreps(algebra, max_dim, known=()):
  # Dimension is strictly increasing in every label, so raising labels one
  # at a time from the trivial irrep reaches everything within the bound.
  # Any path to a new irrep leaves the known set (closed under lowering
  # labels) at some member, so the known irreps seed the search
  rank = algebra.rank
  found = set(r.labels for r in known)
  if max_dim >= 1:
    found.add(algebra.triv)
  queue = deque(found)
  while queue:
    lam = queue.popleft()
    for i in range(rank):
      mu = lam[:i] + (lam[i]+1,) + lam[i+1:]
      if mu not in found and algebra.dim(mu) <= max_dim:
        found.add(mu)
        queue.append(mu)
  logger.log(config.PROGRESS,'Enumerated %d irreps of %r up to dimension %d',
    len(found),algebra,max_dim)
  return sorted(Irrep._make(algebra, lam) for lam in found)


default_irrep_cache = IrrepCache()

def irreps_up_to_dim(algebra, max_dim, cache=None):
  """All irreps of algebra with dimension at most max_dim, ordered by
  (dimension, labels)"""
  if cache is None:
    cache = default_irrep_cache
  return cache.irreps_up_to_dim(algebra, max_dim)

def clear_irreps_cache(cache=None):
  if cache is None:
    cache = default_irrep_cache
  cache.clear()
