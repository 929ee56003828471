"""Symmetric-group data needed for plethysms: partitions, conjugacy classes,
characters (Murnaghan-Nakayama) and Kronecker products"""
import functools
from fractions import Fraction
from math import factorial,prod
from sympy.utilities.iterables import partitions as _sympy_partitions
from .groups import Group
from .errors import InvalidLabelError,ConsistencyError


class Partition(tuple):
  """Non-increasing tuple of positive integers"""
  def __new__(cls, parts=()):
    parts = [p for p in parts if p != 0]
    for p in parts:
      if isinstance(p, bool) or not isinstance(p, int) or p < 0:
        raise InvalidLabelError('Partition parts must be positive integers, '
          'got %r'%(p,))
    if any(parts[i] < parts[i+1] for i in range(len(parts)-1)):
      raise InvalidLabelError('Partition %s is not non-increasing'%(parts,))
    return super().__new__(cls, parts)

  @property
  def size(self):
    return sum(self)

  def conjugate(self):
    if not self:
      return Partition()
    return Partition(sum(1 for p in self if p > j) for j in range(self[0]))

  def __repr__(self):
    return 'Partition(%s)'%list(self)


class _PartitionLabel:
  __slots__ = ('partition',)

  def __init__(self, partition):
    if not isinstance(partition, Partition):
      partition = Partition(partition)
    self.partition = partition

  @property
  def degree(self):
    return self.partition.size

  def __eq__(self, other):
    if type(other) is not type(self):
      return NotImplemented
    return self.partition == other.partition

  def __hash__(self):
    return hash((type(self).__name__,self.partition))

  def __repr__(self):
    return '%s(%s)'%(type(self).__name__,list(self.partition))


class SymmetricIrrep(_PartitionLabel):
  """Irrep of S_n labelled by a partition of n"""
  pass


class ConjugacyClass(_PartitionLabel):
  """Conjugacy class of S_n labelled by its cycle type"""
  pass


def all_partitions(n):
  """Partitions of n in reverse lexicographic order"""
  if n < 0:
    raise ValueError('Cannot partition negative integer %d'%n)
  if n == 0:
    return [Partition()]
  parts = []
  for p in _sympy_partitions(n):
    # sympy reuses the dictionary between iterations
    parts.append(Partition(sorted((k for k,m in p.items() for _ in range(m)),
      reverse=True)))
  return sorted(parts, reverse=True)

def conjugacy_class_size(cc):
  """n!/prod_k k^m_k m_k! for cycle type with m_k cycles of length k"""
  p = cc.partition if isinstance(cc, _PartitionLabel) else Partition(cc)
  counts = {}
  for k in p:
    counts[k] = counts.get(k,0) + 1
  denom = prod(k**m * factorial(m) for k,m in counts.items())
  return factorial(p.size)//denom

def hook_length(partition, i, j):
  """Hook length of cell (i,j) (0-based row, column)"""
  conj = Partition(partition).conjugate()
  return partition[i] - j + conj[j] - i - 1

def dimension(irrep):
  p = irrep.partition if isinstance(irrep, _PartitionLabel) else \
    Partition(irrep)
  hooks = 1
  conj = p.conjugate()
  for i,row in enumerate(p):
    for j in range(row):
      hooks *= row - j + conj[j] - i - 1
  return factorial(p.size)//hooks


def _beta_set(p):
  l = len(p)
  return tuple(part + l-1-i for i,part in enumerate(p))

@functools.lru_cache(maxsize=None)
def _mn_character(beta, rho):
  # Murnaghan-Nakayama: remove rim hooks of length rho[0], i.e. move beads
  # of the beta-set down by rho[0] into empty positions
  if not rho:
    return 1
  r = rho[0]
  rest = rho[1:]
  beads = set(beta)
  total = 0
  for b in beta:
    if b-r < 0 or (b-r) in beads:
      continue
    between = sum(1 for c in beta if b-r < c < b)
    newbeta = tuple(sorted((c if c != b else b-r for c in beta), reverse=True))
    term = _mn_character(newbeta, rest)
    total += -term if between % 2 else term
  return total

def character(irrep, cc):
  """Character of SymmetricIrrep on ConjugacyClass"""
  if irrep.degree != cc.degree:
    return 0
  return _mn_character(_beta_set(irrep.partition), tuple(cc.partition))

def character_table(n):
  """Dict (irrep partition, class partition) -> character"""
  parts = all_partitions(n)
  return {(lam,mu):character(SymmetricIrrep(lam),ConjugacyClass(mu)) \
    for lam in parts for mu in parts}


class SymmetricGroup(Group):
  """S_n, with irreps labelled by Partitions of n"""
  def __init__(self, n):
    self.n = n
    self._classes = all_partitions(n)
    super().__init__()

  @classmethod
  def get_identifier(cls, n):
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
      raise ValueError('Invalid symmetric group S_%s'%(n,))
    return 'S%d'%n

  @property
  def triv(self):
    return Partition((self.n,)) if self.n else Partition()

  @property
  def order(self):
    return factorial(self.n)

  def isrep(self, r):
    return isinstance(r, Partition) and r.size == self.n

  def conjugacy_classes(self):
    return [ConjugacyClass(p) for p in self._classes]

  def class_size(self, p):
    return conjugacy_class_size(ConjugacyClass(p))

  def character(self, r, p):
    return character(SymmetricIrrep(r), ConjugacyClass(p))

  def _fdim(self, r):
    return dimension(r)

  def _fdual(self, r):
    # Real characters
    return r

  def _ffusion(self, r1, r2):
    # Kronecker coefficients from the character table
    sizes = [self.class_size(p) for p in self._classes]
    chi12 = [self.character(r1,p)*self.character(r2,p) for p in self._classes]
    for r3 in self._classes:
      g = sum(s*c*self.character(r3,p) for s,c,p in \
        zip(sizes,chi12,self._classes))
      g = Fraction(g, self.order)
      if g.denominator != 1:
        raise ConsistencyError('Non-integral Kronecker coefficient %s'%g)
      if g:
        yield r3,int(g)

  def __reduce__(self):
    return self.__class__, (self.n,)
