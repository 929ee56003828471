# Common structure of the symmetry objects whose irreps we decompose:
#   simple Lie algebras (irreps = Dynkin labels) and symmetric groups
#   (irreps = partitions). "Fusion" of two irreps is the list of
#   (irrep, multiplicity) in their tensor (resp. Kronecker) product.
from abc import ABCMeta, abstractmethod
from . import config
from .errors import InvalidLabelError


class GroupType(ABCMeta):
  """One instance per identifier: SimpleLieAlgebra('A',2) is A_series(2)"""
  _registry = {}

  def __call__(cls, *args, **kwargs):
    label = cls.get_identifier(*args)
    obj = cls._registry.get(label)
    if obj is None:
      obj = super(GroupType,cls).__call__(*args,**kwargs)
      obj.label = label
      cls._registry[label] = obj
    return obj


class Group(metaclass=GroupType):
  """Algebra or group with discretely labelled irreps.
  Subclasses supply
  - get_identifier: unique hashable name, used for the singleton registry
  - isrep: whether a label names an irrep
  - triv: label of the trivial irrep
  - _fdim, _fdual, _ffusion: uncached dimension, dual, decomposition
  Results of the latter are memoized per instance (fusion only while
  config.memo_fusion is set)
  """

  def __init__(self):
    self._duals = {}
    self._dims = {}
    self._fusion = {}

  @classmethod
  @abstractmethod
  def get_identifier(cls, *args):
    pass

  def __repr__(self):
    return '<%s Group>'%self.label

  @abstractmethod
  def isrep(self, r):
    pass

  @property
  @abstractmethod
  def triv(self):
    pass

  def verify_rep(self, r):
    if not self.isrep(r):
      raise InvalidLabelError('%r has no irrep labelled %s'%(self,r))

  def dim(self, r):
    if r not in self._dims:
      self.verify_rep(r)
      self._dims[r] = self._fdim(r)
    return self._dims[r]

  @abstractmethod
  def _fdim(self, r):
    pass

  def fusion(self, r1, r2):
    """Decomposition of r1 x r2, as a sorted list of (irrep, multiplicity)"""
    key = (r1,r2)
    if key in self._fusion:
      return self._fusion[key]
    self.verify_rep(r1)
    self.verify_rep(r2)
    fusion = sorted(self._ffusion(r1,r2))
    if config.memo_fusion:
      # Products are commutative
      self._fusion[key] = fusion
      self._fusion[r2,r1] = fusion
    return fusion

  @abstractmethod
  def _ffusion(self, r1, r2):
    pass

  def dual(self, r):
    if r not in self._duals:
      self.verify_rep(r)
      self._duals[r] = self._fdual(r)
    return self._duals[r]

  @abstractmethod
  def _fdual(self, r):
    pass

  def sumdims(self, rep):
    """Total dimension of a list of (irrep, multiplicity)"""
    return sum(self.dim(r)*n for r,n in rep)

  def clear_caches(self):
    self._duals.clear()
    self._dims.clear()
    self._fusion.clear()
