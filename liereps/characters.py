"""Weight multiplicities of irreps via Freudenthal's formula

Two modes: eager (all weights, level by level down from the highest weight)
and lazy (weights resolved on demand, through their dominant representative).
Internally weights are tuples of ints.
"""
import threading
from collections.abc import Mapping
from fractions import Fraction
from . import config
from .config import characters_log as logger
from .weights import Weight
from .weyl import _to_dominant,_orbit_levels
from .errors import AlgebraMismatchError,ConsistencyError


class Character(Mapping):
  """Weight multiplicities of an irrep, as a read-only mapping from Weight
  to non-negative integer (0 for weights not in the representation)"""

  def __init__(self, irrep, lazy=False):
    self.irrep = irrep
    self.algebra = irrep.algebra
    self.lazy = lazy
    self._highest = irrep.labels
    algebra = self.algebra
    lam = self._highest
    rho = algebra.rank*(1,)
    self._lamrho = tuple(l+r for l,r in zip(lam,rho))
    self._lamrho_sq = algebra.inner_product(self._lamrho,self._lamrho)
    self._multiplicities = {}
    self._broadcast(lam, 1)
    if lazy:
      self._lock = threading.RLock()
    else:
      self._construct_weights()

  def _broadcast(self, mu, m):
    # Multiplicities are Weyl-invariant; mu is dominant
    mults = self._multiplicities
    for level in _orbit_levels(self.algebra, mu):
      for nu in level:
        mults[nu] = m

  def _freudenthal(self, mu, lookup):
    """Multiplicity of weight mu given lookup for weights above it"""
    algebra = self.algebra
    lam = self._highest
    denom = self._lamrho_sq - algebra.inner_product(
      tuple(m+1 for m in mu),tuple(m+1 for m in mu))
    if denom <= 0:
      return 0
    num = 0
    for idx,beta in enumerate(algebra._root_labels):
      nu = mu
      while True:
        nu = tuple(n+b for n,b in zip(nu,beta))
        if not algebra.is_below(lam, nu):
          break
        m = lookup(nu)
        if m:
          num += m*algebra.root_pairing(nu, idx)
    num *= 2
    m = num/denom
    if m.denominator != 1 or m < 0:
      raise ConsistencyError('Freudenthal formula gives multiplicity %s for '
        'weight %s of %r'%(m,mu,self.irrep))
    return m.numerator

  def _construct_weights(self):
    algebra = self.algebra
    rank = algebra.rank
    rows = algebra._simple_root_rows
    mults = self._multiplicities
    lookup = lambda nu: mults.get(nu,0)
    weights_curr = [self._highest]
    depth = 0
    while weights_curr:
      depth += 1
      weights_last,weights_curr = weights_curr,[]
      tested = set()
      for mu0 in weights_last:
        for i in range(rank):
          mu = tuple(m-a for m,a in zip(mu0,rows[i]))
          if mu in tested:
            continue
          tested.add(mu)
          if mu not in mults:
            m = self._freudenthal(mu, lookup)
            if not m:
              continue
            self._broadcast(_to_dominant(algebra, mu)[0], m)
          weights_curr.append(mu)
    logger.debug('Character of %r: %d weights, depth %d',self.irrep,
      len(mults),depth)
    if not config.no_strict_checks:
      total = sum(mults.values())
      if total != self.irrep.dim:
        raise ConsistencyError('Character of %r has total multiplicity %d, '
          'expected dimension %d'%(self.irrep,total,self.irrep.dim))

  def _lookup(self, nu):
    # Lazy lookup of already-resolved multiplicity
    mults = self._multiplicities
    if nu in mults:
      return mults[nu]
    dom,word = _to_dominant(self.algebra, nu)
    return mults.get(dom,0)

  def _resolve(self, dom):
    """Resolve dominant weight dom (assumed below highest weight) with an
    explicit stack in place of recursion"""
    algebra = self.algebra
    lam = self._highest
    mults = self._multiplicities
    stack = [dom]
    while stack:
      mu = stack[-1]
      if mu in mults:
        stack.pop()
        continue
      # Dependencies: dominant representatives of mu + k beta
      missing = []
      for beta in algebra._root_labels:
        nu = mu
        while True:
          nu = tuple(n+b for n,b in zip(nu,beta))
          if not algebra.is_below(lam, nu):
            break
          nudom,word = _to_dominant(algebra, nu)
          if nudom not in mults and algebra.is_below(lam, nudom):
            missing.append(nudom)
      if missing:
        stack.extend(missing)
        continue
      m = self._freudenthal(mu, self._lookup)
      if m <= 0:
        raise ConsistencyError('Dominant weight %s below highest weight of '
          '%r resolved to multiplicity %s'%(mu,self.irrep,m))
      if config.verbose >= config.VDEBUG:
        logger.log(config.VDEBUG,'Resolved %s -> %d',mu,m)
      self._broadcast(mu, m)
      stack.pop()
    return mults[dom]

  def multiplicity(self, mu):
    """Multiplicity of weight with coordinates mu (any rationals)"""
    if any(getattr(m,'denominator',1) != 1 for m in mu):
      return 0
    mu = tuple(int(m) for m in mu)
    if not self.lazy:
      return self._multiplicities.get(mu,0)
    with self._lock:
      if mu in self._multiplicities:
        return self._multiplicities[mu]
      dom,word = _to_dominant(self.algebra, mu)
      if not self.algebra.is_below(self._highest, dom):
        return 0
      return self._resolve(dom)

  def _coords(self, weight):
    if isinstance(weight, Weight):
      if weight.algebra != self.algebra:
        raise AlgebraMismatchError(self.algebra, weight.algebra)
      return weight.coords
    coords = tuple(weight)
    if len(coords) != self.algebra.rank:
      raise KeyError(weight)
    return coords

  def __getitem__(self, weight):
    return self.multiplicity(self._coords(weight))

  def __contains__(self, weight):
    return self[weight] > 0

  def _snapshot(self):
    if self.lazy:
      with self._lock:
        return dict(self._multiplicities)
    return self._multiplicities

  def __iter__(self):
    algebra = self.algebra
    for mu in list(self._snapshot()):
      yield Weight._make(algebra, (Fraction(m) for m in mu))

  def __len__(self):
    return len(self._snapshot())

  def items(self):
    algebra = self.algebra
    return [(Weight._make(algebra, (Fraction(m) for m in mu)),m) \
      for mu,m in self._snapshot().items()]

  @property
  def dim(self):
    if self.lazy:
      return self.irrep.dim
    return sum(self._multiplicities.values())

  def dominant_items(self):
    """Dict of dominant weights (as label tuples) to multiplicities"""
    if self.lazy:
      raise ValueError('Dominant weights require an eager character')
    return {mu:m for mu,m in self._multiplicities.items() \
      if all(c >= 0 for c in mu)}

  def __repr__(self):
    return '<%s character of %r>'%('lazy' if self.lazy else 'eager',self.irrep)


def character(irrep, lazy=False):
  if lazy:
    return Character(irrep, lazy=True)
  return irrep.algebra.get_character(irrep.labels)

def dominant_weights(irrep):
  return dict(irrep.algebra.get_character(irrep.labels).dominant_items())
