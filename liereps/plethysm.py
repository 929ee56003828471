"""Plethysms from Adams operations and symmetric-group characters

plethysm(V, lambda) = sum over cycle types p of |C_p| chi^lambda(p)/N!
                      * psi^{p_1}(V) x psi^{p_2}(V) x ...
with psi^n the Adams operations, computed as virtual representations.
"""
import functools
from fractions import Fraction
from math import factorial
from . import config
from .config import plethysm_log as logger
from .weights import Weight
from .weyl import _orbit_levels,_to_dominant
from .irreps import Irrep,Rep
from .tensor import tensor_product
from .symmetric import SymmetricIrrep,ConjugacyClass,all_partitions
from .symmetric import character as sym_character
from .symmetric import conjugacy_class_size
from .errors import AlgebraMismatchError,NonIntegralPlethysmError


def _alternating_dominant(algebra, weights, word):
  rows = algebra._simple_root_rows
  current = weights
  for k in word:
    # Fresh map at every step
    step = {}
    row = rows[k]
    for lam,n in current.items():
      c = lam[k]
      if c >= 0:
        step[lam] = step.get(lam,0) + n
      elif c != -1:
        # Dot action: s_k(lam + rho) - rho = lam - (c+1) alpha_k
        lam = tuple(l - (c+1)*a for l,a in zip(lam,row))
        step[lam] = step.get(lam,0) - n
    current = step
  return {lam:n for lam,n in current.items() if n}

def alternating_dominant(weights, word):
  """Straighten a map weight -> multiplicity with the dot action along the
  WeylWord word (processed left to right): terms on a shifted wall (label
  -1) cancel, terms with label <= -2 are reflected with a change of sign"""
  algebra = word.algebra
  coords = {}
  for w,n in weights.items():
    if w.algebra != algebra:
      raise AlgebraMismatchError(algebra, w.algebra)
    coords[w.coords] = coords.get(w.coords,0) + n
  result = _alternating_dominant(algebra, coords, word)
  return {Weight._make(algebra, lam):n for lam,n in result.items()}

def _virtual_decomposition(algebra, mu):
  dom,word = _to_dominant(algebra, mu)
  orbit = {}
  for level in _orbit_levels(algebra, dom):
    for nu in level:
      orbit[nu] = 1
  return _alternating_dominant(algebra, orbit, algebra.longest_word)

def virtual_decomposition(weight):
  """Signed dominant weights from the Weyl orbit of weight (each orbit
  element with multiplicity 1) after straightening by the longest element"""
  algebra = weight.algebra
  result = _virtual_decomposition(algebra, weight.coords)
  return {Weight._make(algebra, lam):n for lam,n in result.items()}

def adams(n, irrep):
  """Adams operation psi^n on irrep, as a (virtual) Rep"""
  if isinstance(n, bool) or not isinstance(n, int) or n < 1:
    raise ValueError('Adams operation requires positive integer, got %r'%(n,))
  algebra = irrep.algebra
  comps = {}
  for mu,m in irrep.algebra.get_character(irrep.labels).dominant_items().items():
    numu = tuple(n*c for c in mu)
    for lam,k in _virtual_decomposition(algebra, numu).items():
      comps[lam] = comps.get(lam,0) + m*k
  rep = Rep(algebra, {lam:k for lam,k in comps.items() if k})
  logger.debug('psi^%d %r = %r',n,irrep,rep)
  return rep

def plethysm(irrep, sym_irrep):
  """Decompose the plethysm of irrep with the symmetric-group irrep"""
  if not isinstance(sym_irrep, SymmetricIrrep):
    sym_irrep = SymmetricIrrep(sym_irrep)
  algebra = irrep.algebra
  N = sym_irrep.degree
  trivial = Rep.from_irrep(Irrep._make(algebra, algebra.triv))
  adams_cache = {}
  def adams_rep(k):
    if k not in adams_cache:
      adams_cache[k] = adams(k, irrep)
    return adams_cache[k]
  coeffs = {}
  for p in all_partitions(N):
    cc = ConjugacyClass(p)
    chi = sym_character(sym_irrep, cc)
    if not chi:
      continue
    weight = Fraction(conjugacy_class_size(cc)*chi, factorial(N))
    if config.verbose >= 3:
      logger.log(config.PROGRESS,'Plethysm %r, %r: class %s weight %s',
        irrep,sym_irrep,list(p),weight)
    product = functools.reduce(tensor_product,
      (adams_rep(k) for k in p), trivial)
    for r,n in product.components.items():
      coeffs[r] = coeffs.get(r,0) + weight*n
  comps = {}
  for r,c in coeffs.items():
    if c.denominator != 1 or c < 0:
      raise NonIntegralPlethysmError(r, c)
    if c:
      comps[r] = c.numerator
  return Rep(algebra, comps)

def symmetric_power(n, irrep):
  return plethysm(irrep, SymmetricIrrep((n,)))

def antisymmetric_power(n, irrep):
  return plethysm(irrep, SymmetricIrrep(n*(1,)))
