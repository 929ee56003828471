"""Tensor-product decomposition by Klimyk's formula"""
from . import config
from .config import tensor_log as logger
from .weyl import _to_dominant
from .irreps import Irrep,Rep
from .errors import AlgebraMismatchError,ConsistencyError


def klimyk(algebra, lam_small, lam_big):
  """Decompose irrep lam_small x irrep lam_big, using the character of
  lam_small. Returns list of (labels, multiplicity)"""
  char = algebra.get_character(lam_small)
  shift = tuple(l+1 for l in lam_big)
  decomp = {}
  for mu,m in char._multiplicities.items():
    nu = tuple(s+c for s,c in zip(shift,mu))
    dom,word = _to_dominant(algebra, nu)
    # Subtract rho; weights on a wall cancel
    if not all(dom):
      continue
    lam = tuple(d-1 for d in dom)
    if len(word) % 2:
      decomp[lam] = decomp.get(lam,0) - m
    else:
      decomp[lam] = decomp.get(lam,0) + m
  fusion = [(lam,n) for lam,n in decomp.items() if n]
  logger.debug('%s x %s -> %d irreps',lam_small,lam_big,len(fusion))
  if not config.no_strict_checks:
    if any(n < 0 for lam,n in fusion):
      raise ConsistencyError('Negative multiplicity in %s x %s: %s'\
        %(lam_small,lam_big,fusion))
    total = sum(algebra.dim(lam)*n for lam,n in fusion)
    if total != algebra.dim(lam_small)*algebra.dim(lam_big):
      raise ConsistencyError('Dimension mismatch in %s x %s: %d'\
        %(lam_small,lam_big,total))
  return fusion

def _as_rep(x):
  if isinstance(x, Irrep):
    return Rep.from_irrep(x)
  if isinstance(x, Rep):
    return x
  raise TypeError('Expected Irrep or Rep, got %s'%type(x).__name__)

def tensor_product(a, b):
  """Decompose a x b into irreps (a, b each Irrep or Rep)"""
  if a.algebra != b.algebra:
    raise AlgebraMismatchError(a.algebra, b.algebra)
  algebra = a.algebra
  if isinstance(a, Irrep) and isinstance(b, Irrep):
    return Rep(algebra, algebra.fusion(a.labels, b.labels))
  ra = _as_rep(a)
  rb = _as_rep(b)
  comps = {}
  for r1,n1 in ra.components.items():
    for r2,n2 in rb.components.items():
      for lam,n in algebra.fusion(r1.labels, r2.labels):
        comps[lam] = comps.get(lam,0) + n1*n2*n
  return Rep(algebra, comps)
