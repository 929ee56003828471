from .groups import *
import numpy as np
from collections import deque
from fractions import Fraction
from math import factorial,lcm
from .rationallinalg import invert as inverse_rational
from .rationallinalg import integralize,rarray
from .weights import Weight
from .weyl import WeylWord,_to_dominant
from .errors import ConsistencyError
from . import config

_valid_ranks = {'A':lambda n: n >= 1, 'B':lambda n: n >= 2,
  'C':lambda n: n >= 2, 'D':lambda n: n >= 3, 'E':lambda n: n in (6,7,8),
  'F':lambda n: n == 4, 'G':lambda n: n == 2}

def dynkin_to_cartan(series, rank):
  # Obtain Cartan matrix given label of Dynkin diagram
  # Row i gives simple root i in the fundamental-weight basis,
  # A[i,j] = 2(alpha_i,alpha_j)/(alpha_j,alpha_j)
  if series not in _valid_ranks or not _valid_ranks[series](rank):
    raise ValueError('Invalid Lie algebra %s_%s'%(series,rank))
  A = 2*np.eye(rank,dtype=int)
  if series == 'A':
    # Off-diagonal elements all -1
    A[range(rank-1),range(1,rank)] = -1
    A[range(1,rank),range(rank-1)] = -1
  elif series == 'B':
    A[range(rank-1),range(1,rank)] = -1
    A[range(1,rank),range(rank-1)] = -1
    # Final root is shorter
    A[-2,-1] = -2
  elif series == 'C':
    A[range(rank-1),range(1,rank)] = -1
    A[range(1,rank),range(rank-1)] = -1
    # Final root is longer
    A[-1,-2] = -2
  elif series == 'D':
    A[range(rank-2),range(1,rank-1)] = -1
    A[range(1,rank-1),range(rank-2)] = -1
    # Edge between final root & 3rd-to-last root
    A[-3,-1] = -1
    A[-1,-3] = -1
  elif series == 'E':
    A[range(rank-2),range(1,rank-1)] = -1
    A[range(1,rank-1),range(rank-2)] = -1
    # Branch node attached to the third node of the chain
    A[2,-1] = -1
    A[-1,2] = -1
  elif series == 'F':
    A[range(3),range(1,4)] = -1
    A[range(1,4),range(3)] = -1
    # Roots 2 & 3 are short
    A[1,2] = -2
  elif series == 'G':
    # Root 0 is short
    A[0,1] = -1
    A[1,0] = -3
  else:
    raise ValueError('Unknown series %s'%series)
  return A

def ituple(arr):
  # This one's for numpy's integer arrays
  return tuple(int(i) for i in arr)

def _intscale(v):
  # Rational vector -> (integer vector, denominator)
  d = 1
  for x in v:
    if not isinstance(x, int):
      d = lcm(d,x.denominator)
  if d == 1:
    return [int(x) for x in v],1
  return [int(x*d) for x in v],d


class SimpleLieAlgebra(Group):
  def __init__(self, series, rank):
    """Pass A-G series label & rank of Lie algebra"""
    # Roots are hashed by label, so set it ahead of GroupType
    self.label = self.get_identifier(series, rank)
    self._CK_series = series
    self._rank = rank
    self._cartan_matrix = dynkin_to_cartan(series, rank)
    C = self._cartan_matrix
    self._simple_root_rows = [ituple(row) for row in C]
    # Squared lengths of simple roots, from asymmetry of Cartan matrix
    # (alpha_j,alpha_j)/(alpha_i,alpha_i) = C[j,i]/C[i,j]
    lsqs = rank*[None]
    lsqs[0] = Fraction(1)
    queue = deque([0])
    while queue:
      i = queue.popleft()
      for j in np.flatnonzero(C[i]):
        if lsqs[j] is None:
          lsqs[j] = lsqs[i]*int(C[j,i])/int(C[i,j])
          queue.append(j)
    # Normalize according to convention long roots have squared length 2
    maxsq = max(lsqs)
    self._rootlengthsquared = tuple(2*l/maxsq for l in lsqs)
    # Inverse Cartan matrix gives fundamental weights in terms of simple roots
    self._cartan_inverse = inverse_rational(C)
    self._cartan_inverse_int = integralize(self._cartan_inverse)
    # Gram matrix of fundamental weights, G = C^-1 T C^-T with
    # T[i,j] = C[i,j] (alpha_j,alpha_j)/2, i.e. G = (D/2) C^-T
    self._quad_form = self._cartan_inverse.T * \
      rarray(self._rootlengthsquared)[:,None] * Fraction(1,2)
    if not config.no_strict_checks and \
        not np.all(self._quad_form == self._quad_form.T):
      raise ConsistencyError('Quadratic form for %s%d not symmetric'\
        %(series,rank))
    # Quadratic form expressed as integer matrix divided by scalar integer
    F,div = integralize(self._quad_form)
    self._quad_form_int = ([[int(x) for x in row] for row in F],div)
    self._simple_roots = tuple(Weight(self, row) for row in C)
    self._construct_roots()
    self._characters = {}
    super().__init__()

  def _construct_roots(self):
    # Positive roots by closure: if the i-th label of a root is -k < 0,
    # then beta + alpha_i, ..., beta + k alpha_i are roots
    rank = self._rank
    rows = self._simple_root_rows
    seen = set(rows)
    queue = deque(rows)
    while queue:
      beta = queue.popleft()
      for i in range(rank):
        if beta[i] < 0:
          gamma = beta
          for k in range(-beta[i]):
            gamma = tuple(b+a for b,a in zip(gamma,rows[i]))
            if gamma not in seen:
              seen.add(gamma)
              queue.append(gamma)
    # Sort by height, then labels
    coeffs = {beta:self.root_coefficients(beta) for beta in seen}
    for beta,c in coeffs.items():
      if any(ci < 0 or ci.denominator != 1 for ci in c):
        raise ConsistencyError('Root %s of %s has coefficients %s'\
          %(beta,self.label_string,c))
    roots = sorted(seen, key=lambda beta: (sum(coeffs[beta]),beta))
    self._root_labels = roots
    self._root_coeffs = [tuple(int(c) for c in coeffs[beta]) for beta in roots]
    self._root_heights = [sum(c) for c in self._root_coeffs]
    # Coefficients in basis "dual" to fundamental weights:
    # 2(mu,beta) = sum_i mu_i c_i (alpha_i,alpha_i), stored scaled to integers
    lsq_int,self._lsq_div = _intscale(self._rootlengthsquared)
    self._root_colabels = [tuple(c*l for c,l in zip(cs,lsq_int)) \
      for cs in self._root_coeffs]
    self._positive_roots = frozenset(Weight._make(self, \
      (Fraction(b) for b in beta)) for beta in roots)
    self._highest_root = roots[-1]
    self._marks = self._root_coeffs[-1]
    # Weyl vector
    rho2 = [sum(beta[i] for beta in roots) for i in range(rank)]
    if not config.no_strict_checks and any(r != 2 for r in rho2):
      raise ConsistencyError('Weyl vector of %s is not (1,...,1): %s'\
        %(self.label_string,[Fraction(r,2) for r in rho2]))
    self._weyl_vector = Weight._make(self, (Fraction(r,2) for r in rho2))
    self._longest_word = None

  @classmethod
  def get_identifier(cls, series, rank):
    if series not in _valid_ranks or isinstance(rank,bool) or \
        not isinstance(rank,int) or not _valid_ranks[series](rank):
      raise ValueError('Invalid Lie algebra %s_%s'%(series,rank))
    return '%s~%d'%(series,rank)

  @property
  def series(self):
    return self._CK_series

  @property
  def rank(self):
    return self._rank

  @property
  def label_string(self):
    return '%s_%d'%(self._CK_series,self._rank)

  def __repr__(self):
    return self.label_string

  def __eq__(self, other):
    if not isinstance(other, SimpleLieAlgebra):
      return NotImplemented
    return self.label == other.label

  def __hash__(self):
    return hash(self.label)

  @property
  def cartan_matrix(self):
    return self._cartan_matrix.copy()

  @property
  def root_lengths(self):
    """Squared lengths of simple roots (longest = 2)"""
    return self._rootlengthsquared

  @property
  def simple_roots(self):
    return self._simple_roots

  @property
  def positive_roots(self):
    return self._positive_roots

  @property
  def num_positive_roots(self):
    return len(self._root_labels)

  @property
  def weyl_vector(self):
    return self._weyl_vector

  @property
  def highest_root(self):
    return Weight._make(self, (Fraction(b) for b in self._highest_root))

  @property
  def marks(self):
    return self._marks

  @property
  def dimension(self):
    return 2*len(self._root_labels) + self.rank

  @property
  def dual_coxeter_number(self):
    h = sum(m*l for m,l in zip(self._marks,self._rootlengthsquared))/2 + 1
    if h.denominator != 1:
      raise ConsistencyError('Non-integral dual Coxeter number %s'%h)
    return int(h)

  @property
  def adjoint_labels(self):
    return self._highest_root

  @property
  def weyl_group_order(self):
    n = self._rank
    if self._CK_series == 'A':
      return factorial(n+1)
    elif self._CK_series in ('B','C'):
      return 2**n * factorial(n)
    elif self._CK_series == 'D':
      return 2**(n-1) * factorial(n)
    elif self._CK_series == 'E':
      return {6:51840, 7:2903040, 8:696729600}[n]
    elif self._CK_series == 'F':
      return 1152
    elif self._CK_series == 'G':
      return 12
    raise ValueError('Unknown series %s'%self._CK_series)

  @property
  def longest_word(self):
    if self._longest_word is None:
      dom,word = _to_dominant(self, self.rank*(-1,))
      if not config.no_strict_checks and \
          (len(word) != self.num_positive_roots or dom != self.rank*(1,)):
        raise ConsistencyError('Longest word %s for %s has wrong length'\
          %(word,self.label_string))
      self._longest_word = WeylWord(self, word)
    return self._longest_word

  def root_coefficients(self, mu):
    """Coordinates of mu (fundamental-weight basis) in basis of simple roots"""
    Cinv,div = self._cartan_inverse_int
    v,d = _intscale(mu)
    return tuple(Fraction(int(sum(v[i]*Cinv[i,j] for i in range(self._rank))),
      d*div) for j in range(self._rank))

  def is_below(self, lam, mu):
    """Whether lam - mu is a non-negative integer combination of simple
    roots (lam, mu in fundamental-weight coordinates)"""
    Cinv,div = self._cartan_inverse_int
    diff,d = _intscale([l-m for l,m in zip(lam,mu)])
    div *= d
    for j in range(self._rank):
      c = sum(diff[i]*Cinv[i,j] for i in range(self._rank))
      if c < 0 or c % div:
        return False
    return True

  def inner_product(self, mu, nu):
    """Invariant inner product of weights given by fundamental-weight
    coordinates mu & nu"""
    F,div = self._quad_form_int
    a,da = _intscale(mu)
    b,db = _intscale(nu)
    rank = self._rank
    total = 0
    for i in range(rank):
      if a[i]:
        Fi = F[i]
        total += a[i]*sum(Fi[j]*b[j] for j in range(rank))
    return Fraction(total, div*da*db)

  def root_pairing(self, mu, idx):
    """(mu, beta) for beta the positive root of index idx"""
    return Fraction(sum(m*c for m,c in zip(mu,self._root_colabels[idx])),
      2*self._lsq_div)

  @property
  def triv(self):
    return self.rank*(0,)

  def isrep(self, l):
    if not isinstance(l,tuple) or len(l) != self.rank:
      return False
    return all(isinstance(li,int) and not isinstance(li,bool) and li >= 0 \
      for li in l)

  def _fdim(self, lam):
    # Weyl dimension formula, with (lambda+rho, beta) from coroot labels
    if not any(lam):
      return 1
    d = Fraction(1)
    for colabel in self._root_colabels:
      d *= Fraction(sum((li+1)*c for li,c in zip(lam,colabel)),sum(colabel))
    if d.denominator != 1:
      raise ConsistencyError('Non-integral dimension %s for %s'%(d,lam))
    return d.numerator

  def irrep_order(self, lam):
    # Tuple (dimension, Dynkin indices) to yield complete ordering on irreps
    return (self.dim(lam),lam)

  def _fdual(self, lam):
    # Negative of the action of the longest element of the Weyl group
    if self._CK_series == 'A':
      lbar = lam[::-1]
    elif self._CK_series == 'D' and self._rank % 2:
      lbar = lam[:-2] + lam[-1:-3:-1]
    elif self._CK_series == 'E' and self._rank == 6:
      lbar = lam[-2::-1] + (lam[-1],)
    else:
      lbar = lam
    if not config.no_strict_checks:
      w0lam = self.longest_word.apply(Weight._make(self,lam))
      if lbar != tuple(-int(c) for c in w0lam.coords):
        raise ConsistencyError('Dual of %s: expected %s, got -w0 = %s'\
          %(lam,lbar,w0lam))
    return lbar

  def _ffusion(self, lambda1, lambda2):
    # Use character of lower-dimensional irrep
    if self.irrep_order(lambda1) > self.irrep_order(lambda2):
      lambda1,lambda2 = lambda2,lambda1
    if not any(lambda1):
      return [(lambda2,1)]
    return klimyk(self, lambda1, lambda2)

  def get_character(self, lam):
    """Eager character of irrep with labels lam (memoized if
    config.memo_characters)"""
    if lam in self._characters:
      return self._characters[lam]
    self.verify_rep(lam)
    char = Character(Irrep(self, lam))
    if config.memo_characters:
      self._characters[lam] = char
    return char

  def clear_caches(self):
    super().clear_caches()
    self._characters.clear()

  def quadratic_casimir(self, lam):
    lam = tuple(Fraction(l) for l in lam)
    lam2rho = tuple(l+2 for l in lam)
    return self.inner_product(lam, lam2rho)/2

  def dynkin_index(self, lam):
    return self.dim(lam)*self.quadratic_casimir(lam)/self.dimension

  def __reduce__(self):
    return self.__class__, (self._CK_series, self.rank)


def cartan_matrix(algebra):
  return algebra.cartan_matrix

def A_series(n):
  return SimpleLieAlgebra('A',n)

def B_series(n):
  return SimpleLieAlgebra('B',n)

def C_series(n):
  return SimpleLieAlgebra('C',n)

def D_series(n):
  return SimpleLieAlgebra('D',n)

def E_series(n):
  return SimpleLieAlgebra('E',n)

def F_series(n):
  return SimpleLieAlgebra('F',n)

def G_series(n):
  return SimpleLieAlgebra('G',n)

def SU(n):
  """su(n) = A_{n-1}"""
  if n < 2:
    raise ValueError('SU(n) requires n >= 2')
  return A_series(n-1)

def SO(n):
  """so(n): B_k for n = 2k+1, D_k for n = 2k"""
  if n < 5:
    raise ValueError('SO(n) requires n >= 5')
  if n % 2:
    return B_series((n-1)//2)
  return D_series(n//2)

def Sp(n):
  """sp(n) = C_{n/2} for even n"""
  if n < 4 or n % 2:
    raise ValueError('Sp(n) requires even n >= 4')
  return C_series(n//2)


from .characters import Character
from .irreps import Irrep
from .tensor import klimyk
