"""Exact linear algebra on numpy object arrays of Fractions"""
from fractions import Fraction
import numbers
import numpy as np
from math import lcm


def _fraction(x):
  if isinstance(x, Fraction):
    return x
  if isinstance(x, (int, np.integer)):
    return Fraction(int(x))
  if isinstance(x, numbers.Rational):
    return Fraction(x.numerator, x.denominator)
  raise TypeError('To convert to rational array, elements of array-like '
    'must be integer or rational, not %s'%type(x))

def rarray(arr):
  """Object array of Fractions from (nested) integer/rational sequence"""
  arr = np.array(arr, dtype=object)
  out = np.empty(arr.shape, dtype=object)
  for idx in np.ndindex(arr.shape):
    out[idx] = _fraction(arr[idx])
  return out

def rzeros(shape):
  out = np.empty(shape, dtype=object)
  out.fill(Fraction(0))
  return out

def reye(N):
  out = rzeros((N,N))
  for i in range(N):
    out[i,i] = Fraction(1)
  return out

def invert(M):
  # Doolittle-style elimination without pivoting; suitable for Cartan
  # matrices, whose leading principal minors are all positive
  reducer = rarray(M)
  N = reducer.shape[0]
  if reducer.shape != (N,N):
    raise ValueError('Expected square matrix, got shape %s'%(reducer.shape,))
  solver = reye(N)
  for k in range(N):
    for i in range(k):
      factor = reducer[k,i]
      solver[k] -= factor*solver[i]
      reducer[k] -= factor*reducer[i]
    if reducer[k,k] == 0:
      raise np.linalg.LinAlgError('Zero pivot at row %d'%k)
    solver[k] /= reducer[k,k]
    reducer[k] /= reducer[k,k]
  for k in range(N-2,-1,-1):
    for i in range(k+1,N):
      factor = reducer[k,i]
      solver[k] -= factor*solver[i]
      reducer[k] -= factor*reducer[i]
  return solver

def integralize(arr):
  """Express rational array as (integer array, common denominator)"""
  div = 1
  for entry in arr.flat:
    div = lcm(div, _fraction(entry).denominator)
  iarr = np.empty(arr.shape, dtype=object)
  for idx in np.ndindex(arr.shape):
    iarr[idx] = int(arr[idx]*div)
  return iarr,div

def rdot(a, b):
  """Exact product of rational matrices/vectors"""
  return np.dot(np.asarray(a, dtype=object), np.asarray(b, dtype=object))
