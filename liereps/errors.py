"""Exceptions raised by liereps"""


class LieRepError(Exception):
  pass


class AlgebraMismatchError(LieRepError, ValueError):
  """Operands belong to different algebras"""
  def __init__(self, left, right):
    super().__init__('Algebra mismatch: %r vs %r'%(left, right))
    self.left = left
    self.right = right


class InvalidLabelError(LieRepError, ValueError):
  """Dynkin labels (or reflection indices) that do not name anything"""
  pass


class ConsistencyError(LieRepError, ArithmeticError):
  """Internal inconsistency, e.g. non-integral multiplicity or a
  reflection sequence that fails to terminate"""
  pass


class NonIntegralPlethysmError(ConsistencyError):
  def __init__(self, irrep, coeff):
    super().__init__('Plethysm coefficient %s for %r is not a non-negative '
      'integer'%(coeff, irrep))
    self.irrep = irrep
    self.coeff = coeff
