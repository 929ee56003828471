from fractions import Fraction
import numpy as np
import pytest
from liereps.rationallinalg import rarray, reye, invert, integralize, rdot


class TestInvert:
  def test_a2(self):
    inv = invert([[2,-1],[-1,2]])
    assert inv.tolist() == [[Fraction(2,3),Fraction(1,3)],
      [Fraction(1,3),Fraction(2,3)]]

  def test_product_is_identity(self):
    M = [[2,-1,0,0],[-1,2,-2,0],[0,-1,2,-1],[0,0,-1,2]]
    assert np.all(rdot(M,invert(M)) == reye(4))

  def test_singular(self):
    with pytest.raises(np.linalg.LinAlgError):
      invert([[1,2],[2,4]])
    with pytest.raises(ValueError):
      invert([[1,2,3],[4,5,6]])


class TestConversion:
  def test_rejects_floats(self):
    with pytest.raises(TypeError):
      rarray([1,0.5])

  def test_integralize(self):
    iarr,div = integralize(rarray([[Fraction(1,2),Fraction(1,3)],[1,0]]))
    assert div == 6
    assert iarr.tolist() == [[3,2],[6,0]]
