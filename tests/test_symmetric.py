from math import factorial
import pickle
import pytest
from liereps import (Partition, SymmetricIrrep, ConjugacyClass,
  SymmetricGroup, all_partitions, conjugacy_class_size, hook_length,
  character_table, dimension, InvalidLabelError)
from liereps.symmetric import character


class TestPartitions:
  def test_counts(self):
    assert [len(all_partitions(n)) for n in range(8)] == [1,1,2,3,5,7,11,15]

  def test_order(self):
    assert all_partitions(4) == [(4,),(3,1),(2,2),(2,1,1),(1,1,1,1)]

  def test_empty(self):
    assert all_partitions(0) == [Partition()]
    assert Partition().size == 0

  def test_validation(self):
    with pytest.raises(InvalidLabelError):
      Partition((1,2))
    with pytest.raises(InvalidLabelError):
      Partition((2,-1))
    with pytest.raises(ValueError):
      all_partitions(-1)

  def test_conjugate(self):
    assert Partition((3,1)).conjugate() == (2,1,1)
    assert Partition((2,2)).conjugate() == (2,2)
    assert Partition((4,2,1)).conjugate().conjugate() == (4,2,1)


class TestCharacters:
  def test_class_sizes(self):
    assert [conjugacy_class_size(ConjugacyClass(p)) for p in
      all_partitions(3)] == [2,3,1]
    assert conjugacy_class_size(ConjugacyClass((2,2))) == 3

  def test_s3(self):
    chi = [character(SymmetricIrrep((2,1)),ConjugacyClass(p))
      for p in all_partitions(3)]
    assert chi == [-1,0,2]

  def test_sign(self):
    for p in all_partitions(5):
      cc = ConjugacyClass(p)
      sign = (-1)**(5-len(p))
      assert character(SymmetricIrrep(5*(1,)),cc) == sign
      assert character(SymmetricIrrep((5,)),cc) == 1

  def test_degree_mismatch(self):
    assert character(SymmetricIrrep((2,1)),ConjugacyClass((2,))) == 0

  @pytest.mark.parametrize('n',[3,4,5,6])
  def test_orthogonality(self, n):
    table = character_table(n)
    parts = all_partitions(n)
    for mu in parts:
      for nu in parts:
        total = sum(table[lam,mu]*table[lam,nu] for lam in parts)
        if mu == nu:
          assert total == factorial(n)//conjugacy_class_size(ConjugacyClass(mu))
        else:
          assert total == 0

  def test_identity_column_is_dimension(self):
    table = character_table(5)
    for lam in all_partitions(5):
      assert table[lam,(1,1,1,1,1)] == dimension(SymmetricIrrep(lam))


class TestDimensions:
  def test_hooks(self):
    assert hook_length((3,2),0,0) == 4
    assert hook_length((3,2),1,1) == 1
    assert hook_length((3,2),0,2) == 1

  def test_values(self):
    assert dimension(SymmetricIrrep((2,2))) == 2
    assert dimension(SymmetricIrrep((3,2))) == 5
    assert dimension(SymmetricIrrep((3,2,1))) == 16
    assert dimension(SymmetricIrrep(())) == 1

  @pytest.mark.parametrize('n',[4,6])
  def test_sum_of_squares(self, n):
    total = sum(dimension(SymmetricIrrep(p))**2 for p in all_partitions(n))
    assert total == factorial(n)


class TestSymmetricGroup:
  def test_singleton(self):
    assert SymmetricGroup(4) is SymmetricGroup(4)
    assert pickle.loads(pickle.dumps(SymmetricGroup(4))) is SymmetricGroup(4)
    assert SymmetricGroup(4).order == 24

  def test_kronecker(self):
    S3 = SymmetricGroup(3)
    assert S3.fusion(Partition((2,1)),Partition((2,1))) == \
      [((1,1,1),1),((2,1),1),((3,),1)]
    assert S3.fusion(Partition((1,1,1)),Partition((2,1))) == [((2,1),1)]

  def test_kronecker_dimensions(self):
    S4 = SymmetricGroup(4)
    for a in all_partitions(4):
      for b in all_partitions(4):
        assert S4.sumdims(S4.fusion(a,b)) == S4.dim(a)*S4.dim(b)

  def test_invalid(self):
    with pytest.raises(InvalidLabelError):
      SymmetricGroup(3).dim(Partition((2,2)))
    with pytest.raises(ValueError):
      SymmetricGroup(-1)
